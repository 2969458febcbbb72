"""
Domain Layer - Business entities and contracts

This layer contains:
- Domain models: Resource and ResultEnvelope
- Repositories: Abstract interfaces for data access
- Value objects: Immutable domain values

Following Clean Architecture principles:
- Independent of frameworks and external libraries
- Independent of infrastructure (in-memory store, Redis, etc.)
- Testable without external dependencies
"""

from .models.resource import Platform, Resource, ResourceType
from .models.result_envelope import PageMeta, ResultEnvelope
from .repositories.cache_repository import MISS, CacheLookup, CacheRepository
from .value_objects.query_params import QueryParams, SortField, SortOrder

__all__ = [
    "Resource",
    "ResourceType",
    "Platform",
    "PageMeta",
    "ResultEnvelope",
    "QueryParams",
    "SortField",
    "SortOrder",
    "CacheRepository",
    "CacheLookup",
    "MISS",
]
