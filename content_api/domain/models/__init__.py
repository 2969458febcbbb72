"""
Domain Models - Core business entities

This module contains the main business entities:
- Resource: A theme or plugin in the catalog
- ResultEnvelope: One page of a listing with its pagination metadata
"""

from .resource import Platform, Resource, ResourceType
from .result_envelope import PageMeta, ResultEnvelope

__all__ = [
    "Resource",
    "ResourceType",
    "Platform",
    "PageMeta",
    "ResultEnvelope",
]
