"""
Resource Repository - Cache-aside reads over the resource dataset

Owns cache-key derivation and TTL policy:
- Single resources are cached for 5 minutes, listings for 1 minute
- Missing ids are never cached
- Listings are cached per page, keyed by the query fingerprint
"""

import logging

from ..core.logging_config import log_with_context
from ..data.dataset import Dataset
from ..domain.models import Resource, ResultEnvelope
from ..domain.repositories import CacheRepository
from ..domain.value_objects import QueryParams
from .query_engine import run_query

logger = logging.getLogger(__name__)

RESOURCE_TTL = 300
LIST_TTL = 60


class ResourceRepository:
    """Repository for reading resources through an injected cache"""

    def __init__(
        self,
        dataset: Dataset,
        cache: CacheRepository,
        resource_ttl: int = RESOURCE_TTL,
        list_ttl: int = LIST_TTL,
    ):
        """
        Initialize repository

        Args:
            dataset: Loaded resource dataset
            cache: Cache implementation shared according to deployment scope
            resource_ttl: TTL in seconds for single-resource entries
            list_ttl: TTL in seconds for listing envelopes
        """
        self.dataset = dataset
        self.cache = cache
        self.resource_ttl = resource_ttl
        self.list_ttl = list_ttl

    @staticmethod
    def resource_cache_key(resource_id: str) -> str:
        return f"resource:{resource_id}"

    @staticmethod
    def list_cache_key(params: QueryParams) -> str:
        return f"resources:{params.fingerprint()}"

    def find_by_id(self, resource_id: str) -> Resource | None:
        """
        Find a single resource by id

        Args:
            resource_id: Resource id

        Returns:
            The resource, or None when no resource has this id
        """
        cache_key = self.resource_cache_key(resource_id)

        cached = self.cache.get(cache_key)
        if cached.found:
            log_with_context(logger, "debug", "Cache hit", key=cache_key)
            return cached.value

        log_with_context(logger, "debug", "Cache miss", key=cache_key)
        resource = self._scan(resource_id)

        if resource is not None:
            self.cache.set(cache_key, resource, self.resource_ttl)

        return resource

    def find_all(self, params: QueryParams) -> ResultEnvelope:
        """
        Find resources with filtering, sorting and pagination

        Args:
            params: Validated query parameters

        Returns:
            ResultEnvelope for the requested page
        """
        cache_key = self.list_cache_key(params)

        cached = self.cache.get(cache_key)
        if cached.found:
            log_with_context(logger, "debug", "Cache hit", key=cache_key)
            return cached.value

        log_with_context(logger, "debug", "Cache miss", key=cache_key)
        envelope = run_query(self.dataset.resources, params)
        self.cache.set(cache_key, envelope, self.list_ttl)

        return envelope

    def count(self) -> int:
        """Total number of resources in the dataset"""
        return len(self.dataset)

    def _scan(self, resource_id: str) -> Resource | None:
        for resource in self.dataset:
            if resource.id == resource_id:
                return resource
        return None
