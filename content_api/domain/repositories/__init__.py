"""
Repository Interfaces - Abstract data access contracts

This module contains repository interfaces following the Repository Pattern:
- CacheRepository: Interface for caching operations

Infrastructure code implements these contracts, keeping the domain layer
independent of specific technologies.
"""

from .cache_repository import MISS, CacheLookup, CacheRepository

__all__ = [
    "CacheRepository",
    "CacheLookup",
    "MISS",
]
