"""
Value Objects - Immutable domain values

This module contains value objects:
- QueryParams: Validated listing parameters with a canonical fingerprint
- SortField / SortOrder: Ordering enums for listings
"""

from .query_params import MAX_LIMIT, MIN_LIMIT, QueryParams, SortField, SortOrder

__all__ = [
    "QueryParams",
    "SortField",
    "SortOrder",
    "MIN_LIMIT",
    "MAX_LIMIT",
]
