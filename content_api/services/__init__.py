"""
Services layer - Business logic

This module contains:
- ResourceRepository: cache-aside reads over the dataset
- query_engine: pure filter / sort / paginate functions
"""

from .resource_repository import ResourceRepository

__all__ = [
    "ResourceRepository",
]
