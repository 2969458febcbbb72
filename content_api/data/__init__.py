"""
Resource data source.

This package is responsible for:
* Loading the static JSON catalog shipped with the application.
* Validating records into immutable Resource objects.
* Rejecting the whole source when any record is malformed or duplicated.
"""

from .dataset import Dataset, load_dataset

__all__ = ["Dataset", "load_dataset"]
