"""Static, ordered resource collection loaded once at startup."""

import json
import logging
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from typing import Any

from ..core.exceptions import DataSourceUnavailableError
from ..domain.models.resource import Resource

logger = logging.getLogger(__name__)


class Dataset:
    """
    Read-only sequence of resources in source order.

    Ids are unique; the collection is never mutated after construction.
    """

    def __init__(self, resources: Iterable[Resource]):
        self._resources: tuple[Resource, ...] = tuple(resources)

        seen: set[str] = set()
        for resource in self._resources:
            if resource.id in seen:
                raise DataSourceUnavailableError(
                    f"Duplicate resource id: {resource.id}", details={"id": resource.id}
                )
            seen.add(resource.id)

    @property
    def resources(self) -> tuple[Resource, ...]:
        return self._resources

    def __len__(self) -> int:
        return len(self._resources)

    def __iter__(self) -> Iterator[Resource]:
        return iter(self._resources)

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]]) -> "Dataset":
        """
        Build a dataset from raw records.

        Raises:
            DataSourceUnavailableError: If any record is malformed or an id repeats
        """
        resources = []
        for index, record in enumerate(records):
            if not isinstance(record, Mapping):
                raise DataSourceUnavailableError(
                    f"Record {index} is not an object", details={"index": index}
                )
            try:
                resources.append(Resource.from_dict(record))
            except ValueError as e:
                raise DataSourceUnavailableError(
                    f"Invalid resource record at index {index}: {e}",
                    details={"index": index},
                ) from e
        return cls(resources)


def load_dataset(path: str | Path) -> Dataset:
    """
    Load the resource catalog from a JSON file.

    The file holds either a list of records or an object with a
    ``resources`` list.

    Args:
        path: JSON file location

    Returns:
        Loaded Dataset

    Raises:
        DataSourceUnavailableError: If the file is missing, unreadable,
            not valid JSON, or contains invalid records
    """
    source = Path(path)
    try:
        with open(source, encoding="utf-8") as f:
            payload = json.load(f)
    except FileNotFoundError as e:
        raise DataSourceUnavailableError(
            f"Resource data file not found: {source}", details={"path": str(source)}
        ) from e
    except (OSError, json.JSONDecodeError) as e:
        raise DataSourceUnavailableError(
            f"Resource data file could not be read: {source}",
            details={"path": str(source), "reason": str(e)},
        ) from e

    if isinstance(payload, dict):
        payload = payload.get("resources")
    if not isinstance(payload, list):
        raise DataSourceUnavailableError(
            f"Resource data file must contain a list of resources: {source}",
            details={"path": str(source)},
        )

    dataset = Dataset.from_records(payload)
    logger.info("Loaded %d resources from %s", len(dataset), source)
    return dataset
