"""
Resource Domain Model

Represents a catalog entry (theme or plugin) with its sortable fields and
any extra attributes carried by the data source.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from types import MappingProxyType
from typing import Any


class ResourceType(str, Enum):
    THEME = "theme"
    PLUGIN = "plugin"


class Platform(str, Enum):
    ALL = "all"
    WINDOWS = "windows"
    MACOS = "macos"
    LINUX = "linux"


CORE_FIELDS = ("id", "name", "type", "platform", "download_count", "updated_at")


def parse_timestamp(value: Any) -> datetime:
    """
    Parse an ISO-8601 string or epoch number into an aware datetime.

    Naive values are taken as UTC so every timestamp in a dataset compares
    against every other.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, bool):
        raise ValueError(f"Invalid timestamp: {value!r}")
    elif isinstance(value, int | float):
        try:
            parsed = datetime.fromtimestamp(value, tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as e:
            raise ValueError(f"Timestamp out of range: {value!r}") from e
    elif isinstance(value, str):
        parsed = datetime.fromisoformat(value)
    else:
        raise ValueError(f"Invalid timestamp: {value!r}")

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_timestamp(value: datetime) -> str:
    """ISO-8601 with a Z suffix for UTC"""
    text = value.isoformat()
    if text.endswith("+00:00"):
        text = text[: -len("+00:00")] + "Z"
    return text


@dataclass(frozen=True)
class Resource:
    """
    Resource domain model representing one catalog entry.

    Instances are immutable: the dataset hands the same objects to every
    request and to the cache.
    """

    id: str
    name: str
    type: ResourceType
    platform: Platform
    download_count: int
    updated_at: datetime
    extra: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    def sort_value(self, field_name: str) -> Any:
        """Value used when ordering by field_name"""
        return getattr(self, field_name)

    def matches_platform(self, platform: Platform) -> bool:
        """Resources tagged 'all' match every platform."""
        return self.platform in (platform, Platform.ALL)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert resource to dictionary format for API responses.

        Returns:
            Core fields followed by the extra attributes, unchanged
        """
        result = {
            "id": self.id,
            "name": self.name,
            "type": self.type.value,
            "platform": self.platform.value,
            "download_count": self.download_count,
            "updated_at": format_timestamp(self.updated_at),
        }
        result.update(self.extra)
        return result

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "Resource":
        """
        Create Resource from a raw record.

        Args:
            raw: Mapping with at least the core fields

        Returns:
            New Resource instance

        Raises:
            ValueError: If a core field is missing or has the wrong shape
        """
        missing = [name for name in CORE_FIELDS if name not in raw]
        if missing:
            raise ValueError(f"Missing fields: {', '.join(missing)}")

        resource_id = raw["id"]
        if not isinstance(resource_id, str) or not resource_id:
            raise ValueError(f"Invalid id: {resource_id!r}")

        name = raw["name"]
        if not isinstance(name, str):
            raise ValueError(f"Invalid name for {resource_id}: {name!r}")

        download_count = raw["download_count"]
        if (
            isinstance(download_count, bool)
            or not isinstance(download_count, int)
            or download_count < 0
        ):
            raise ValueError(f"Invalid download_count for {resource_id}: {download_count!r}")

        extra = {key: value for key, value in raw.items() if key not in CORE_FIELDS}

        return cls(
            id=resource_id,
            name=name,
            type=ResourceType(raw["type"]),
            platform=Platform(raw["platform"]),
            download_count=download_count,
            updated_at=parse_timestamp(raw["updated_at"]),
            extra=MappingProxyType(extra),
        )
