"""
QueryParams Value Object

Validated listing parameters and their canonical fingerprint.
"""

import hashlib
import json
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..models.resource import Platform, ResourceType

MIN_LIMIT = 1
MAX_LIMIT = 50


class SortField(str, Enum):
    NAME = "name"
    DOWNLOAD_COUNT = "download_count"
    UPDATED_AT = "updated_at"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class QueryParams:
    """
    QueryParams value object representing a validated listing query.

    Values are expected to be validated at the transport edge. Page and
    limit are clamped again here instead of being rejected.
    """

    page: int = 1
    limit: int = 10
    type: ResourceType | None = None
    platform: Platform | None = None
    sort_by: SortField = SortField.UPDATED_AT
    order: SortOrder = SortOrder.DESC

    def __post_init__(self):
        object.__setattr__(self, "page", max(1, self.page))
        object.__setattr__(self, "limit", min(max(MIN_LIMIT, self.limit), MAX_LIMIT))

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    @property
    def descending(self) -> bool:
        return self.order is SortOrder.DESC

    def to_dict(self) -> dict[str, Any]:
        """Plain JSON-compatible form with enum values as strings"""
        return {
            "page": self.page,
            "limit": self.limit,
            "type": self.type.value if self.type else None,
            "platform": self.platform.value if self.platform else None,
            "sort_by": self.sort_by.value,
            "order": self.order.value,
        }

    def canonical(self) -> str:
        """
        Canonical serialization: sorted keys and compact separators.

        Equal parameter sets serialize to the same string no matter how they
        were built.
        """
        return json.dumps(self.to_dict(), sort_keys=True, separators=(",", ":"))

    def fingerprint(self) -> str:
        """MD5 hex digest of the canonical serialization"""
        return hashlib.md5(self.canonical().encode("utf-8")).hexdigest()

    @classmethod
    def from_mapping(cls, params: Mapping[str, Any]) -> "QueryParams":
        """
        Create QueryParams from a mapping of already validated values.

        Args:
            params: Mapping with any subset of the field names; enum fields
                may be given as enum members or their string values

        Returns:
            New QueryParams instance
        """
        type_ = params.get("type")
        platform = params.get("platform")
        return cls(
            page=int(params.get("page", 1)),
            limit=int(params.get("limit", 10)),
            type=ResourceType(type_) if type_ else None,
            platform=Platform(platform) if platform else None,
            sort_by=SortField(params.get("sort_by", SortField.UPDATED_AT)),
            order=SortOrder(params.get("order", SortOrder.DESC)),
        )
