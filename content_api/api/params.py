"""
Request parameter parsing for the list endpoint

Turns raw query-string values into QueryParams. Out-of-range numbers and
unknown sort values are normalized; only an unknown type or platform is an
error.
"""

import re
from collections.abc import Mapping
from typing import Any

from ..core.exceptions import ValidationError
from ..domain.models import Platform, ResourceType
from ..domain.value_objects import QueryParams, SortField, SortOrder

VALID_TYPES = [t.value for t in ResourceType]
VALID_PLATFORMS = [p.value for p in Platform]

# Optional sign and ASCII digits only
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def query_int(value: str | None, default: int, minimum: int = 1, maximum: int = 100) -> int:
    """
    Parse an integer query value

    Args:
        value: Raw query-string value
        default: Returned when the value is missing, not an integer or below minimum
        minimum: Smallest accepted value
        maximum: Larger values are clamped to this

    Returns:
        Parsed and clamped integer
    """
    if value is None:
        return default
    value = value.strip()
    if not INTEGER_PATTERN.fullmatch(value):
        return default

    parsed = int(value)
    if parsed < minimum:
        return default
    return min(parsed, maximum)


def parse_list_params(raw: Mapping[str, str | None], pagination: Mapping[str, Any]) -> QueryParams:
    """
    Build QueryParams from raw query values

    Args:
        raw: Query values keyed by parameter name (missing = None)
        pagination: Pagination settings (default_page, max_page, default_limit, max_limit)

    Returns:
        Validated QueryParams

    Raises:
        ValidationError: If type or platform is not a known value
    """
    type_ = raw.get("type")
    if type_ is not None and type_ not in VALID_TYPES:
        raise ValidationError(
            f"Invalid type. Must be: {', '.join(VALID_TYPES)}", details={"type": type_}
        )

    platform = raw.get("platform")
    if platform is not None and platform not in VALID_PLATFORMS:
        raise ValidationError(
            f"Invalid platform. Must be: {', '.join(VALID_PLATFORMS)}",
            details={"platform": platform},
        )

    sort_by = raw.get("sort_by")
    try:
        sort_field = SortField(sort_by)
    except ValueError:
        sort_field = SortField.UPDATED_AT

    order = (raw.get("order") or "").lower()
    try:
        sort_order = SortOrder(order)
    except ValueError:
        sort_order = SortOrder.DESC

    return QueryParams(
        page=query_int(
            raw.get("page"), pagination["default_page"], 1, pagination["max_page"]
        ),
        limit=query_int(
            raw.get("limit"), pagination["default_limit"], 1, pagination["max_limit"]
        ),
        type=ResourceType(type_) if type_ is not None else None,
        platform=Platform(platform) if platform is not None else None,
        sort_by=sort_field,
        order=sort_order,
    )
