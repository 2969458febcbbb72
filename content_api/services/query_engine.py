"""
Query Engine - Filter, sort and paginate resources

Pure functions over sequences of resources. Inputs are trusted: limits are
already clamped and sort fields are enum members.
"""

from collections.abc import Sequence

from ..domain.models import PageMeta, Platform, Resource, ResourceType, ResultEnvelope
from ..domain.value_objects import QueryParams, SortField


def filter_by_type(resources: Sequence[Resource], type_: ResourceType | None) -> list[Resource]:
    if type_ is None:
        return list(resources)
    return [resource for resource in resources if resource.type is type_]


def filter_by_platform(
    resources: Sequence[Resource], platform: Platform | None
) -> list[Resource]:
    if platform is None:
        return list(resources)
    return [resource for resource in resources if resource.matches_platform(platform)]


def sort_resources(
    resources: Sequence[Resource], sort_by: SortField, descending: bool = False
) -> list[Resource]:
    """
    Stable sort on a single field.

    ``reverse=True`` inverts the comparison rather than the output, so
    resources with equal keys keep their input order in both directions.
    """
    return sorted(
        resources, key=lambda resource: resource.sort_value(sort_by.value), reverse=descending
    )


def paginate(resources: Sequence[Resource], offset: int, limit: int) -> list[Resource]:
    """Up to limit items from offset; empty when offset is past the end"""
    return list(resources[offset : offset + limit])


def run_query(resources: Sequence[Resource], params: QueryParams) -> ResultEnvelope:
    """
    Apply the full listing pipeline.

    Order: type filter, platform filter, total, sort, paginate. The total is
    taken after filtering and before pagination.

    Args:
        resources: Resources in source order
        params: Validated query parameters

    Returns:
        ResultEnvelope for the requested page
    """
    filtered = filter_by_type(resources, params.type)
    filtered = filter_by_platform(filtered, params.platform)
    total = len(filtered)

    ordered = sort_resources(filtered, params.sort_by, descending=params.descending)
    page = paginate(ordered, params.offset, params.limit)

    return ResultEnvelope(
        data=tuple(page),
        meta=PageMeta.build(total=total, page=params.page, limit=params.limit),
    )
