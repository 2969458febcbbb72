"""Resources router - handles /resources and /resources/{id}"""
import re
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import Response

from ...core.exceptions import ResourceNotFoundError
from ...services.resource_repository import ResourceRepository
from ..dependencies import get_repository, get_settings
from ..etag import etag_matches, generate_etag, render_json
from ..models import ErrorResponse, ResourceListResponse, ResourceModel
from ..params import parse_list_params

RESOURCE_ID_PATTERN = re.compile(r"^[a-z0-9-]+$")

router = APIRouter()


def conditional_json(request: Request, payload: Any, max_age: int) -> Response:
    """
    Render payload with Cache-Control and ETag headers

    Returns 304 without a body when If-None-Match equals the ETag.
    """
    body = render_json(payload)
    etag = generate_etag(body)
    headers = {"Cache-Control": f"public, max-age={max_age}", "ETag": etag}

    if etag_matches(request.headers.get("if-none-match"), etag):
        return Response(status_code=304, headers=headers)

    return Response(content=body, media_type="application/json", headers=headers)


@router.get(
    "/resources",
    response_model=ResourceListResponse,
    responses={400: {"model": ErrorResponse}},
)
def list_resources(
    request: Request,
    page: str | None = None,
    limit: str | None = None,
    type: str | None = None,  # noqa: A002
    platform: str | None = None,
    sort_by: str | None = None,
    order: str | None = None,
    repository: ResourceRepository = Depends(get_repository),
    settings: dict = Depends(get_settings),
):
    """
    List resources with filtering, sorting and pagination

    Query params:
      - page: Page number (default: 1, max: 100)
      - limit: Items per page (default: 10, max: 50)
      - type: Filter by type (theme, plugin)
      - platform: Filter by platform (all, windows, macos, linux)
      - sort_by: Sort field (name, download_count, updated_at)
      - order: Sort order (asc, desc)
    """
    params = parse_list_params(
        {
            "page": page,
            "limit": limit,
            "type": type,
            "platform": platform,
            "sort_by": sort_by,
            "order": order,
        },
        settings["pagination"],
    )

    envelope = repository.find_all(params)
    return conditional_json(request, envelope.to_dict(), settings["http"]["list_max_age"])


@router.get(
    "/resources/{resource_id}",
    response_model=ResourceModel,
    responses={404: {"model": ErrorResponse}},
)
def get_resource(
    request: Request,
    resource_id: str,
    repository: ResourceRepository = Depends(get_repository),
    settings: dict = Depends(get_settings),
):
    """Get a single resource by id"""
    if not RESOURCE_ID_PATTERN.match(resource_id):
        raise HTTPException(404, "Not found")

    resource = repository.find_by_id(resource_id)
    if resource is None:
        raise ResourceNotFoundError(
            f"Resource not found: {resource_id}", details={"id": resource_id}
        )

    return conditional_json(request, resource.to_dict(), settings["http"]["detail_max_age"])
