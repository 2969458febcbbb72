"""FastAPI dependencies resolving per-request collaborators from app state"""

from typing import Any

from fastapi import Request

from ..core.cache import InMemoryCache
from ..services.resource_repository import ResourceRepository

CACHE_SCOPES = ("process", "request")


def get_settings(request: Request) -> dict[str, Any]:
    return request.app.state.config


def get_repository(request: Request) -> ResourceRepository:
    """
    Repository for the current request

    With cache scope 'process' every request shares the repository built at
    startup. With scope 'request' each request gets a fresh cache over the
    shared dataset.
    """
    state = request.app.state
    if state.config["cache"]["scope"] == "request":
        return ResourceRepository(
            state.dataset,
            InMemoryCache(),
            resource_ttl=state.repository.resource_ttl,
            list_ttl=state.repository.list_ttl,
        )
    return state.repository
