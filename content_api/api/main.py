# content_api/api/main.py - FastAPI application
import secrets
from contextlib import asynccontextmanager
from http import HTTPStatus
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..core.cache import InMemoryCache
from ..core.config import load_config
from ..core.exceptions import ConfigurationError, ContentAPIException, get_status_code
from ..core.logging_config import get_logger, log_with_context, request_id_var, setup_logging
from ..data.dataset import Dataset, load_dataset
from ..domain.repositories import CacheRepository
from ..domain.value_objects import MAX_LIMIT, MIN_LIMIT
from ..services.resource_repository import ResourceRepository
from .dependencies import CACHE_SCOPES
from .models import ErrorResponse
from .routers import health, resources, stats

# Initialize structured logging
setup_logging(logger_name="content_api")
logger = get_logger(__name__)

ALLOWED_METHODS = ("GET",)

# Messages for errors raised by routing itself rather than by a handler
DEFAULT_ERROR_MESSAGES = {404: "Not found", 405: "Method not allowed"}


def generate_request_id() -> str:
    """16 hex characters used to correlate log lines for one request"""
    return secrets.token_hex(8)


def error_response(message: str, status: int, headers: dict[str, str] | None = None):
    """Standardised JSON error body"""
    body = ErrorResponse(error=HTTPStatus(status).phrase, message=message, status=status)
    return JSONResponse(status_code=status, content=body.model_dump(), headers=headers)


async def request_context_middleware(request: Request, call_next):
    """Assign a request id, log the request and reject non-GET methods"""
    request_id = generate_request_id()
    token = request_id_var.set(request_id)
    try:
        log_with_context(
            logger,
            "info",
            "Request received",
            method=request.method,
            path=request.url.path,
        )

        if request.method not in ALLOWED_METHODS:
            response = error_response(
                "Method not allowed", 405, headers={"Allow": ", ".join(ALLOWED_METHODS)}
            )
        else:
            try:
                response = await call_next(request)
            except Exception as e:
                # Not rendered by the app's handlers
                logger.error("Unhandled error", exc_info=e)
                response = error_response("Internal server error", 500)

        response.headers["X-Request-Id"] = request_id
        return response
    finally:
        request_id_var.reset(token)


async def content_api_exception_handler(request: Request, exc: ContentAPIException):
    """Handle custom application exceptions"""
    status = get_status_code(exc)
    if status >= 500:
        logger.error("Request failed: %s", exc.message, exc_info=exc)
    return error_response(exc.message, status)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render framework HTTP errors in the same body format"""
    message = exc.detail
    if message == HTTPStatus(exc.status_code).phrase:
        message = DEFAULT_ERROR_MESSAGES.get(exc.status_code, message)
    return error_response(str(message), exc.status_code, headers=getattr(exc, "headers", None))


async def unhandled_exception_handler(request: Request, exc: Exception):
    """Last-resort handler so clients always get the JSON error body"""
    logger.error("Unhandled error", exc_info=exc)
    return error_response("Internal server error", 500)


def create_app(
    config: dict[str, Any] | None = None,
    dataset: Dataset | None = None,
    cache: CacheRepository | None = None,
) -> FastAPI:
    """
    Build the application

    Args:
        config: Configuration dictionary. Defaults to load_config()
        dataset: Preloaded dataset. When omitted the configured data source
            is loaded at startup and a failure aborts startup
        cache: Cache shared by requests when the cache scope is 'process'

    Returns:
        Configured FastAPI application

    Raises:
        ConfigurationError: If the cache scope is unknown or max_limit is out of range
    """
    config = config or load_config()

    scope = config["cache"]["scope"]
    if scope not in CACHE_SCOPES:
        raise ConfigurationError(
            f"Invalid cache scope: {scope}. Must be: {', '.join(CACHE_SCOPES)}",
            details={"scope": scope},
        )

    max_limit = config["pagination"]["max_limit"]
    if not MIN_LIMIT <= max_limit <= MAX_LIMIT:
        raise ConfigurationError(
            f"Invalid pagination.max_limit: {max_limit}. Must be {MIN_LIMIT}-{MAX_LIMIT}",
            details={"max_limit": max_limit},
        )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        loaded = dataset if dataset is not None else load_dataset(config["data"]["source"])
        shared_cache = cache if cache is not None else InMemoryCache()

        app.state.dataset = loaded
        app.state.repository = ResourceRepository(
            loaded,
            shared_cache,
            resource_ttl=config["cache"]["resource_ttl"],
            list_ttl=config["cache"]["list_ttl"],
        )
        log_with_context(
            logger, "info", "Application started", resources=len(loaded), cache_scope=scope
        )
        yield
        shared_cache.clear()

    app = FastAPI(
        title="Content Discovery API",
        version="1.0.0",
        description="Read-only catalog of themes and plugins with caching and ETags.",
        lifespan=lifespan,
    )
    app.state.config = config

    app.add_exception_handler(ContentAPIException, content_api_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
    app.middleware("http")(request_context_middleware)

    app.include_router(health.router, tags=["Health"])
    app.include_router(resources.router, tags=["Resources"])
    app.include_router(stats.router, prefix="/stats", tags=["Stats"])

    return app


app = create_app()
