# content_api/core/exceptions.py - Custom exception hierarchy
from typing import Any


class ContentAPIException(Exception):  # noqa: N818
    """Base exception for content-api application"""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API responses"""
        return {"error": self.__class__.__name__, "message": self.message, "details": self.details}


class DataSourceUnavailableError(ContentAPIException):  # noqa: N818
    """Resource dataset could not be loaded"""

    pass


class ValidationError(ContentAPIException):  # noqa: N818
    """Input validation errors"""

    pass


class ResourceNotFoundError(ContentAPIException):  # noqa: N818
    """No resource matches the requested id"""

    pass


class ConfigurationError(ContentAPIException):  # noqa: N818
    """Configuration errors"""

    pass


# HTTP Status Code mapping
EXCEPTION_STATUS_CODE_MAP = {
    DataSourceUnavailableError: 503,
    ValidationError: 400,
    ResourceNotFoundError: 404,
    ConfigurationError: 500,
    ContentAPIException: 500,  # Default
}


def get_status_code(exception: ContentAPIException) -> int:
    """Get HTTP status code for exception"""
    return EXCEPTION_STATUS_CODE_MAP.get(type(exception), 500)
