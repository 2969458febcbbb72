# content_api/api/models.py - Pydantic models for response documentation and rendering
from pydantic import BaseModel, Field


class ResourceModel(BaseModel):
    """Resource response model; extra catalog attributes pass through"""

    id: str
    name: str
    type: str = Field(..., description="theme or plugin")
    platform: str = Field(..., description="all, windows, macos or linux")
    download_count: int = Field(..., ge=0)
    updated_at: str = Field(..., description="ISO-8601 timestamp")

    class Config:
        extra = "allow"
        json_schema_extra = {
            "example": {
                "id": "midnight-theme",
                "name": "Midnight",
                "type": "theme",
                "platform": "all",
                "download_count": 15420,
                "updated_at": "2024-11-02T09:15:00Z",
                "author": "Aurora Studio",
            }
        }


class PageMetaModel(BaseModel):
    """Pagination metadata"""

    total: int
    page: int
    limit: int
    pages: int


class ResourceListResponse(BaseModel):
    """List endpoint response model"""

    data: list[ResourceModel]
    meta: PageMetaModel


class HealthResponse(BaseModel):
    """Health check response model"""

    status: str
    timestamp: str


class CacheStatsResponse(BaseModel):
    """Cache statistics response model"""

    scope: str
    resource_count: int
    backend: str
    size: int
    hits: int
    misses: int
    sets: int
    expired: int
    hit_rate: float


class ErrorResponse(BaseModel):
    """Error response model"""

    error: str
    message: str
    status: int
