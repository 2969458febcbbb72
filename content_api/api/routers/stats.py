"""Stats router - handles /stats/* endpoints"""
from fastapi import APIRouter, Depends

from ...services.resource_repository import ResourceRepository
from ..dependencies import get_repository, get_settings
from ..models import CacheStatsResponse

router = APIRouter()


@router.get("/cache", response_model=CacheStatsResponse)
def get_cache_stats(
    repository: ResourceRepository = Depends(get_repository),
    settings: dict = Depends(get_settings),
):
    """Get cache statistics"""
    stats = repository.cache.get_stats()
    return {
        "scope": settings["cache"]["scope"],
        "resource_count": repository.count(),
        **stats,
    }
