"""Health router - handles /health"""
from datetime import datetime, timezone

from fastapi import APIRouter

from ..models import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health_check():
    """Health check endpoint"""
    return HealthResponse(status="healthy", timestamp=datetime.now(timezone.utc).isoformat())
