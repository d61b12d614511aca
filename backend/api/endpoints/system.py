"""
System Management Endpoints
==========================

Endpoints for system health monitoring.
"""

from fastapi import APIRouter
import logging

from pipelines.polygon.pipeline import get_polygon_pipeline
from utils.response_models import HealthResponse

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def check_system_health():
    """Cheap health: cache size and age, no store round-trip."""
    try:
        cache = get_polygon_pipeline().cache
        return HealthResponse(
            status="success",
            cached_polygons=len(cache.list()),
            cache_age_seconds=cache.age_seconds(),
        )
    except Exception as e:
        logger.error(f"❌ Health check failed: {e}")
        return HealthResponse(status="error", error=str(e))
