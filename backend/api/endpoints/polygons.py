"""
Polygon API Endpoints
"""
from fastapi import APIRouter, HTTPException, Query, status
from starlette.concurrency import run_in_threadpool
from typing import List
import logging

from config import settings
from pipelines.polygon.errors import ValidationError
from pipelines.polygon.models import Polygon, PolygonSubmission
from pipelines.polygon.pipeline import get_polygon_pipeline
from services.polygon_store.base import StoreError
from utils.response_models import BatchResponse

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=List[Polygon])
async def list_polygons() -> List[Polygon]:
    """
    All stored polygons, served from the cache
    """
    return get_polygon_pipeline().list_cached()


@router.get("/generate", response_model=BatchResponse)
async def generate_polygons(
    size: int = Query(settings.BATCH_SIZE, ge=1, le=settings.BATCH_SIZE_MAX)
) -> BatchResponse:
    """
    Generate a batch of random polygons and store the ones that pass validation
    """
    pipeline = get_polygon_pipeline()
    try:
        # blocking fan-out/join, keep it off the event loop
        result = await run_in_threadpool(pipeline.generate_batch, size)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except StoreError as e:
        logger.error(f"❌ Batch generation failed: {e}")
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))

    return BatchResponse(status="success", **result.to_dict())


@router.get("/{name}", response_model=Polygon)
async def get_polygon(name: str) -> Polygon:
    """
    Look a polygon up by exact name
    """
    polygon = get_polygon_pipeline().lookup_by_name(name)
    if polygon is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="polygon not found")
    return polygon


@router.post("", response_model=Polygon, status_code=status.HTTP_201_CREATED)
async def create_polygon(request: PolygonSubmission) -> Polygon:
    """
    Validate and store a polygon given as an open, counter-clockwise ring
    """
    pipeline = get_polygon_pipeline()
    try:
        return await run_in_threadpool(pipeline.submit_polygon, request.points, request.name)
    except ValidationError as e:
        logger.info(f"Polygon '{request.name}' rejected: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except StoreError as e:
        logger.error(f"❌ Polygon '{request.name}' could not be stored: {e}")
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))
