"""
Shared Response Models
Consistent response formats across polygon endpoints
"""
from pydantic import BaseModel
from typing import List, Optional


class BaseResponse(BaseModel):
    """Base response format"""
    status: str  # "success" or "error"
    error: Optional[str] = None


class BatchResponse(BaseResponse):
    """Response for GET /api/polygons/generate"""
    batch_id: Optional[int] = None
    requested: int = 0
    accepted_count: int = 0
    rejected_count: int = 0
    reconciled_count: int = 0
    accepted_names: List[str] = []
    duration_seconds: float = 0.0


class HealthResponse(BaseResponse):
    """Response for GET /api/health"""
    cached_polygons: int = 0
    cache_age_seconds: Optional[float] = None
