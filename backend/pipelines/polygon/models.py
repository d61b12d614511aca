"""
Polygon data model shared by the pipeline, the store and the API
"""
from typing import List

from pydantic import BaseModel, Field

# Coordinate plane bounds, checked by the geometry kernel (not at construction)
MIN_COORD: float = 0
MAX_COORD: float = 999999

# Vertices required before the ring is closed
MIN_VERTICES: int = 3


class Point(BaseModel):
    """A vertex on the flat Cartesian plane"""
    x: float
    y: float


class Polygon(BaseModel):
    """
    Named polygon.

    `points` is the ring in traversal order. Once admitted it is closed and
    clockwise; `area` is the signed shoelace area computed at admission.
    """
    name: str
    points: List[Point] = Field(default_factory=list)
    area: float = 0.0


class PolygonSubmission(BaseModel):
    """Request body for POST /api/polygons"""
    name: str
    points: List[Point]
