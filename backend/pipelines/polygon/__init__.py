"""
Polygon Pipeline Module
Validation, normalization, area computation and batch generation of polygons
"""
from .errors import ValidationError
from .models import Point, Polygon, PolygonSubmission, MIN_COORD, MAX_COORD, MIN_VERTICES

__all__ = [
    "ValidationError",
    "Point",
    "Polygon",
    "PolygonSubmission",
    "MIN_COORD",
    "MAX_COORD",
    "MIN_VERTICES",
]
