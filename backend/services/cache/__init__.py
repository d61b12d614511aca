"""
Cache Services Module
In-process snapshot of stored polygons
"""
from .polygon_cache import PolygonCache

__all__ = ["PolygonCache"]
