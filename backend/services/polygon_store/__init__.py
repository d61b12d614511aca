"""
Polygon Store Module
Persistence and spatial intersection backend for admitted polygons
"""
from .base import PolygonStore, StoreError
from .file_store import FilePolygonStore

__all__ = ["PolygonStore", "StoreError", "FilePolygonStore"]
