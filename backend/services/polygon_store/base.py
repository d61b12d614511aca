"""
Base Polygon Store Interface
Every store backend implements this interface; the polygon pipeline only talks to it
"""
from abc import ABC, abstractmethod
from typing import List, Sequence

from pipelines.polygon.models import Point, Polygon


class StoreError(Exception):
    """Connectivity or query failure, distinct from a logical negative result"""
    pass


class PolygonStore(ABC):
    """Base class for polygon store backends"""

    name: str = ""

    @abstractmethod
    def exists(self, name: str) -> bool:
        """Check if a polygon with exactly this name is stored"""
        pass

    @abstractmethod
    def intersects(self, points: Sequence[Point]) -> bool:
        """
        Check if a closed ring intersects any stored polygon

        Args:
            points: Normalized (closed, clockwise) ring

        Returns:
            bool: True when at least one stored polygon intersects or touches it
        """
        pass

    @abstractmethod
    def insert(self, polygon: Polygon) -> None:
        """Persist one admitted polygon"""
        pass

    @abstractmethod
    def insert_batch(self, polygons: Sequence[Polygon]) -> None:
        """Persist several admitted polygons in one write"""
        pass

    @abstractmethod
    def list_all(self) -> List[Polygon]:
        """Return every stored polygon in insertion order"""
        pass
