"""
Polygon Admission Validator
Decides whether a candidate polygon may join the collection
"""
import logging

from services.polygon_store.base import PolygonStore
from .errors import ValidationError
from .geometry import has_min_vertices, normalize_ring, signed_area
from .models import Polygon

logger = logging.getLogger(__name__)


class PolygonValidator:
    """
    Linear admission pipeline: each step is a hard gate, the first failure
    aborts. Store lookups are single round-trips; a StoreError from them
    propagates untouched.
    """

    def __init__(self, store: PolygonStore):
        self.store = store

    def admit(self, candidate: Polygon) -> Polygon:
        """
        Validate and normalize a candidate polygon

        Args:
            candidate: Polygon as submitted (open, counter-clockwise ring)

        Returns:
            Polygon: New polygon with the normalized ring and its signed area

        Raises:
            ValidationError: Too few vertices, duplicate name, intersection, out of bounds
            StoreError: The store could not answer
        """
        # 1. vertex count, before any store call
        if not has_min_vertices(candidate.points):
            raise ValidationError("you must have at least 3 vertices")

        # 2. name uniqueness against committed state
        if self.store.exists(candidate.name):
            raise ValidationError("polygon with that name already exists")

        # 3. close + reverse
        ring = normalize_ring(candidate.points)

        # 4. intersection against committed state
        if self.store.intersects(ring):
            raise ValidationError("polygon is intersecting with others in the store")

        # 5. area, with per-vertex bounds check
        area, valid = signed_area(ring)
        if not valid:
            raise ValidationError("x and y bounds not satisfied")

        logger.debug(f"Admitted polygon '{candidate.name}' ({len(ring)} points, area={area})")
        return Polygon(name=candidate.name, points=ring, area=area)
