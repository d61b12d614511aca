"""
Polygon Geometry Kernel
Pure ring operations: closing/reversing, bounds checks and signed area
"""
import logging
from typing import List, Sequence, Tuple

from shapely.geometry import Polygon as ShapelyPolygon

from .models import Point, MIN_COORD, MAX_COORD, MIN_VERTICES

logger = logging.getLogger(__name__)


def normalize_ring(points: Sequence[Point]) -> List[Point]:
    """
    Close the ring and flip its winding.

    Inbound rings arrive counter-clockwise; stored rings are clockwise.
    A copy of the first point is appended when the ring is open, then the
    order is reversed. Must be applied exactly once per candidate.

    Args:
        points: Ring as received

    Returns:
        List[Point]: New closed, reversed ring
    """
    ring = list(points)
    if not ring:
        return ring

    if ring[0] != ring[-1]:
        ring.append(ring[0].model_copy())

    ring.reverse()
    return ring


def validate_bounds(point: Point) -> bool:
    """Check a vertex lies inside the coordinate plane"""
    return (
        MIN_COORD <= point.x <= MAX_COORD
        and MIN_COORD <= point.y <= MAX_COORD
    )


def signed_area(points: Sequence[Point]) -> Tuple[float, bool]:
    """
    Shoelace area over consecutive vertex pairs of a closed ring.

    No wraparound pair is used since the ring already repeats its first
    point at the end. Every vertex is bounds-checked before it contributes;
    the first failure returns (0.0, False).

    Args:
        points: Closed ring

    Returns:
        Tuple[float, bool]: (signed area, valid)
    """
    xy_sum = 0.0
    yx_sum = 0.0

    for i in range(len(points) - 1):
        if not validate_bounds(points[i]):
            return 0.0, False
        xy_sum += points[i].x * points[i + 1].y
        yx_sum += points[i].y * points[i + 1].x

    # closing duplicate is checked too
    if points and not validate_bounds(points[-1]):
        return 0.0, False

    return (xy_sum - yx_sum) / 2, True


def has_min_vertices(points: Sequence[Point]) -> bool:
    """At least MIN_VERTICES distinct vertices, not counting a closing duplicate"""
    ring = list(points)
    if len(ring) > 1 and ring[0] == ring[-1]:
        ring = ring[:-1]
    distinct = {(p.x, p.y) for p in ring}
    return len(distinct) >= MIN_VERTICES


def to_shapely(points: Sequence[Point]) -> ShapelyPolygon:
    """Build a shapely polygon from a ring (closed or open)"""
    return ShapelyPolygon([(p.x, p.y) for p in points])


def to_wkt(points: Sequence[Point]) -> str:
    """
    Spatial encoding of a ring, used only for intersection tests.

    Returns:
        str: e.g. 'POLYGON ((0 0, 10 10, 10 0, 0 0))'
    """
    return to_shapely(points).wkt
