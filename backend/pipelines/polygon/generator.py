"""
Random Ring Generator
Star-shaped rings around a random centre, used by batch generation
"""
import math
import random
from typing import List, Optional

from .models import Point, MIN_COORD, MAX_COORD

# Centre is kept one unit inside the plane
OFFSET_MIN = 1
OFFSET_MAX = 999998


def _clamp(value: float) -> float:
    return min(max(value, MIN_COORD), MAX_COORD)


def random_vertex_count(rng: Optional[random.Random] = None,
                        minimum: int = 3, maximum: int = 20) -> int:
    """Vertex count drawn uniformly from [minimum, maximum]"""
    rng = rng or random
    return rng.randint(minimum, maximum)


def generate_ring(min_radius: float, max_radius: float, vertex_count: int,
                  rng: Optional[random.Random] = None) -> List[Point]:
    """
    Generate an open, counter-clockwise ring.

    All vertices orbit one centre (ox, oy). The full turn is split into
    vertex_count + 1 slices so the ring never wraps a full circle; vertex i
    takes a random angle inside slice i and a random radius inside the
    envelope. Coordinates are clamped into the plane afterwards, which may
    leave a degenerate ring; admission is the only backstop.

    Args:
        min_radius: Inner radius of the envelope
        max_radius: Outer radius of the envelope
        vertex_count: Number of vertices to produce
        rng: Optional random source (module-level random when omitted)

    Returns:
        List[Point]: vertex_count points, not closed
    """
    rng = rng or random

    ox = rng.uniform(OFFSET_MIN, OFFSET_MAX)
    oy = rng.uniform(OFFSET_MIN, OFFSET_MAX)

    spread = 2 * math.pi / (vertex_count + 1)

    vertices = []
    for i in range(vertex_count):
        angle = rng.uniform(i * spread, (i + 1) * spread)
        radius = rng.uniform(min_radius, max_radius)
        x = _clamp(math.cos(angle) * radius + ox)
        y = _clamp(math.sin(angle) * radius + oy)
        vertices.append(Point(x=x, y=y))

    return vertices
