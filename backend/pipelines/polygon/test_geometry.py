from __future__ import annotations

import pytest

from pipelines.polygon.geometry import (
    has_min_vertices,
    normalize_ring,
    signed_area,
    to_wkt,
    validate_bounds,
)
from pipelines.polygon.models import Point


def _ring(*coords: tuple[float, float]) -> list[Point]:
    return [Point(x=x, y=y) for x, y in coords]


def _coords(points: list[Point]) -> list[tuple[float, float]]:
    return [(p.x, p.y) for p in points]


def test_normalize_closes_and_reverses_open_ring() -> None:
    ring = _ring((0, 0), (10, 0), (10, 10))
    assert _coords(normalize_ring(ring)) == [(0, 0), (10, 10), (10, 0), (0, 0)]


def test_normalize_does_not_reclose_closed_ring() -> None:
    ring = _ring((0, 0), (10, 0), (10, 10), (0, 0))
    assert _coords(normalize_ring(ring)) == [(0, 0), (10, 10), (10, 0), (0, 0)]


def test_normalize_leaves_input_untouched() -> None:
    ring = _ring((0, 0), (10, 0), (10, 10))
    normalize_ring(ring)
    assert _coords(ring) == [(0, 0), (10, 0), (10, 10)]


def test_normalize_twice_keeps_ring_shape() -> None:
    ring = _ring((0, 0), (10, 0), (10, 10))
    once = normalize_ring(ring)
    twice = normalize_ring(once)
    assert len(twice) == len(once)
    assert _coords(twice) == list(reversed(_coords(once)))


def test_normalize_empty_ring() -> None:
    assert normalize_ring([]) == []


@pytest.mark.parametrize(
    "x, y, expected",
    [
        (0, 0, True),
        (999999, 999999, True),
        (500.5, 12.25, True),
        (-0.1, 5, False),
        (5, -1, False),
        (1000000, 5, False),
        (5, 999999.5, False),
    ],
)
def test_validate_bounds(x: float, y: float, expected: bool) -> None:
    assert validate_bounds(Point(x=x, y=y)) is expected


def test_signed_area_of_normalized_triangle_is_clockwise_negative() -> None:
    ring = normalize_ring(_ring((0, 0), (10, 0), (10, 10)))
    area, valid = signed_area(ring)
    assert valid
    assert area == pytest.approx(-50.0)


def test_signed_area_independent_of_starting_vertex() -> None:
    square = [(0, 0), (0, 10), (10, 10), (10, 0)]
    areas = []
    for k in range(len(square)):
        rotated = square[k:] + square[:k]
        area, valid = signed_area(normalize_ring(_ring(*rotated)))
        assert valid
        areas.append(area)
    assert areas == pytest.approx([areas[0]] * len(square))
    assert abs(areas[0]) == pytest.approx(100.0)


def test_signed_area_matches_direct_shoelace() -> None:
    ring = normalize_ring(_ring((2, 1), (7, 3), (6, 8), (1, 6)))
    xs = [p.x for p in ring]
    ys = [p.y for p in ring]
    expected = sum(xs[i] * ys[i + 1] - ys[i] * xs[i + 1] for i in range(len(ring) - 1)) / 2
    area, valid = signed_area(ring)
    assert valid
    assert area == pytest.approx(expected)


def test_signed_area_rejects_out_of_bounds_vertex() -> None:
    ring = normalize_ring(_ring((0, 0), (1000000, 0), (10, 10)))
    assert signed_area(ring) == (0.0, False)


def test_signed_area_checks_last_vertex() -> None:
    ring = _ring((0, 0), (10, 0), (10, 10), (-5, 0))
    assert signed_area(ring) == (0.0, False)


def test_has_min_vertices() -> None:
    assert not has_min_vertices(_ring((0, 0), (1, 1)))
    assert has_min_vertices(_ring((0, 0), (1, 1), (2, 0)))


def test_to_wkt_encodes_polygon() -> None:
    wkt = to_wkt(normalize_ring(_ring((0, 0), (10, 0), (10, 10))))
    assert wkt.startswith("POLYGON ((")
    assert wkt.count(",") == 3


def test_has_min_vertices_ignores_closing_duplicate() -> None:
    assert not has_min_vertices(_ring((0, 0), (10, 0), (0, 0)))
    assert has_min_vertices(_ring((0, 0), (10, 0), (10, 10), (0, 0)))


def test_has_min_vertices_counts_distinct_points() -> None:
    assert not has_min_vertices(_ring((0, 0), (10, 0), (10, 0), (0, 0)))
