from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence, Set

import pytest

from pipelines.polygon.errors import ValidationError
from pipelines.polygon.models import Point, Polygon
from pipelines.polygon.validator import PolygonValidator
from services.polygon_store.base import PolygonStore, StoreError


@dataclass
class FakeStore(PolygonStore):
    names: Set[str] = field(default_factory=set)
    intersecting: bool = False
    fail: bool = False
    calls: List[str] = field(default_factory=list)
    last_ring: List[Point] = field(default_factory=list)

    def exists(self, name: str) -> bool:
        self.calls.append("exists")
        if self.fail:
            raise StoreError("connection refused")
        return name in self.names

    def intersects(self, points: Sequence[Point]) -> bool:
        self.calls.append("intersects")
        self.last_ring = list(points)
        return self.intersecting

    def insert(self, polygon: Polygon) -> None:
        self.calls.append("insert")

    def insert_batch(self, polygons: Sequence[Polygon]) -> None:
        self.calls.append("insert_batch")

    def list_all(self) -> List[Polygon]:
        return []


def _triangle(name: str = "t1") -> Polygon:
    return Polygon(name=name, points=[Point(x=0, y=0), Point(x=10, y=0), Point(x=10, y=10)])


def test_admit_returns_normalized_polygon_with_area() -> None:
    admitted = PolygonValidator(FakeStore()).admit(_triangle())
    assert admitted.name == "t1"
    assert admitted.area == pytest.approx(-50.0)
    assert len(admitted.points) == 4
    assert admitted.points[0] == admitted.points[-1]


def test_admit_does_not_mutate_candidate() -> None:
    candidate = _triangle()
    PolygonValidator(FakeStore()).admit(candidate)
    assert len(candidate.points) == 3
    assert candidate.area == 0.0


def test_too_few_vertices_rejected_before_store_call() -> None:
    store = FakeStore()
    candidate = Polygon(name="line", points=[Point(x=0, y=0), Point(x=1, y=1)])
    with pytest.raises(ValidationError, match="at least 3 vertices"):
        PolygonValidator(store).admit(candidate)
    assert store.calls == []


def test_duplicate_name_rejected() -> None:
    store = FakeStore(names={"t1"})
    with pytest.raises(ValidationError, match="already exists"):
        PolygonValidator(store).admit(_triangle())
    assert store.calls == ["exists"]


def test_name_match_is_case_sensitive() -> None:
    store = FakeStore(names={"T1"})
    assert PolygonValidator(store).admit(_triangle("t1")).name == "t1"


def test_intersection_checked_with_normalized_ring() -> None:
    store = FakeStore(intersecting=True)
    with pytest.raises(ValidationError, match="intersecting"):
        PolygonValidator(store).admit(_triangle())
    assert [(p.x, p.y) for p in store.last_ring] == [(0, 0), (10, 10), (10, 0), (0, 0)]


def test_out_of_bounds_rejected() -> None:
    candidate = Polygon(name="far", points=[Point(x=0, y=0), Point(x=1000000, y=0), Point(x=10, y=10)])
    with pytest.raises(ValidationError, match="bounds"):
        PolygonValidator(FakeStore()).admit(candidate)


def test_negative_coordinate_rejected() -> None:
    candidate = Polygon(name="neg", points=[Point(x=-1, y=0), Point(x=10, y=0), Point(x=10, y=10)])
    with pytest.raises(ValidationError):
        PolygonValidator(FakeStore()).admit(candidate)


def test_store_error_propagates() -> None:
    with pytest.raises(StoreError):
        PolygonValidator(FakeStore(fail=True)).admit(_triangle())


def test_closed_three_point_ring_rejected_before_store_call() -> None:
    store = FakeStore()
    candidate = Polygon(name="deg", points=[Point(x=0, y=0), Point(x=10, y=0), Point(x=0, y=0)])
    with pytest.raises(ValidationError, match="at least 3 vertices"):
        PolygonValidator(store).admit(candidate)
    assert store.calls == []


def test_closed_ring_admitted_with_four_points() -> None:
    candidate = Polygon(
        name="closed",
        points=[Point(x=0, y=0), Point(x=10, y=0), Point(x=10, y=10), Point(x=0, y=0)],
    )
    admitted = PolygonValidator(FakeStore()).admit(candidate)
    assert len(admitted.points) == 4
    assert admitted.area == pytest.approx(-50.0)
