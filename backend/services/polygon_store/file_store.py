from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Any, Dict, List, Sequence

import shapely
from shapely import wkt as shapely_wkt
from shapely.errors import ShapelyError

from pipelines.polygon.geometry import to_shapely, to_wkt
from pipelines.polygon.models import Point, Polygon
from .base import PolygonStore, StoreError

logger = logging.getLogger(__name__)


class FilePolygonStore(PolygonStore):
    """
    Simple file-backed store for admitted polygons.

    Records are kept as a JSON list in a single file:
        {"name": ..., "points": [{"x": .., "y": ..}], "area": .., "geometry": "POLYGON ((...))"}
    `geometry` is a redundant WKT encoding used only by intersects().
    Writes go through a temp file and an atomic replace, serialized by a lock.
    """

    name = "file"

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            if not self.path.exists():
                self._write_records([])
        except OSError as e:
            raise StoreError(f"FilePolygonStore: cannot initialise {self.path}: {e}") from e

    def _read_records(self) -> List[Dict[str, Any]]:
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise StoreError(f"FilePolygonStore: read failed: {e}") from e
        if not isinstance(data, list):
            raise StoreError(f"FilePolygonStore: {self.path} does not hold a list")
        return data

    def _write_records(self, records: List[Dict[str, Any]]) -> None:
        tmp = self.path.with_suffix(".tmp")
        try:
            with tmp.open("w", encoding="utf-8") as f:
                json.dump(records, f, indent=2, ensure_ascii=False)
            tmp.replace(self.path)
        except OSError as e:
            raise StoreError(f"FilePolygonStore: write failed: {e}") from e

    @staticmethod
    def _to_record(polygon: Polygon) -> Dict[str, Any]:
        record = polygon.model_dump()
        record["geometry"] = to_wkt(polygon.points)
        return record

    def exists(self, name: str) -> bool:
        with self._lock:
            records = self._read_records()
        return any(r.get("name") == name for r in records)

    def intersects(self, points: Sequence[Point]) -> bool:
        with self._lock:
            records = self._read_records()
        if not records:
            return False

        try:
            candidate = to_shapely(points)
            for record in records:
                stored = shapely_wkt.loads(record["geometry"])
                if shapely.intersects(stored, candidate):
                    return True
        except (KeyError, ValueError, ShapelyError) as e:
            raise StoreError(f"FilePolygonStore: intersection query failed: {e}") from e
        return False

    def insert(self, polygon: Polygon) -> None:
        self.insert_batch([polygon])

    def insert_batch(self, polygons: Sequence[Polygon]) -> None:
        if not polygons:
            return
        try:
            new_records = [self._to_record(p) for p in polygons]
        except (ValueError, ShapelyError) as e:
            raise StoreError(f"FilePolygonStore: cannot encode geometry: {e}") from e
        with self._lock:
            records = self._read_records()
            records.extend(new_records)
            self._write_records(records)
        logger.info(f"💾 Stored {len(new_records)} polygon(s) in {self.path.name}")

    def list_all(self) -> List[Polygon]:
        with self._lock:
            records = self._read_records()
        try:
            return [
                Polygon(name=r["name"], points=r.get("points", []), area=r.get("area", 0.0))
                for r in records
            ]
        except (KeyError, TypeError, ValueError) as e:
            raise StoreError(f"FilePolygonStore: malformed record: {e}") from e

