"""
Batch Polygon Generation
Fans out generate+admit attempts on a thread pool and commits the survivors as one batch
"""
import logging
import random
import time
from concurrent.futures import Executor, Future, as_completed
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import shapely

from config import settings
from services.cache.polygon_cache import PolygonCache
from services.polygon_store.base import PolygonStore, StoreError
from .errors import ValidationError
from .generator import generate_ring, random_vertex_count
from .geometry import to_shapely
from .models import Polygon
from .validator import PolygonValidator

logger = logging.getLogger(__name__)

BATCH_ID_MAX = 1000000


@dataclass
class BatchResult:
    batch_id: int
    requested: int
    accepted_names: List[str] = field(default_factory=list)
    rejected_count: int = 0
    reconciled_count: int = 0
    duration_seconds: float = 0.0

    @property
    def accepted_count(self) -> int:
        return len(self.accepted_names)

    def to_dict(self) -> Dict:
        return {
            "batch_id": self.batch_id,
            "requested": self.requested,
            "accepted_count": self.accepted_count,
            "rejected_count": self.rejected_count,
            "reconciled_count": self.reconciled_count,
            "accepted_names": list(self.accepted_names),
            "duration_seconds": self.duration_seconds,
        }


def batch_polygon_name(batch_id: int, index: int) -> str:
    """Deterministic per-task name; unique inside one batch"""
    return f"randomPoly_{batch_id}_{index}"


def reconcile_batch(polygons: List[Polygon]) -> List[Polygon]:
    """
    Drop polygons that intersect an earlier polygon of the same batch.

    Every candidate was checked against the store only, so two members of
    one batch may still overlap each other. Input order decides which one
    survives.
    """
    kept: List[Polygon] = []
    kept_shapes = []
    for polygon in polygons:
        shape = to_shapely(polygon.points)
        if any(shapely.intersects(shape, other) for other in kept_shapes):
            logger.debug(f"Dropping '{polygon.name}': intersects another polygon of its batch")
            continue
        kept.append(polygon)
        kept_shapes.append(shape)
    return kept


class BatchOrchestrator:
    """
    Runs `count` independent generate+admit attempts concurrently.

    Results are gathered by the calling thread from completed futures only,
    so no task ever mutates shared state. The join has no timeout and tasks
    cannot be cancelled; one slow task delays the whole batch.
    """

    def __init__(self, validator: PolygonValidator, store: PolygonStore,
                 cache: PolygonCache, executor: Executor,
                 rng: Optional[random.Random] = None):
        self.validator = validator
        self.store = store
        self.cache = cache
        self.executor = executor
        self.rng = rng or random.Random()
        self.min_radius = settings.GENERATOR_MIN_RADIUS
        self.max_radius = settings.GENERATOR_MAX_RADIUS
        self.min_vertices = settings.GENERATOR_MIN_VERTICES
        self.max_vertices = settings.GENERATOR_MAX_VERTICES
        self.max_batch_size = settings.BATCH_SIZE_MAX

    def _attempt(self, batch_id: int, index: int, seed: int) -> Polygon:
        """One task: generate a ring, then admit it (raises on rejection)"""
        rng = random.Random(seed)
        vertex_count = random_vertex_count(rng, self.min_vertices, self.max_vertices)
        points = generate_ring(self.min_radius, self.max_radius, vertex_count, rng)
        candidate = Polygon(name=batch_polygon_name(batch_id, index), points=points)
        return self.validator.admit(candidate)

    def generate_batch(self, count: int) -> BatchResult:
        """
        Generate, validate and store up to `count` random polygons

        Args:
            count: Number of attempts, 1..BATCH_SIZE_MAX

        Returns:
            BatchResult: Accepted names and rejection counts

        Raises:
            ValueError: count out of range
            StoreError: The final batch insert failed
        """
        if count < 1 or count > self.max_batch_size:
            raise ValueError(f"batch size must be between 1 and {self.max_batch_size}")

        batch_id = self.rng.randrange(BATCH_ID_MAX)
        result = BatchResult(batch_id=batch_id, requested=count)
        start_time = time.time()
        logger.info(f"🎲 Batch {batch_id}: starting {count} generation attempts")

        futures: Dict[Future, int] = {}
        for i in range(count):
            # seeds drawn here so the tasks never share a random source
            seed = self.rng.getrandbits(64)
            futures[self.executor.submit(self._attempt, batch_id, i, seed)] = i

        admitted: Dict[int, Polygon] = {}
        for future in as_completed(futures):
            index = futures[future]
            try:
                admitted[index] = future.result()
            except ValidationError as e:
                result.rejected_count += 1
                logger.debug(f"Batch {batch_id} task {index} rejected: {e}")
            except Exception as e:
                result.rejected_count += 1
                logger.warning(f"⚠️ Batch {batch_id} task {index} failed: {e}")

        ordered = [admitted[i] for i in sorted(admitted)]
        accepted = reconcile_batch(ordered)
        result.reconciled_count = len(ordered) - len(accepted)

        if accepted:
            self.store.insert_batch(accepted)
            try:
                self.cache.refresh()
            except StoreError:
                logger.warning(f"⚠️ Batch {batch_id} stored but cache refresh failed")

        result.accepted_names = [p.name for p in accepted]
        result.duration_seconds = time.time() - start_time
        logger.info(
            f"✅ Batch {batch_id}: {result.accepted_count}/{count} accepted, "
            f"{result.rejected_count} rejected, {result.reconciled_count} dropped as intra-batch overlaps"
        )
        return result
