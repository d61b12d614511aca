"""
Polygon Pipeline
Entry point used by the API: cached reads, single submissions and batch generation
"""
import logging
import threading
from concurrent.futures import Executor, ThreadPoolExecutor
from typing import List, Optional, Sequence

from config import settings
from config.paths import polygon_store_file
from services.cache.polygon_cache import PolygonCache
from services.polygon_store.base import PolygonStore, StoreError
from services.polygon_store.file_store import FilePolygonStore
from .batch import BatchOrchestrator, BatchResult
from .models import Point, Polygon
from .validator import PolygonValidator

logger = logging.getLogger(__name__)


class PolygonPipeline:
    """
    Facade over validator, store, cache and batch orchestrator.

    Owns the cache; every successful write is followed by a full refresh.
    """

    def __init__(self, store: PolygonStore, executor: Executor,
                 cache: Optional[PolygonCache] = None):
        self.store = store
        self.executor = executor
        self.cache = cache or PolygonCache(store)
        self.validator = PolygonValidator(store)
        self.orchestrator = BatchOrchestrator(self.validator, store, self.cache, executor)

    def list_cached(self) -> List[Polygon]:
        return self.cache.list()

    def lookup_by_name(self, name: str) -> Optional[Polygon]:
        return self.cache.lookup_by_name(name)

    def submit_polygon(self, raw_points: Sequence[Point], name: str) -> Polygon:
        """
        Admit and store one polygon

        Args:
            raw_points: Open, counter-clockwise ring
            name: Unique polygon name

        Returns:
            Polygon: The stored polygon (closed clockwise ring, signed area)

        Raises:
            ValidationError: Candidate rejected; nothing was written
            StoreError: Store unavailable; nothing was written
        """
        polygon = self.validator.admit(Polygon(name=name, points=list(raw_points)))
        self.store.insert(polygon)
        logger.info(f"📐 Polygon '{polygon.name}' stored (area={polygon.area})")
        try:
            self.cache.refresh()
        except StoreError:
            # stored already; the cache keeps its last snapshot until the next refresh
            logger.warning(f"⚠️ Polygon '{polygon.name}' stored but cache refresh failed")
        return polygon

    def generate_batch(self, size: int) -> BatchResult:
        return self.orchestrator.generate_batch(size)


_pipeline: Optional[PolygonPipeline] = None
_pipeline_lock = threading.Lock()


def get_polygon_pipeline() -> PolygonPipeline:
    """Get or create the process-wide pipeline backed by the file store"""
    global _pipeline
    with _pipeline_lock:
        if _pipeline is None:
            store = FilePolygonStore(polygon_store_file())
            executor = ThreadPoolExecutor(
                max_workers=settings.BATCH_MAX_WORKERS,
                thread_name_prefix="polygon_batch",
            )
            _pipeline = PolygonPipeline(store, executor)
            _pipeline.cache.refresh()
            logger.info(f"🗂️ Polygon pipeline ready ({store.path})")
        return _pipeline


def reset_polygon_pipeline() -> None:
    """Drop the process-wide pipeline and shut its thread pool down"""
    global _pipeline
    with _pipeline_lock:
        if _pipeline is not None:
            _pipeline.executor.shutdown(wait=True)
            _pipeline = None
