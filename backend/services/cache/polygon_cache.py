"""
Polygon Cache Service
Read-mostly snapshot of every stored polygon
"""
import logging
import threading
import time
from typing import List, Optional

from pipelines.polygon.models import Polygon
from services.polygon_store.base import PolygonStore, StoreError

logger = logging.getLogger(__name__)


class PolygonCache:
    """
    Disposable view of the store, never authoritative.

    The snapshot is replaced wholesale by refresh(), never patched. Readers
    may see a stale snapshot between a store write and the following
    refresh(); `last_refreshed` tells how old it is.
    """

    def __init__(self, store: PolygonStore):
        self.store = store
        self._polygons: List[Polygon] = []
        self._lock = threading.Lock()
        self._next_seq = 0
        self._applied_seq = -1
        self.last_refreshed: Optional[float] = None

    def refresh(self) -> None:
        """
        Replace the snapshot with store.list_all()

        Raises:
            StoreError: The listing failed; the previous snapshot is kept
        """
        # the store is read outside the lock; sequence numbers keep a slow
        # older listing from overwriting a newer one
        with self._lock:
            seq = self._next_seq
            self._next_seq += 1

        try:
            polygons = self.store.list_all()
        except StoreError as e:
            logger.error(f"❌ Cache refresh failed, keeping last snapshot: {e}")
            raise

        with self._lock:
            if seq < self._applied_seq:
                logger.debug(f"Discarding refresh #{seq}, #{self._applied_seq} already applied")
                return
            self._polygons = polygons
            self._applied_seq = seq
            self.last_refreshed = time.time()
        logger.info(f"🔄 Polygon cache refreshed: {len(polygons)} polygon(s)")

    def list(self) -> List[Polygon]:
        """Current snapshot"""
        with self._lock:
            return list(self._polygons)

    def lookup_by_name(self, name: str) -> Optional[Polygon]:
        """Linear scan for an exact, case-sensitive name match"""
        for polygon in self.list():
            if polygon.name == name:
                return polygon
        return None

    def age_seconds(self) -> Optional[float]:
        """Seconds since the last successful refresh, None if never refreshed"""
        if self.last_refreshed is None:
            return None
        return time.time() - self.last_refreshed
