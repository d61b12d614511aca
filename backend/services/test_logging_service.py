from __future__ import annotations

import logging

from services.logging_service import RingBufferHandler


def _record(message: str) -> logging.LogRecord:
    return logging.LogRecord("polygons", logging.INFO, __file__, 1, message, None, None)


def test_ring_buffer_keeps_most_recent() -> None:
    ring = RingBufferHandler(maxlen=3)
    for i in range(5):
        ring.emit(_record(f"msg {i}"))

    recent = ring.get_recent(10)
    assert [r["message"] for r in recent] == ["msg 2", "msg 3", "msg 4"]
    assert recent[0]["level"] == "INFO"


def test_ring_buffer_limit() -> None:
    ring = RingBufferHandler()
    for i in range(4):
        ring.emit(_record(f"msg {i}"))
    assert [r["message"] for r in ring.get_recent(2)] == ["msg 2", "msg 3"]
    assert len(ring.get_recent(0)) == 4
