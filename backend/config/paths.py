"""
Centralized path configuration for backend data storage.

Responsibilities:
- Provide a stable root for persisted polygon data.
- Resolve the polygon store file, honouring POLYGON_STORE_PATH.
"""

from __future__ import annotations

from pathlib import Path

from config.settings import POLYGON_STORE_PATH


def backend_root() -> Path:
    """Backend source root (the 'backend' directory in the repo)."""
    # backend/config/paths.py -> backend/config -> backend
    return Path(__file__).resolve().parents[1]


def data_root() -> Path:
    """Root for persisted data: backend/data."""
    root = backend_root() / "data"
    root.mkdir(parents=True, exist_ok=True)
    return root


def polygon_store_file() -> Path:
    """
    JSON file backing the polygon store.
    - POLYGON_STORE_PATH when set.
    - Otherwise backend/data/polygons.json.
    """
    if POLYGON_STORE_PATH:
        path = Path(POLYGON_STORE_PATH).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        return path
    return data_root() / "polygons.json"
