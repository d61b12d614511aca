"""
Central configuration for backend settings.
"""
import os


# Polygon store location (JSON file); empty means the default under data_root()
POLYGON_STORE_PATH: str = os.getenv("POLYGON_STORE_PATH", "")

# Batch generation (GET /api/polygons/generate)
BATCH_SIZE: int = int(os.getenv("BATCH_SIZE", "100"))
BATCH_SIZE_MAX: int = int(os.getenv("BATCH_SIZE_MAX", "100"))
BATCH_MAX_WORKERS: int = int(os.getenv("BATCH_MAX_WORKERS", "16"))

# Random ring generator envelope
GENERATOR_MIN_RADIUS: float = float(os.getenv("GENERATOR_MIN_RADIUS", "1"))
GENERATOR_MAX_RADIUS: float = float(os.getenv("GENERATOR_MAX_RADIUS", "100"))
GENERATOR_MIN_VERTICES: int = int(os.getenv("GENERATOR_MIN_VERTICES", "3"))
GENERATOR_MAX_VERTICES: int = int(os.getenv("GENERATOR_MAX_VERTICES", "20"))

# Server
API_HOST: str = os.getenv("API_HOST", "127.0.0.1")
API_PORT: int = int(os.getenv("API_PORT", "8080"))
