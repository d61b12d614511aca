"""
Central API Router
Combines all API endpoints into a single router for main.py
"""
from fastapi import APIRouter
from api import logs
from api.endpoints import polygons, system

# Create the main API router
api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(polygons.router, prefix="/api/polygons", tags=["polygons"])
api_router.include_router(system.router, prefix="/api", tags=["system"])
api_router.include_router(logs.router)

# Add a root endpoint for API discovery
@api_router.get("/api")
async def api_root():
    """API root endpoint for discovery"""
    return {
        "message": "Polyvault API v1.0",
        "documentation": "/docs",
        "endpoints": {
            "polygons": "/api/polygons - List cached polygons / submit a polygon",
            "polygon": "/api/polygons/{name} - Look a polygon up by name",
            "generate": "/api/polygons/generate?size=N - Generate a batch of random polygons",
            "health": "/api/health - System health check",
            "logs": "/logs/recent - Recent log records",
        }
    }
