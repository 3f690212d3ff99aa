"""Health check API endpoints."""

import time
from datetime import datetime

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from ..config import get_settings
from ..engine_instance import search_engine
from ..models.response import HealthResponse

router = APIRouter(prefix="/api/v1", tags=["health"])
settings = get_settings()

# Track application start time
app_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check the health status of the lookup service"
)
async def health_check(request: Request) -> HealthResponse:
    """
    Perform a health check on the lookup service.
    
    The dataset is unhealthy when loading failed; the search engine is
    exercised against the loaded catalog.
    """
    uptime = time.time() - app_start_time
    catalog = getattr(request.app.state, "catalog", None)
    
    dependencies = {
        "dataset": "healthy" if catalog is not None else "unhealthy",
        "search_engine": "healthy",
    }
    
    if catalog is not None and len(catalog):
        probe = catalog.tests[0].name
        if not search_engine.search(catalog.tests, probe):
            dependencies["search_engine"] = "degraded"
    
    if all(status == "healthy" for status in dependencies.values()):
        status = "healthy"
    elif any(status == "unhealthy" for status in dependencies.values()):
        status = "unhealthy"
    else:
        status = "degraded"
    
    return HealthResponse(
        status=status,
        version=settings.app_version,
        uptime=uptime,
        dependencies=dependencies
    )


@router.get(
    "/health/ready",
    summary="Readiness check",
    description="Check if the dataset is loaded and requests can be served"
)
async def readiness_check(request: Request) -> JSONResponse:
    """Report ready only once the catalog has been loaded."""
    catalog = getattr(request.app.state, "catalog", None)
    if catalog is None:
        return JSONResponse(
            status_code=503,
            content={
                "status": "not_ready",
                "error": getattr(request.app.state, "load_error", None),
                "timestamp": datetime.utcnow().isoformat()
            }
        )
    
    stats = catalog.get_stats()
    return JSONResponse(
        status_code=200,
        content={
            "status": "ready",
            "timestamp": datetime.utcnow().isoformat(),
            "catalog_stats": stats
        }
    )


@router.get(
    "/health/live",
    summary="Liveness check",
    description="Check if the service is alive and responding"
)
async def liveness_check() -> JSONResponse:
    """Simple liveness check."""
    return JSONResponse(
        status_code=200,
        content={
            "status": "alive",
            "timestamp": datetime.utcnow().isoformat(),
            "uptime": time.time() - app_start_time
        }
    )
