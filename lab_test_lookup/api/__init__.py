"""API endpoints for the lab test lookup service."""

from .search import router as search_router
from .catalog import router as catalog_router
from .health import router as health_router

__all__ = [
    "search_router",
    "catalog_router",
    "health_router",
]
