"""Main FastAPI application for the Lab Test Lookup service."""

import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
import structlog

from .api import (
    search_router,
    catalog_router,
    health_router,
)
from .config import get_settings
from .data.loader import load_catalog
from .exceptions import DatasetError
from .models.response import ErrorResponse

settings = get_settings()

logging.basicConfig(format="%(message)s", level=settings.log_level.upper())

# Configure structured logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.dev.ConsoleRenderer()
        if settings.log_format == "console"
        else structlog.processors.JSONRenderer()
    ],
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    # Startup
    logger.info("Starting Lab Test Lookup service", version=settings.app_version)
    
    app.state.catalog = None
    app.state.load_error = None
    try:
        app.state.catalog = load_catalog(settings.data_file)
    except DatasetError as e:
        # Keep serving so clients see the error state instead of a dead socket
        app.state.load_error = (
            "Failed to load the lab test dataset. Ensure the file exists and is "
            f"well formed. Details: {e}"
        )
        logger.error("Failed to load dataset", path=settings.data_file, error=str(e))
    
    yield
    
    # Shutdown
    logger.info("Shutting down Lab Test Lookup service")


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    description="Lookup of laboratory tests by name or synonym with autocomplete",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan
)

# Add middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(GZipMiddleware, minimum_size=1000)


# Request logging middleware
@app.middleware("http")
async def log_requests(request: Request, call_next) -> Response:
    """Log all HTTP requests."""
    start_time = time.time()
    
    logger.info(
        "Request started",
        method=request.method,
        url=str(request.url),
        client_ip=request.client.host if request.client else None
    )
    
    response = await call_next(request)
    
    process_time = time.time() - start_time
    logger.info(
        "Request completed",
        method=request.method,
        url=str(request.url),
        status_code=response.status_code,
        process_time_ms=round(process_time * 1000, 2)
    )
    
    return response


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle global exceptions."""
    logger.error(
        "Unhandled exception",
        method=request.method,
        url=str(request.url),
        error=str(exc),
        exc_info=True
    )
    
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            error="Internal Server Error",
            message="An unexpected error occurred",
            details={"exception": str(exc)} if settings.debug else None
        ).model_dump(mode="json")
    )


# Include API routers
app.include_router(search_router)
app.include_router(catalog_router)
app.include_router(health_router)


# Root endpoint
@app.get("/", summary="Root endpoint", description="Get basic information about the API")
async def root() -> dict:
    """Root endpoint with basic API information."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "description": "Lookup of laboratory tests by name or synonym with autocomplete",
        "docs_url": "/docs",
        "search_url": "/api/v1/search?q=",
        "health_url": "/api/v1/health",
        "status": "running"
    }


# API info endpoint
@app.get("/api", summary="API information", description="Get detailed API information")
async def api_info() -> dict:
    """Get detailed API information."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "endpoints": {
            "search": "/api/v1/search?q=term",
            "suggestions": "/api/v1/suggestions?q=partial",
            "tests": "/api/v1/tests",
            "details": "/api/v1/tests/{test_id}?q=term",
            "health": "/api/v1/health"
        },
        "features": [
            "Case-insensitive search over names and synonyms",
            "Ranking: exact, then starts-with, then contains; name before synonym",
            "Autocomplete tagged by name, match or synonym",
            "Test details with originating-search back link"
        ],
        "limits": {
            "max_query_length": settings.max_query_length,
            "max_suggestions": settings.max_suggestions
        }
    }


if __name__ == "__main__":
    import uvicorn
    
    uvicorn.run(
        "lab_test_lookup.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        workers=1 if settings.debug else settings.workers,
        log_level=settings.log_level.lower()
    )
