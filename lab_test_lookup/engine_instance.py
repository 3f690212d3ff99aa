"""Shared engine instances and the catalog dependency to avoid circular imports."""

from fastapi import HTTPException, Request

from .core.catalog import LabTestCatalog
from .core.engine import SearchEngine
from .core.suggestions import SuggestionEngine

# Engines hold no record state and are safe to share between requests
search_engine = SearchEngine()
suggestion_engine = SuggestionEngine()


def get_catalog(request: Request) -> LabTestCatalog:
    """
    Return the catalog loaded at startup.
    
    Raises:
        HTTPException: 503 if the dataset failed to load
    """
    catalog = getattr(request.app.state, "catalog", None)
    if catalog is None:
        error = getattr(request.app.state, "load_error", None) or "Dataset is still loading"
        raise HTTPException(status_code=503, detail=error)
    return catalog
