"""Search and autocomplete API endpoints."""

import time
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ..config import get_settings
from ..core.catalog import LabTestCatalog
from ..core.suggestions import SuggestionReason
from ..engine_instance import get_catalog, search_engine, suggestion_engine
from ..models.request import SearchRequest, SuggestionRequest
from ..models.response import (
    SearchResponse,
    SearchResult,
    SuggestionItem,
    SuggestionResponse,
)

router = APIRouter(prefix="/api/v1", tags=["search"])
settings = get_settings()

REASON_LABELS = {
    SuggestionReason.NAME: "Name",
    SuggestionReason.MATCH: "Match",
    SuggestionReason.SYNONYM: "Synonym",
}


def _check_query_length(query: str) -> None:
    if len(query) > settings.max_query_length:
        raise HTTPException(
            status_code=400,
            detail=f"Query too long. Maximum length is {settings.max_query_length} characters"
        )


def _run_search(catalog: LabTestCatalog, query: str) -> SearchResponse:
    start_time = time.time()
    ranked = search_engine.search_ranked(catalog.tests, query)
    execution_time = (time.time() - start_time) * 1000
    
    results = [
        SearchResult(
            id=test.id,
            name=test.name,
            snippet=test.clinical_purpose or test.biomarker_or_parameter,
            match_tier=int(tier),
            match_type=tier.label
        )
        for test, tier in ranked
    ]
    
    return SearchResponse(
        query=query,
        execution_time_ms=execution_time,
        total_results=len(results),
        results=results
    )


def _run_suggest(
    catalog: LabTestCatalog,
    query: str,
    max_results: Optional[int]
) -> SuggestionResponse:
    picks = suggestion_engine.suggest(
        catalog.tests, query, max_results or settings.max_suggestions
    )
    items = [
        SuggestionItem(
            id=pick.test.id,
            name=pick.test.name,
            reason=pick.reason.value,
            label=REASON_LABELS[pick.reason]
        )
        for pick in picks
    ]
    return SuggestionResponse(query=query, total_results=len(items), suggestions=items)


@router.get(
    "/search",
    response_model=SearchResponse,
    summary="Search tests",
    description="Search tests by name or synonym, ranked exact > prefix > substring"
)
async def search_tests(
    q: str = Query("", description="The search query"),
    catalog: LabTestCatalog = Depends(get_catalog)
) -> SearchResponse:
    """
    Search for tests matching a committed query.
    
    An empty query returns no results.
    """
    _check_query_length(q)
    return _run_search(catalog, q)


@router.post(
    "/search",
    response_model=SearchResponse,
    summary="Search with request body",
    description="Search tests using a structured request body"
)
async def search_with_body(
    request: SearchRequest,
    catalog: LabTestCatalog = Depends(get_catalog)
) -> SearchResponse:
    """Search for tests using a JSON request body."""
    _check_query_length(request.query)
    return _run_search(catalog, request.query)


@router.get(
    "/suggestions",
    response_model=SuggestionResponse,
    summary="Get autocomplete suggestions",
    description="Get reason-tagged candidates for a partial query"
)
async def get_suggestions(
    q: str = Query("", description="The partial query being typed"),
    max_results: Optional[int] = Query(
        None,
        ge=1,
        le=50,
        description="Maximum number of suggestions"
    ),
    catalog: LabTestCatalog = Depends(get_catalog)
) -> SuggestionResponse:
    """
    Get autocomplete suggestions.
    
    Names starting with the query come first, then names containing it,
    then tests with a synonym starting with it.
    """
    _check_query_length(q)
    return _run_suggest(catalog, q, max_results)


@router.post(
    "/suggestions",
    response_model=SuggestionResponse,
    summary="Suggestions with request body",
    description="Get autocomplete suggestions using a structured request body"
)
async def suggestions_with_body(
    request: SuggestionRequest,
    catalog: LabTestCatalog = Depends(get_catalog)
) -> SuggestionResponse:
    """Get autocomplete suggestions using a JSON request body."""
    _check_query_length(request.query)
    return _run_suggest(catalog, request.query, request.max_results)
