"""Response models for API endpoints."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class SearchResult(BaseModel):
    """Individual search result."""
    
    id: str = Field(..., description="Test identifier")
    name: str = Field(..., description="Test display name")
    snippet: str = Field(..., description="Clinical purpose, or the biomarker when absent")
    match_tier: int = Field(..., ge=0, description="Relevance tier (0 is best)")
    match_type: str = Field(..., description="Tier label (exact_name, synonym_prefix, etc.)")


class SearchResponse(BaseModel):
    """Response for committed search queries."""
    
    query: str = Field(..., description="Original search query")
    execution_time_ms: float = Field(..., description="Query execution time in milliseconds")
    total_results: int = Field(..., description="Total number of results")
    results: List[SearchResult] = Field(..., description="Ranked search results")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Response timestamp")


class SuggestionItem(BaseModel):
    """Single autocomplete candidate."""
    
    id: str = Field(..., description="Test identifier")
    name: str = Field(..., description="Test display name")
    reason: str = Field(..., description="Pass that produced the candidate (name, match, synonym)")
    label: str = Field(..., description="Human-readable badge for the reason")


class SuggestionResponse(BaseModel):
    """Response for autocomplete queries."""
    
    query: str = Field(..., description="Partial query")
    total_results: int = Field(..., description="Number of candidates returned")
    suggestions: List[SuggestionItem] = Field(..., description="Autocomplete candidates")


class LabTestSummary(BaseModel):
    """Identifier and name of a test."""
    
    id: str
    name: str


class LabTestDetailResponse(BaseModel):
    """Full details of a single test, ready for display."""
    
    id: str = Field(..., description="Test identifier")
    name: str = Field(..., description="Test display name")
    clinical_purpose: str = Field(..., description="Why the test is ordered")
    biomarker_or_parameter: str = Field(..., description="Measured biomarker or parameter")
    range_or_values: str = Field(..., description="Possible ranges or values")
    meaning_result_interpretation: str = Field(..., description="How to read the result")
    general_notes: str = Field(..., description="Additional notes")
    synonyms: List[str] = Field(..., description="Alternate names")
    synonyms_display: str = Field(..., description="Comma-joined synonyms or a placeholder")
    back_to: str = Field(..., description="Link back to the originating search, or home")


class ErrorResponse(BaseModel):
    """Error response model."""
    
    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Error message")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Error timestamp")


class HealthResponse(BaseModel):
    """Health check response."""
    
    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")
    uptime: float = Field(..., description="Service uptime in seconds")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Check timestamp")
    dependencies: Dict[str, str] = Field(..., description="Dependency status")
