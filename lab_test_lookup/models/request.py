"""Request models for API endpoints."""

from typing import Optional

from pydantic import BaseModel, Field


class SearchRequest(BaseModel):
    """Request model for committed search queries."""
    
    query: str = Field(default="", description="Search query")


class SuggestionRequest(BaseModel):
    """Request model for autocomplete queries."""
    
    query: str = Field(default="", description="Partial query being typed")
    max_results: Optional[int] = Field(
        None, ge=1, le=50, description="Maximum number of suggestions to return"
    )
