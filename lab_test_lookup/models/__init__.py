"""Data models for the lab test lookup service."""

from .record import LabTest
from .response import (
    SearchResult,
    SearchResponse,
    SuggestionItem,
    SuggestionResponse,
    LabTestSummary,
    LabTestDetailResponse,
    ErrorResponse,
    HealthResponse,
)
from .request import SearchRequest, SuggestionRequest

__all__ = [
    "LabTest",
    "SearchResult",
    "SearchResponse",
    "SuggestionItem",
    "SuggestionResponse",
    "LabTestSummary",
    "LabTestDetailResponse",
    "ErrorResponse",
    "HealthResponse",
    "SearchRequest",
    "SuggestionRequest",
]
