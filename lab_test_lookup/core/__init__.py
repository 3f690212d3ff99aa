"""Core search and suggestion functionality."""

from .catalog import LabTestCatalog
from .engine import SearchEngine
from .normalizer import TextNormalizer
from .ranker import MatchTier, Ranker
from .suggestions import Suggestion, SuggestionEngine, SuggestionReason

__all__ = [
    "LabTestCatalog",
    "SearchEngine",
    "TextNormalizer",
    "MatchTier",
    "Ranker",
    "Suggestion",
    "SuggestionEngine",
    "SuggestionReason",
]
