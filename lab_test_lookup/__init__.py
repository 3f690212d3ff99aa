"""
Lab Test Lookup - search laboratory test descriptions by name or synonym.

This package loads a small CSV dataset of lab tests, ranks matches in fixed
tiers (exact, starts-with, contains; name before synonym) and produces
reason-tagged autocomplete candidates for partial queries.
"""

__version__ = "1.0.0"

from .core.engine import SearchEngine
from .core.suggestions import SuggestionEngine
from .models.record import LabTest

__all__ = [
    "SearchEngine",
    "SuggestionEngine",
    "LabTest",
]
