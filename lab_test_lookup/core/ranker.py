"""Tiered relevance ranking of a single test against a query."""

from enum import IntEnum
from typing import Optional

from ..models.record import LabTest
from .normalizer import TextNormalizer


class MatchTier(IntEnum):
    """Discrete relevance tiers; lower is more relevant."""
    
    EXACT_NAME = 0
    EXACT_SYNONYM = 1
    NAME_PREFIX = 2
    SYNONYM_PREFIX = 3
    NAME_CONTAINS = 4
    SYNONYM_CONTAINS = 5
    NO_MATCH = 999
    
    @property
    def label(self) -> str:
        """Lowercase tier name used in API payloads."""
        return self.name.lower()


class Ranker:
    """Assigns a match tier to a test for an already-normalized query."""
    
    def __init__(self, normalizer: Optional[TextNormalizer] = None) -> None:
        """
        Initialize the ranker.
        
        Args:
            normalizer: Normalizer shared with the calling engine
        """
        self.normalizer = normalizer or TextNormalizer()
    
    def rank(self, test: LabTest, normalized_query: str) -> MatchTier:
        """
        Rank a test against a normalized query.
        
        The name wins over synonyms at every level, and exact beats
        prefix beats substring. The first satisfied tier is returned.
        
        Args:
            test: The test to rank
            normalized_query: Query already passed through the normalizer
            
        Returns:
            The matching tier, or MatchTier.NO_MATCH
        """
        if not normalized_query:
            return MatchTier.NO_MATCH
        
        name = self.normalizer.normalize(test.name)
        synonyms = self.normalizer.normalized_synonyms(test.synonyms)
        
        if name == normalized_query:
            return MatchTier.EXACT_NAME
        if normalized_query in synonyms:
            return MatchTier.EXACT_SYNONYM
        
        if name.startswith(normalized_query):
            return MatchTier.NAME_PREFIX
        if any(s.startswith(normalized_query) for s in synonyms):
            return MatchTier.SYNONYM_PREFIX
        
        if normalized_query in name:
            return MatchTier.NAME_CONTAINS
        if any(normalized_query in s for s in synonyms):
            return MatchTier.SYNONYM_CONTAINS
        
        return MatchTier.NO_MATCH
