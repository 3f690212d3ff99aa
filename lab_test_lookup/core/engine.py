"""Search engine ordering tests by match tier and name."""

from typing import List, Sequence, Tuple

from ..models.record import LabTest
from .normalizer import TextNormalizer
from .ranker import MatchTier, Ranker


class SearchEngine:
    """Committed-query search over an immutable sequence of tests.
    
    The engine holds no record state: the caller passes the records on
    every call, so repeated calls with the same arguments give the same
    output.
    """
    
    def __init__(self) -> None:
        """Initialize the search engine."""
        self.normalizer = TextNormalizer()
        self.ranker = Ranker(self.normalizer)
    
    def search_ranked(
        self,
        tests: Sequence[LabTest],
        query: str
    ) -> List[Tuple[LabTest, MatchTier]]:
        """
        Rank and order tests for a query, keeping each test's tier.
        
        Args:
            tests: Tests to search
            query: Raw query string
            
        Returns:
            (test, tier) pairs sorted by tier, then name case-insensitively
        """
        normalized_query = self.normalizer.normalize(query)
        if not normalized_query:
            return []
        
        scored = []
        for test in tests:
            tier = self.ranker.rank(test, normalized_query)
            if tier != MatchTier.NO_MATCH:
                scored.append((test, tier))
        
        scored.sort(key=lambda item: (item[1], item[0].name.lower()))
        return scored
    
    def search(self, tests: Sequence[LabTest], query: str) -> List[LabTest]:
        """
        Search tests for a committed query.
        
        Args:
            tests: Tests to search
            query: Raw query string
            
        Returns:
            Matching tests, most relevant first
        """
        return [test for test, _ in self.search_ranked(tests, query)]
