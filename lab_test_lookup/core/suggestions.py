"""Autocomplete candidate generation for partial queries."""

from enum import Enum
from typing import Callable, List, NamedTuple, Sequence, Set, Tuple

from ..models.record import LabTest
from .normalizer import TextNormalizer

DEFAULT_MAX_SUGGESTIONS = 8


class SuggestionReason(str, Enum):
    """Which pass produced a candidate."""
    
    NAME = "name"
    MATCH = "match"
    SYNONYM = "synonym"


class Suggestion(NamedTuple):
    """Autocomplete candidate tagged with its reason."""
    
    test: LabTest
    reason: SuggestionReason


class SuggestionEngine:
    """Bounded, reason-tagged autocomplete over a sequence of tests."""
    
    def __init__(self) -> None:
        """Initialize the suggestion engine."""
        self.normalizer = TextNormalizer()
    
    def suggest(
        self,
        tests: Sequence[LabTest],
        partial_query: str,
        max_results: int = DEFAULT_MAX_SUGGESTIONS
    ) -> List[Suggestion]:
        """
        Build autocomplete candidates for a partial query.
        
        Three passes run over the tests in their given order: name
        starts with the query, then name contains it, then a synonym
        starts with it. Passes share the max_results budget and skip
        tests already picked.
        
        Args:
            tests: Tests to draw candidates from
            partial_query: What the user has typed so far
            max_results: Maximum number of candidates
            
        Returns:
            List of Suggestion tuples, at most max_results long
        """
        normalized_query = self.normalizer.normalize(partial_query)
        if not normalized_query or max_results <= 0:
            return []
        
        passes: List[Tuple[SuggestionReason, Callable[[LabTest], bool]]] = [
            (
                SuggestionReason.NAME,
                lambda t: self.normalizer.normalize(t.name).startswith(normalized_query),
            ),
            (
                SuggestionReason.MATCH,
                lambda t: normalized_query in self.normalizer.normalize(t.name),
            ),
            (
                SuggestionReason.SYNONYM,
                lambda t: any(
                    s.startswith(normalized_query)
                    for s in self.normalizer.normalized_synonyms(t.synonyms)
                ),
            ),
        ]
        
        picks: List[Suggestion] = []
        picked_ids: Set[str] = set()
        
        for reason, matches in passes:
            for test in tests:
                if len(picks) >= max_results:
                    return picks
                if test.id in picked_ids or not matches(test):
                    continue
                picks.append(Suggestion(test, reason))
                picked_ids.add(test.id)
        
        return picks
