"""Immutable in-memory collection of lab tests."""

import time
from typing import Any, Dict, Iterable, Iterator, Optional, Tuple

from ..models.record import LabTest
from .normalizer import TextNormalizer


class LabTestCatalog:
    """Loaded set of tests with lookup by identifier.
    
    Built once from the loader output and never mutated afterwards.
    """
    
    def __init__(self, tests: Iterable[LabTest]) -> None:
        """
        Initialize the catalog.
        
        Args:
            tests: Tests in dataset order; identifiers must be unique
        """
        self._tests: Tuple[LabTest, ...] = tuple(tests)
        self._by_id: Dict[str, LabTest] = {}
        for test in self._tests:
            if test.id in self._by_id:
                raise ValueError(f"Duplicate test id '{test.id}'")
            self._by_id[test.id] = test
        
        normalizer = TextNormalizer()
        self._stats = {
            "total_tests": len(self._tests),
            "total_synonyms": sum(
                len(normalizer.tokenize_synonyms(t.synonyms)) for t in self._tests
            ),
            "loaded_at": time.time()
        }
    
    @property
    def tests(self) -> Tuple[LabTest, ...]:
        """All tests in dataset order."""
        return self._tests
    
    def get(self, test_id: str) -> Optional[LabTest]:
        """
        Look up a test by identifier.
        
        Args:
            test_id: The identifier to look up
            
        Returns:
            The test, or None if not found
        """
        return self._by_id.get(test_id)
    
    def __len__(self) -> int:
        return len(self._tests)
    
    def __iter__(self) -> Iterator[LabTest]:
        return iter(self._tests)
    
    def get_stats(self) -> Dict[str, Any]:
        """Get catalog statistics."""
        return self._stats.copy()
