"""Unit tests for autocomplete suggestion generation."""

import pytest
from lab_test_lookup.core.normalizer import TextNormalizer
from lab_test_lookup.core.suggestions import (
    DEFAULT_MAX_SUGGESTIONS,
    Suggestion,
    SuggestionEngine,
    SuggestionReason,
)
from lab_test_lookup.models.record import LabTest


def make_test(name, synonyms="", test_id=None):
    """Build a record with a derived id."""
    return LabTest(id=test_id or TextNormalizer().slugify(name), name=name, synonyms=synonyms)


class TestSuggestionEngine:
    """Test cases for the SuggestionEngine class."""
    
    @pytest.fixture
    def engine(self):
        """Create a suggestion engine instance for testing."""
        return SuggestionEngine()
    
    @pytest.fixture
    def hem_tests(self):
        """Small set exercising name and synonym matches."""
        return [
            make_test("Hemoglobin"),
            make_test("Hematocrit"),
            make_test("CBC", "Hemoglobin Panel"),
        ]
    
    def test_name_pass_before_synonym_pass(self, engine, hem_tests):
        """Test name prefixes in set order, then synonym prefixes."""
        picks = engine.suggest(hem_tests, "hem")
        
        assert [(p.test.name, p.reason) for p in picks] == [
            ("Hemoglobin", SuggestionReason.NAME),
            ("Hematocrit", SuggestionReason.NAME),
            ("CBC", SuggestionReason.SYNONYM),
        ]
    
    def test_match_pass_between_name_and_synonym(self, engine):
        """Test name-contains candidates come after name prefixes."""
        tests = [
            make_test("Fasting Blood Glucose"),
            make_test("Lipid Panel", "Blood Fats"),
            make_test("Blood Culture"),
        ]
        
        picks = engine.suggest(tests, "blood")
        
        assert [(p.test.name, p.reason.value) for p in picks] == [
            ("Blood Culture", "name"),
            ("Fasting Blood Glucose", "match"),
            ("Lipid Panel", "synonym"),
        ]
    
    def test_synonym_contains_is_not_suggested(self, engine):
        """Test synonyms only contribute through prefixes."""
        tests = [make_test("HbA1c", "Glycated Hemoglobin")]
        assert engine.suggest(tests, "hemoglobin") == []
    
    def test_empty_query(self, engine, hem_tests):
        """Test empty query yields no candidates."""
        assert engine.suggest(hem_tests, "", 8) == []
        assert engine.suggest(hem_tests, "   ") == []
        assert engine.suggest(hem_tests, None) == []
    
    def test_non_positive_budget(self, engine, hem_tests):
        """Test zero or negative budgets yield no candidates."""
        assert engine.suggest(hem_tests, "hem", 0) == []
        assert engine.suggest(hem_tests, "hem", -1) == []
    
    def test_max_results_caps_across_passes(self, engine, hem_tests):
        """Test the budget is shared between passes."""
        picks = engine.suggest(hem_tests, "hem", 2)
        
        assert len(picks) == 2
        assert all(p.reason == SuggestionReason.NAME for p in picks)
    
    def test_default_max_results(self, engine):
        """Test the default cap of eight candidates."""
        tests = [make_test(f"Panel {i}") for i in range(20)]
        
        picks = engine.suggest(tests, "panel")
        
        assert DEFAULT_MAX_SUGGESTIONS == 8
        assert len(picks) == 8
        assert [p.test.name for p in picks] == [f"Panel {i}" for i in range(8)]
    
    def test_no_repeated_ids(self, engine):
        """Test a record matching several passes appears once."""
        tests = [
            make_test("Glucose", "Glucose Tolerance|Glu"),
            make_test("Fasting Glucose", "Glucose Fasting"),
        ]
        
        picks = engine.suggest(tests, "glu", 10)
        ids = [p.test.id for p in picks]
        
        assert len(ids) == len(set(ids))
        assert [(p.test.name, p.reason) for p in picks] == [
            ("Glucose", SuggestionReason.NAME),
            ("Fasting Glucose", SuggestionReason.MATCH),
        ]
    
    def test_insertion_order_within_pass(self, engine):
        """Test no secondary sort within a pass."""
        tests = [make_test("Zinc"), make_test("Zika Serology"), make_test("Zeta Potential")]
        
        picks = engine.suggest(tests, "z")
        
        assert [p.test.name for p in picks] == ["Zinc", "Zika Serology", "Zeta Potential"]
    
    def test_suggestion_is_named_tuple(self, engine, hem_tests):
        """Test candidates unpack as (test, reason)."""
        test, reason = engine.suggest(hem_tests, "hemog")[0]
        
        assert isinstance(engine.suggest(hem_tests, "hemog")[0], Suggestion)
        assert test.name == "Hemoglobin"
        assert reason == "name"
    
    def test_suggest_is_deterministic(self, engine, hem_tests):
        """Test repeated calls give identical output."""
        assert engine.suggest(hem_tests, "he") == engine.suggest(hem_tests, "he")
