"""Unit tests for the search engine core functionality."""

import pytest
from lab_test_lookup.core.engine import SearchEngine
from lab_test_lookup.core.normalizer import TextNormalizer
from lab_test_lookup.core.ranker import MatchTier
from lab_test_lookup.models.record import LabTest


def make_test(name, synonyms="", test_id=None):
    """Build a record with a derived id."""
    return LabTest(id=test_id or TextNormalizer().slugify(name), name=name, synonyms=synonyms)


class TestSearchEngine:
    """Test cases for the SearchEngine class."""
    
    @pytest.fixture
    def engine(self):
        """Create a search engine instance for testing."""
        return SearchEngine()
    
    @pytest.fixture
    def hem_tests(self):
        """Small set exercising name and synonym matches."""
        return [
            make_test("Hemoglobin"),
            make_test("Hematocrit"),
            make_test("CBC", "Hemoglobin Panel"),
        ]
    
    @pytest.fixture
    def sample_tests(self):
        """Broader sample dataset."""
        return [
            make_test("Complete Blood Count", "FBC|Full Blood Count|CBC"),
            make_test("Hemoglobin", "Hb|Haemoglobin"),
            make_test("HbA1c", "Glycated Hemoglobin|A1c"),
            make_test("Fasting Blood Glucose", "FBS|Fasting Glucose"),
            make_test("blood culture", "BC"),
            make_test("Thyroid Stimulating Hormone", "TSH"),
        ]
    
    def test_exact_name_then_exact_synonym(self, engine, hem_tests):
        """Test exact name ranks before an exact synonym; non-matches excluded."""
        results = engine.search(hem_tests, "Hemoglobin")
        
        assert [t.name for t in results] == ["Hemoglobin", "CBC"]
    
    def test_search_ranked_reports_tiers(self, engine, hem_tests):
        """Test tiers returned alongside records."""
        ranked = engine.search_ranked(hem_tests, "hemoglobin")
        
        assert [(t.name, tier) for t, tier in ranked] == [
            ("Hemoglobin", MatchTier.EXACT_NAME),
            ("CBC", MatchTier.SYNONYM_PREFIX),
        ]
    
    def test_empty_query(self, engine, sample_tests):
        """Test empty and whitespace queries return nothing."""
        assert engine.search(sample_tests, "") == []
        assert engine.search(sample_tests, "   ") == []
        assert engine.search(sample_tests, None) == []
    
    def test_no_match(self, engine, sample_tests):
        """Test query matching nothing."""
        assert engine.search(sample_tests, "xyz123") == []
    
    def test_case_insensitive_search(self, engine, sample_tests):
        """Test case-insensitive search."""
        for query in ["hemoglobin", "HEMOGLOBIN", "  Hemoglobin "]:
            results = engine.search(sample_tests, query)
            assert results[0].name == "Hemoglobin"
    
    def test_tier_ordering(self, engine, sample_tests):
        """Test results ordered exact > prefix > substring, name before synonym."""
        ranked = engine.search_ranked(sample_tests, "blood")
        
        names = [t.name for t, _ in ranked]
        tiers = [tier for _, tier in ranked]
        
        # "blood culture" is a name prefix; the other two contain "blood"
        assert names == ["blood culture", "Complete Blood Count", "Fasting Blood Glucose"]
        assert tiers == [MatchTier.NAME_PREFIX, MatchTier.NAME_CONTAINS, MatchTier.NAME_CONTAINS]
    
    def test_output_sorted_by_tier_then_name(self, engine, sample_tests):
        """Test tiers non-decreasing and names non-decreasing within a tier."""
        for query in ["h", "b", "c", "glu", "a1", "e"]:
            ranked = engine.search_ranked(sample_tests, query)
            keys = [(tier, t.name.lower()) for t, tier in ranked]
            assert keys == sorted(keys)
    
    def test_name_tie_break_is_case_insensitive(self, engine):
        """Test names within a tier compare without regard to case."""
        tests = [make_test("beta test"), make_test("Alpha test"), make_test("gamma test")]
        
        results = engine.search(tests, "test")
        
        assert [t.name for t in results] == ["Alpha test", "beta test", "gamma test"]
    
    def test_synonym_exact_beats_name_prefix(self, engine):
        """Test an exact synonym outranks a name prefix."""
        tests = [make_test("TSH Receptor Antibody"), make_test("Thyroid Stimulating Hormone", "TSH")]
        
        results = engine.search(tests, "tsh")
        
        assert [t.name for t in results] == ["Thyroid Stimulating Hormone", "TSH Receptor Antibody"]
    
    def test_no_result_limit(self, engine):
        """Test every match is returned."""
        tests = [make_test(f"Panel {i}") for i in range(50)]
        assert len(engine.search(tests, "panel")) == 50
    
    def test_search_is_deterministic(self, engine, sample_tests):
        """Test repeated calls give identical output and leave input unchanged."""
        snapshot = list(sample_tests)
        
        first = engine.search(sample_tests, "h")
        second = engine.search(sample_tests, "h")
        
        assert first == second
        assert sample_tests == snapshot
    
    def test_accepts_any_sequence(self, engine, sample_tests):
        """Test tuples work as well as lists."""
        assert engine.search(tuple(sample_tests), "tsh") == engine.search(sample_tests, "tsh")
