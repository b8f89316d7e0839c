"""
Unit tests for search suggestions and autocomplete.

Usage:
    pytest tests/test_suggest.py -v
"""

from menusearch_core.config import SearchConfig
from menusearch_core.index.records import FieldKind
from menusearch_core.query.matcher import Matcher
from menusearch_core.suggest import SuggestionGenerator


class TestGenerate:
    """Test search suggestions."""

    def test_typo_suggests_correct_word_first(self, index):
        records = Matcher(index).match("paela").records()
        suggestions = SuggestionGenerator(index).generate("paela", records)
        assert suggestions[0] == "paella"
        assert "paella valenciana" in suggestions
        assert len(suggestions) <= SearchConfig().max_suggestions

    def test_query_prefixed_terms_first(self, index):
        suggestions = SuggestionGenerator(index).generate("gam")
        assert suggestions[:2] == ["gambas", "gambas al ajillo"]

    def test_query_word_prefix(self, index):
        suggestions = SuggestionGenerator(index).generate("queso man")
        assert "manchego" in suggestions
        assert "queso manchego" in suggestions

    def test_excludes_query_itself(self, index):
        assert "gazpacho" not in SuggestionGenerator(index).generate("gazpacho")

    def test_distinct_and_limited(self, index):
        records = Matcher(index).match("paella").records()
        suggestions = SuggestionGenerator(index).generate("paella", records, limit=3)
        assert len(suggestions) == 3
        assert len(set(suggestions)) == 3

    def test_shorter_first_among_equals(self, index):
        suggestions = SuggestionGenerator(index).generate("gam")
        prefixed = [s for s in suggestions if s.startswith("gam")]
        assert [len(s) for s in prefixed] == sorted(len(s) for s in prefixed)

    def test_empty_query(self, index):
        assert SuggestionGenerator(index).generate("") == []


class TestAutocomplete:
    """Test prefix completion."""

    def test_completion_with_context(self, index):
        completions = SuggestionGenerator(index).autocomplete("Gamb")
        assert [c.text for c in completions] == ["gambas al ajillo", "gambas"]
        first = completions[0]
        assert first.context == "Gambas al Ajillo"
        assert first.record_id == "gambas"
        assert first.field_kind is FieldKind.PRIMARY

    def test_paella_offered(self, index):
        texts = [c.text for c in SuggestionGenerator(index).autocomplete("pae", 5)]
        assert "paella" in texts
        assert len(texts) <= 5

    def test_exact_term_excluded(self, index):
        texts = [c.text for c in SuggestionGenerator(index).autocomplete("paella")]
        assert "paella" not in texts
        assert "paella valenciana" in texts

    def test_default_limit(self, index):
        generator = SuggestionGenerator(index, SearchConfig(autocomplete_limit=2))
        assert len(generator.autocomplete("p")) == 2

    def test_blank_prefix(self, index):
        assert SuggestionGenerator(index).autocomplete("") == []
        assert SuggestionGenerator(index).autocomplete("   ") == []
