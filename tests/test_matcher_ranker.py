"""
Unit tests for match evidence collection, per-entry scoring and ranking.

Usage:
    pytest tests/test_matcher_ranker.py -v
"""

import math

import pytest

from menusearch_core.config import SearchConfig
from menusearch_core.errors import DegradedSearchError
from menusearch_core.index.records import FieldKind, MenuRecord
from menusearch_core.query.matcher import (
    PARTIAL_WORD_PENALTY,
    MatchAccumulator,
    MatchEntry,
    Matcher,
)
from menusearch_core.ranking.ranker import Ranker
from menusearch_core.ranking.scorer import FuzzyScorer, ScoringContext


def entries_for(accumulator, record_id):
    return accumulator.entries(record_id)


# =============================================================================
# Matcher
# =============================================================================

class TestMatcher:
    """Test match evidence collection."""

    def test_blank_query(self, index):
        accumulator = Matcher(index).match("   ")
        assert len(accumulator) == 0

    def test_exact_whole_name(self, index):
        accumulator = Matcher(index).match("Gazpacho Andaluz")
        primary = [
            e for e in entries_for(accumulator, "gazpacho")
            if e.field_kind is FieldKind.PRIMARY and not e.is_partial_word
        ]
        assert len(primary) == 1
        assert primary[0].similarity == 1.0
        assert primary[0].is_exact
        assert primary[0].is_prefix

    def test_multi_word_pass(self, index):
        accumulator = Matcher(index).match("gazpacho andaluz")
        partial = [
            e for e in entries_for(accumulator, "gazpacho")
            if e.is_partial_word and e.matched_term == "gazpacho"
        ]
        assert partial
        assert partial[0].similarity == pytest.approx(PARTIAL_WORD_PENALTY)
        assert partial[0].is_exact
        assert accumulator.stats.word_passes == 2

    def test_single_word_has_no_partial_entries(self, index):
        accumulator = Matcher(index).match("gazpacho")
        for _, entries in accumulator:
            assert not any(e.is_partial_word for e in entries)
        assert accumulator.stats.word_passes == 0

    def test_prefix_flag(self, index):
        accumulator = Matcher(index).match("pae")
        entry = next(
            e for e in entries_for(accumulator, "paella-valenciana")
            if e.matched_term == "paella"
        )
        assert entry.is_prefix
        assert not entry.is_exact
        assert entry.similarity == pytest.approx(0.5)

    def test_threshold(self, index):
        strict = Matcher(index, SearchConfig(fuzzy_threshold=1.0))
        accumulator = strict.match("paela")
        assert len(accumulator) == 0

    def test_typo_matches_both_paellas(self, index):
        accumulator = Matcher(index).match("paela")
        ids = [r.id for r in accumulator.records()]
        assert ids[:2] == ["paella-valenciana", "paella-marisco"]

    def test_degraded_terms_skipped(self, index):
        def fragile(a, b):
            if b == "saffron":
                raise ValueError("cannot compare")
            return 1.0 if a == b else 0.0

        accumulator = Matcher(index, similarity_fn=fragile).match("rice")
        assert accumulator.stats.degraded_terms == 1
        assert "paella-valenciana" in accumulator


# =============================================================================
# Scorer
# =============================================================================

class TestFuzzyScorer:
    """Test per-entry adjusted scores."""

    def test_exact_and_prefix_bonus(self):
        entry = MatchEntry(1.0, FieldKind.PRIMARY, 1.0, "flan", is_exact=True, is_prefix=True)
        assert FuzzyScorer().score(entry, ScoringContext()) == pytest.approx(1.8)

    def test_partial_word_factor(self):
        entry = MatchEntry(0.8, FieldKind.NAME_WORD, 0.7, "flan", is_exact=True, is_prefix=True,
                           is_partial_word=True)
        assert FuzzyScorer().score(entry, ScoringContext()) == pytest.approx((0.56 + 0.8) * 0.9)

    def test_bonuses_from_config(self):
        context = ScoringContext.from_config(SearchConfig(exact_match_bonus=0.0, prefix_bonus=0.0))
        entry = MatchEntry(0.5, FieldKind.BODY_WORD, 0.5, "rice", is_exact=True, is_prefix=True)
        assert FuzzyScorer().score(entry, context) == pytest.approx(0.25)

    def test_explain(self):
        entry = MatchEntry(0.5, FieldKind.SECONDARY, 0.8, "seafood paella")
        explanation = FuzzyScorer().explain(entry, ScoringContext())
        assert explanation["score"] == pytest.approx(0.4)
        assert explanation["details"]["exact_bonus"] == 0.0


# =============================================================================
# Ranker
# =============================================================================

class TestRanker:
    """Test per-record scores and ordering."""

    def test_score_normalized_by_sqrt_count(self):
        record = MenuRecord(id="flan", primary_name="Flan")
        entries = [
            MatchEntry(0.5, FieldKind.SECONDARY, 0.8, "caramel custard", is_prefix=True),
            MatchEntry(0.8, FieldKind.NAME_WORD, 0.7, "flan", is_exact=True,
                       is_partial_word=True),
        ]
        result = Ranker().score_record(record, entries)
        first = 0.5 * 0.8 + 0.3
        second = (0.8 * 0.7 + 0.5) * 0.9
        assert result.score == pytest.approx((first + second) / math.sqrt(2))
        assert result.best_field_kind is FieldKind.NAME_WORD
        assert result.max_score == pytest.approx(second)
        assert result.match_count == 2
        assert result.matched_terms == ("caramel custard", "flan")

    def test_no_entries_is_degraded(self):
        with pytest.raises(DegradedSearchError):
            Ranker().score_record(MenuRecord(id="flan", primary_name="Flan"), [])

    def test_sorted_descending(self, index):
        results = Ranker().rank(Matcher(index).match("paella"))
        scores = [r.score for r in results]
        assert scores == sorted(scores, reverse=True)
        assert {r.record_id for r in results[:2]} == {"paella-valenciana", "paella-marisco"}

    def test_ties_keep_first_match_order(self):
        accumulator = MatchAccumulator()
        for record_id in ("b", "a", "c"):
            record = MenuRecord(id=record_id, primary_name=record_id)
            accumulator.add(record, MatchEntry(0.5, FieldKind.PRIMARY, 1.0, record_id))
        results = Ranker().rank(accumulator)
        assert [r.record_id for r in results] == ["b", "a", "c"]

    def test_empty_accumulator(self):
        assert Ranker().rank(MatchAccumulator()) == []

    def test_typo_query_positive_score(self, index):
        results = Ranker().rank(Matcher(index).match("paela"))
        assert {r.record_id for r in results[:2]} == {"paella-valenciana", "paella-marisco"}
        assert all(r.score > 0 for r in results)
