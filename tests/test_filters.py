"""
Unit tests for predicates, flag parsing, preferences and the filter stage.

Usage:
    pytest tests/test_filters.py -v
"""

from functools import partial

import pytest

from menusearch_core.errors import ConfigurationError
from menusearch_core.filters import (
    FilterStage,
    Predicate,
    PreferenceState,
    StaticPreferenceProvider,
    canonical_filter_key,
    extract_max_price,
    hide_disliked,
    is_cacheable,
    liked_only,
    max_price,
    no_dairy,
    no_meat,
    no_pork,
    no_seafood,
    predicates_from_flags,
    vegetarian,
)
from menusearch_core.index.records import FieldKind, MenuRecord
from menusearch_core.ranking.ranker import ScoredResult


def kept_ids(records, predicate):
    return [r.id for r in records if predicate(r)]


def is_cheap(record):
    return record.price_range == "€9"


def price_at_most(limit, record):
    price = extract_max_price(record.price_range)
    return price is not None and price <= limit


class PriceAtMost:
    def __init__(self, limit):
        self.limit = limit

    def __call__(self, record):
        return price_at_most(self.limit, record)

    def keep(self, record):
        return price_at_most(self.limit, record)


@pytest.fixture
def results(records):
    """One scored result per record, in catalog order."""
    return [
        ScoredResult(record=r, score=1.0, best_field_kind=FieldKind.PRIMARY, match_count=1)
        for r in records
    ]


class TestDietaryPredicates:
    """Test dietary predicates."""

    def test_vegetarian(self, records):
        assert kept_ids(records, vegetarian) == ["gazpacho", "tortilla", "queso"]

    def test_no_pork(self, records):
        assert "jamon-iberico" not in kept_ids(records, no_pork)
        assert "paella-valenciana" in kept_ids(records, no_pork)

    def test_no_meat_excludes_pork_and_other_meat(self, records):
        kept = kept_ids(records, no_meat)
        assert "jamon-iberico" not in kept
        assert "paella-valenciana" not in kept
        assert "gambas" in kept

    def test_no_dairy_and_no_seafood(self, records):
        assert "queso" not in kept_ids(records, no_dairy)
        assert kept_ids(records, no_seafood) == [
            "paella-valenciana", "jamon-iberico", "gazpacho", "tortilla", "queso",
        ]


class TestPricePredicate:
    """Test price parsing and the price limit."""

    @pytest.mark.parametrize("text, expected", [
        ("€12-18", 18),
        ("€9", 9),
        ("€ 6 - 8", 8),
        ("", None),
        ("market price", None),
    ])
    def test_extract_max_price(self, text, expected):
        assert extract_max_price(text) == expected

    def test_max_price(self, records):
        kept = kept_ids(records, max_price(15))
        assert kept == ["paella-valenciana", "gazpacho", "tortilla", "queso"]

    def test_unpriced_records_kept(self):
        assert max_price(1)(MenuRecord(id="agua", primary_name="Agua"))

    def test_key_includes_limit(self):
        assert max_price(15).key == "max_price=15.0"
        assert max_price(12.5).key == "max_price=12.5"

    def test_close_limits_have_distinct_keys(self):
        assert max_price(1234567).key != max_price(1234568).key
        assert max_price(15).key == max_price(15.0).key


class TestPreferences:
    """Test the preference provider and preference predicates."""

    def test_states(self, preferences):
        assert preferences.get_state("gazpacho") is PreferenceState.LIKED
        assert preferences.get_state("jamon-iberico") is PreferenceState.DISLIKED
        assert preferences.get_state("queso") is PreferenceState.NEUTRAL

    def test_toggle(self):
        preferences = StaticPreferenceProvider()
        assert preferences.toggle_like("queso") is PreferenceState.LIKED
        assert preferences.toggle_like("queso") is PreferenceState.NEUTRAL
        assert preferences.toggle_dislike("queso") is PreferenceState.DISLIKED
        assert len(preferences) == 1

    def test_invalid_state(self):
        with pytest.raises(ValueError):
            StaticPreferenceProvider({"queso": "adored"})

    def test_liked_only(self, records, preferences):
        assert kept_ids(records, liked_only(preferences)) == ["gazpacho"]

    def test_hide_disliked(self, records, preferences):
        kept = kept_ids(records, hide_disliked(preferences))
        assert "jamon-iberico" not in kept
        assert len(kept) == len(records) - 1

    def test_preference_predicates_not_cacheable(self, preferences):
        assert not is_cacheable(liked_only(preferences))
        assert not is_cacheable(hide_disliked(preferences))


class TestFlags:
    """Test flag mapping parsing."""

    def test_camel_case_flags(self):
        predicates = predicates_from_flags({"vegetarian": True, "noPork": True, "maxPrice": 15})
        assert [p.key for p in predicates] == ["vegetarian", "no_pork", "max_price=15.0"]

    def test_snake_case_flags(self):
        predicates = predicates_from_flags({"no_dairy": True, "no_seafood": True})
        assert predicates == [no_dairy, no_seafood]

    def test_falsy_flags_ignored(self):
        assert predicates_from_flags({"vegetarian": False, "maxPrice": None, "noMeat": 0}) == []

    def test_empty_mapping(self):
        assert predicates_from_flags({}) == []
        assert predicates_from_flags(None) == []

    def test_unknown_flag(self):
        with pytest.raises(ConfigurationError):
            predicates_from_flags({"glutenFree": True})

    def test_invalid_price(self):
        with pytest.raises(ConfigurationError):
            predicates_from_flags({"maxPrice": "cheap"})

    def test_preference_flags(self, records, preferences):
        predicates = predicates_from_flags({"showLikedOnly": True}, preferences)
        assert kept_ids(records, predicates[0]) == ["gazpacho"]

    def test_preference_flags_need_provider(self):
        with pytest.raises(ConfigurationError):
            predicates_from_flags({"hideDisliked": True})


class TestCanonicalKey:
    """Test order-independent filter keys."""

    def test_order_independent(self):
        assert canonical_filter_key([no_pork, vegetarian]) == canonical_filter_key([vegetarian, no_pork])

    def test_duplicates_ignored(self):
        assert canonical_filter_key([no_pork, no_pork]) == canonical_filter_key([no_pork])

    def test_empty(self):
        assert canonical_filter_key([]) == ""
        assert canonical_filter_key(None) == ""

    def test_plain_callables(self):
        key = canonical_filter_key([is_cheap])
        assert key.endswith("is_cheap")
        assert is_cacheable(is_cheap)

    def test_lambdas_not_cacheable(self):
        assert not is_cacheable(lambda r: True)

    def test_stateful_callables_not_cacheable(self):
        assert not is_cacheable(partial(price_at_most, 10))
        assert not is_cacheable(PriceAtMost(10))
        assert not is_cacheable(PriceAtMost(10).keep)

    def test_predicate_keys_are_distinct(self):
        keys = {p.key for p in (vegetarian, no_pork, no_dairy, no_meat, no_seafood)}
        assert len(keys) == 5


class TestFilterStage:
    """Test AND composition."""

    def test_no_predicates_is_identity(self, results):
        assert FilterStage().apply(results, []) == results
        assert FilterStage().apply(results, None) == results

    def test_order_preserved(self, results):
        kept = FilterStage().apply(results, [vegetarian])
        assert [r.record_id for r in kept] == ["gazpacho", "tortilla", "queso"]

    def test_and_equals_intersection(self, results):
        stage = FilterStage()
        single = [
            {r.record_id for r in stage.apply(results, [p])}
            for p in (vegetarian, no_dairy, max_price(9))
        ]
        combined = {r.record_id for r in stage.apply(results, [vegetarian, no_dairy, max_price(9)])}
        assert combined == single[0] & single[1] & single[2]
        assert combined == {"gazpacho"}

    def test_custom_predicate(self, results):
        keep_ham = Predicate("ham", lambda r: "Ham" in r.secondary_name)
        assert [r.record_id for r in FilterStage().apply(results, [keep_ham])] == ["jamon-iberico"]
