"""MenuSearch Filter Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from menusearch_core.filters.preferences import (
    PreferenceState,
    PreferenceProvider,
    StaticPreferenceProvider,
)
from menusearch_core.filters.predicates import (
    Predicate,
    PredicateLike,
    canonical_filter_key,
    is_cacheable,
    predicate_key,
    vegetarian,
    no_pork,
    no_dairy,
    no_meat,
    no_seafood,
    extract_max_price,
    max_price,
    liked_only,
    hide_disliked,
)
from menusearch_core.filters.stage import FilterStage, predicates_from_flags

__all__ = [
    "PreferenceState",
    "PreferenceProvider",
    "StaticPreferenceProvider",
    "Predicate",
    "PredicateLike",
    "canonical_filter_key",
    "is_cacheable",
    "predicate_key",
    "vegetarian",
    "no_pork",
    "no_dairy",
    "no_meat",
    "no_seafood",
    "extract_max_price",
    "max_price",
    "liked_only",
    "hide_disliked",
    "FilterStage",
    "predicates_from_flags",
]
