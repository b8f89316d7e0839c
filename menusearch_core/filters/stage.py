"""MenuSearch Filter Stage - AND-Composed Result Filtering.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional, Sequence

from menusearch_core.errors import ConfigurationError
from menusearch_core.filters import predicates as p
from menusearch_core.filters.preferences import PreferenceProvider
from menusearch_core.filters.predicates import PredicateLike

if TYPE_CHECKING:
    from menusearch_core.ranking.ranker import ScoredResult

logger = logging.getLogger(__name__)

# Flag name (camelCase as sent by the UI, or snake_case) -> predicate
DIETARY_FLAGS: Dict[str, p.Predicate] = {
    "vegetarian": p.vegetarian,
    "noPork": p.no_pork,
    "no_pork": p.no_pork,
    "noDairy": p.no_dairy,
    "no_dairy": p.no_dairy,
    "noMeat": p.no_meat,
    "no_meat": p.no_meat,
    "noSeafood": p.no_seafood,
    "no_seafood": p.no_seafood,
}
PRICE_FLAGS = ("maxPrice", "max_price")
LIKED_FLAGS = ("showLikedOnly", "show_liked_only")
DISLIKED_FLAGS = ("hideDisliked", "hide_disliked")


class FilterStage:
    """Applies predicates to ranked results."""

    def apply(
        self,
        results: List["ScoredResult"],
        predicates: Optional[Sequence[PredicateLike]] = None,
    ) -> List["ScoredResult"]:
        """Keep results whose record satisfies every predicate.

        Args:
            results: Ranked results
            predicates: Predicates; empty means no filtering

        Returns:
            Surviving results in their original order
        """
        if not predicates:
            return list(results)
        return [
            result for result in results
            if all(predicate(result.record) for predicate in predicates)
        ]


def predicates_from_flags(
    flags: Optional[Mapping[str, Any]],
    preferences: Optional[PreferenceProvider] = None,
) -> List[PredicateLike]:
    """Build predicates from a filter flag mapping.

    Falsy flags impose no constraint. Example::

        predicates_from_flags({"vegetarian": True, "maxPrice": 15})

    Args:
        flags: Flag mapping as sent by the caller
        preferences: Provider backing the liked/disliked flags

    Returns:
        Predicates in flag order

    Raises:
        ConfigurationError: On unknown flags, a non-numeric price, or a
            preference flag without a preference provider
    """
    result: List[PredicateLike] = []
    for name, value in (flags or {}).items():
        known = (
            name in DIETARY_FLAGS
            or name in PRICE_FLAGS
            or name in LIKED_FLAGS
            or name in DISLIKED_FLAGS
        )
        if not known:
            raise ConfigurationError(f"Unknown filter flag: {name}")
        if not value:
            continue

        if name in DIETARY_FLAGS:
            result.append(DIETARY_FLAGS[name])
        elif name in PRICE_FLAGS:
            try:
                limit = float(value)
            except (TypeError, ValueError) as e:
                raise ConfigurationError(f"Invalid {name}: {value!r}") from e
            result.append(p.max_price(limit))
        else:
            if preferences is None:
                raise ConfigurationError(f"Filter flag {name} needs a preference provider")
            if name in LIKED_FLAGS:
                result.append(p.liked_only(preferences))
            else:
                result.append(p.hide_disliked(preferences))

    return result


__all__ = [
    "FilterStage",
    "predicates_from_flags",
]
