"""MenuSearch Predicates - Keyed Boolean Record Filters.

A predicate is a boolean function of a record plus a stable key. The key
identifies the predicate inside result cache keys, so two predicate sets
that filter the same way share cache entries regardless of order.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import re
import types
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Union

from menusearch_core.filters.preferences import PreferenceProvider, PreferenceState
from menusearch_core.index.records import MenuRecord

logger = logging.getLogger(__name__)

PRICE_PATTERN = re.compile(r"€\s*(\d+)(?:\s*-\s*(\d+))?")


@dataclass(frozen=True)
class Predicate:
    """A keyed record filter.

    Attributes:
        key: Stable identifier used in cache keys
        test: Function returning True for records to keep
        cacheable: Whether results filtered by this predicate may be cached
    """

    key: str
    test: Callable[[MenuRecord], bool]
    cacheable: bool = True

    def __call__(self, record: MenuRecord) -> bool:
        return bool(self.test(record))


PredicateLike = Union[Predicate, Callable[[MenuRecord], bool]]


def predicate_key(predicate: PredicateLike) -> str:
    """Get the cache key of a predicate or plain callable."""
    if isinstance(predicate, Predicate):
        return predicate.key
    module = getattr(predicate, "__module__", None) or ""
    name = getattr(predicate, "__qualname__", None) or type(predicate).__qualname__
    return f"{module}.{name}" if module else name


def is_cacheable(predicate: PredicateLike) -> bool:
    """Whether a predicate's cache key identifies what it filters.

    Only keyed predicates and module-level functions qualify. Lambdas and
    nested functions have no stable name; partials, bound methods and
    callable instances carry state their qualified name does not capture.
    """
    if isinstance(predicate, Predicate):
        return predicate.cacheable
    if not isinstance(predicate, types.FunctionType):
        return False
    return "<" not in predicate.__qualname__


def canonical_filter_key(predicates: Optional[Iterable[PredicateLike]]) -> str:
    """Order-independent, duplicate-free key for a predicate set."""
    if not predicates:
        return ""
    return "&".join(sorted({predicate_key(p) for p in predicates}))


# Dietary predicates

vegetarian = Predicate("vegetarian", lambda r: r.is_vegetarian)
no_pork = Predicate("no_pork", lambda r: not r.has_pork)
no_dairy = Predicate("no_dairy", lambda r: not r.has_dairy)
no_meat = Predicate("no_meat", lambda r: not r.has_pork and not r.has_other_meat)
no_seafood = Predicate("no_seafood", lambda r: not r.has_seafood)


def extract_max_price(price_range: str) -> Optional[int]:
    """Get the upper bound of a price range such as "€12-18" or "€9".

    Returns:
        The maximum price, or None when the text holds no price
    """
    if not price_range:
        return None
    match = PRICE_PATTERN.search(price_range)
    if not match:
        return None
    return int(match.group(2) or match.group(1))


def max_price(limit: Union[int, float]) -> Predicate:
    """Keep records whose maximum price is at or below ``limit``.

    Records without a parsable price are kept.
    """
    def test(record: MenuRecord) -> bool:
        price = extract_max_price(record.price_range)
        return price is None or price <= limit

    return Predicate(f"max_price={float(limit)!r}", test)


def liked_only(preferences: PreferenceProvider) -> Predicate:
    """Keep only records the user liked."""
    return Predicate(
        "liked_only",
        lambda r: preferences.get_state(r.id) is PreferenceState.LIKED,
        cacheable=False,
    )


def hide_disliked(preferences: PreferenceProvider) -> Predicate:
    """Drop records the user disliked."""
    return Predicate(
        "hide_disliked",
        lambda r: preferences.get_state(r.id) is not PreferenceState.DISLIKED,
        cacheable=False,
    )


__all__ = [
    "Predicate",
    "PredicateLike",
    "PRICE_PATTERN",
    "predicate_key",
    "is_cacheable",
    "canonical_filter_key",
    "vegetarian",
    "no_pork",
    "no_dairy",
    "no_meat",
    "no_seafood",
    "extract_max_price",
    "max_price",
    "liked_only",
    "hide_disliked",
]
