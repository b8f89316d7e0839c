"""MenuSearch Result Cache - Bounded Search Memo.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Iterable, List, Optional, Tuple

from menusearch_core.filters.predicates import PredicateLike, canonical_filter_key

if TYPE_CHECKING:
    from menusearch_core.ranking.ranker import ScoredResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheEntry:
    """A memoized search outcome."""

    key: str
    results: Tuple["ScoredResult", ...]
    suggestions: Tuple[str, ...]
    total_match_count: int
    inserted_at: float = field(default_factory=time.time)


def make_cache_key(normalized_query: str, predicates: Optional[Iterable[PredicateLike]] = None) -> str:
    """Combine a normalized query with its canonical filter key."""
    return f"{normalized_query}|{canonical_filter_key(predicates)}"


class ResultCache:
    """Bounded map from cache key to search outcome.

    When full, inserting a new key evicts the oldest inserted entry.
    Re-inserting an existing key replaces it without changing its age.
    A capacity of 0 disables caching.
    """

    def __init__(self, capacity: int = 100):
        self.capacity = capacity
        self._entries: Dict[str, CacheEntry] = {}
        self.evictions = 0

    def get(self, key: str) -> Optional[CacheEntry]:
        return self._entries.get(key)

    def put(
        self,
        key: str,
        results: Iterable["ScoredResult"],
        suggestions: Iterable[str],
        total_match_count: int,
    ) -> Optional[CacheEntry]:
        """Store a search outcome.

        Returns:
            The stored entry, or None when caching is disabled
        """
        if self.capacity <= 0:
            return None

        if key not in self._entries:
            while len(self._entries) >= self.capacity:
                oldest = next(iter(self._entries))
                del self._entries[oldest]
                self.evictions += 1
                logger.debug(f"Evicted cache entry {oldest!r}")

        entry = CacheEntry(
            key=key,
            results=tuple(results),
            suggestions=tuple(suggestions),
            total_match_count=total_match_count,
        )
        self._entries[key] = entry
        return entry

    def clear(self) -> None:
        self._entries.clear()

    def keys(self) -> List[str]:
        """Keys from oldest to newest."""
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries


__all__ = ["CacheEntry", "ResultCache", "make_cache_key"]
