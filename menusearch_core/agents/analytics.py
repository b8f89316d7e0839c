"""MenuSearch Analytics Agent - Search Statistics.

Counters are observations only; nothing here feeds back into ranking.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)


@dataclass
class QueryStats:
    """Running totals for one normalized query."""

    query: str
    count: int = 0
    total_latency_ms: float = 0.0
    total_results: int = 0
    cache_hits: int = 0
    zero_results: int = 0

    @property
    def avg_latency_ms(self) -> float:
        return self.total_latency_ms / max(1, self.count)

    @property
    def avg_results(self) -> float:
        return self.total_results / max(1, self.count)

    @property
    def cache_hit_rate(self) -> float:
        return self.cache_hits / max(1, self.count)


class AnalyticsAgent:
    """Analytics Agent - Search Statistics.

    Records every search the engine serves: latency, result counts,
    cache hits and misses, and queries that found nothing.

    Per-query totals are kept for at most ``max_tracked_queries`` distinct
    queries. When full, the least frequent query (oldest on ties) is dropped
    to make room; the global counters are unaffected.
    """

    def __init__(self, max_tracked_queries: int = 1000):
        self.max_tracked_queries = max_tracked_queries
        self._queries: Dict[str, QueryStats] = {}
        self.dropped_queries = 0
        self.total_searches = 0
        self.cache_hits = 0
        self.cache_misses = 0
        self.total_latency_ms = 0.0
        self.last_search_ms = 0.0
        self.started_at = datetime.now()

    def record_query(
        self,
        query: str,
        latency_ms: float,
        result_count: int,
        cache_hit: bool = False,
    ) -> None:
        """Record a served search.

        Args:
            query: Normalized query
            latency_ms: Time spent serving the search
            result_count: Matches after filtering
            cache_hit: Served from the result cache
        """
        self.total_searches += 1
        self.total_latency_ms += latency_ms
        self.last_search_ms = latency_ms
        if cache_hit:
            self.cache_hits += 1
        else:
            self.cache_misses += 1

        key = query.strip().lower()
        stats = self._queries.get(key)
        if stats is None:
            if self.max_tracked_queries <= 0:
                return
            if len(self._queries) >= self.max_tracked_queries:
                self._drop_least_frequent()
            stats = self._queries[key] = QueryStats(query=key)
        stats.count += 1
        stats.total_latency_ms += latency_ms
        stats.total_results += result_count
        if cache_hit:
            stats.cache_hits += 1
        if result_count == 0:
            stats.zero_results += 1

    def _drop_least_frequent(self) -> None:
        victim = min(self._queries.values(), key=lambda s: s.count)
        del self._queries[victim.query]
        self.dropped_queries += 1
        logger.debug(f"Analytics dropped query stats for {victim.query!r}")

    def get_query_stats(self, query: str) -> Optional[QueryStats]:
        return self._queries.get(query.strip().lower())

    def get_top_queries(self, limit: int = 10) -> List[QueryStats]:
        """Most frequent queries first."""
        return sorted(self._queries.values(), key=lambda s: s.count, reverse=True)[:limit]

    def get_zero_result_queries(self, limit: int = 10) -> List[Tuple[str, int]]:
        """Queries that returned no results, most frequent first."""
        zero_queries = [
            (s.query, s.zero_results) for s in self._queries.values() if s.zero_results
        ]
        zero_queries.sort(key=lambda x: x[1], reverse=True)
        return zero_queries[:limit]

    def get_statistics(self) -> Dict[str, Any]:
        return {
            "total_searches": self.total_searches,
            "cache_hits": self.cache_hits,
            "cache_misses": self.cache_misses,
            "last_search_ms": self.last_search_ms,
            "avg_search_ms": self.total_latency_ms / max(1, self.total_searches),
            "unique_queries": len(self._queries),
            "dropped_queries": self.dropped_queries,
            "tracking_since": self.started_at.isoformat(),
        }


__all__ = ["AnalyticsAgent", "QueryStats"]
