"""MenuSearch Core Engine - Search Engine Facade.

The SearchEngine class is the primary interface for all search operations,
coordinating index builds, fuzzy matching, ranking, filtering, suggestions
and the result cache.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence, Union

from menusearch_core.agents.analytics import AnalyticsAgent
from menusearch_core.cache import CacheEntry, ResultCache, make_cache_key
from menusearch_core.config import SearchConfig
from menusearch_core.errors import ConfigurationError, PreconditionError
from menusearch_core.filters.predicates import PredicateLike, is_cacheable
from menusearch_core.filters.preferences import PreferenceProvider
from menusearch_core.filters.stage import FilterStage, predicates_from_flags
from menusearch_core.index.inverted import TermIndex
from menusearch_core.index.records import RecordProvider
from menusearch_core.query.matcher import Matcher
from menusearch_core.ranking.ranker import Ranker, ScoredResult
from menusearch_core.suggest import AutocompleteSuggestion, SuggestionGenerator

logger = logging.getLogger(__name__)

Filters = Union[PredicateLike, Sequence[PredicateLike], Mapping[str, Any], None]


class IndexState(Enum):
    """Index state enumeration."""

    EMPTY = auto()
    BUILDING = auto()
    READY = auto()


@dataclass
class SearchResponse:
    """Search response.

    Attributes:
        results: Ranked, filtered results (at most ``max_results``)
        suggestions: Query suggestions (at most ``max_suggestions``)
        total_match_count: Filtered matches before truncation
        elapsed_ms: Time spent serving this call
        query: The query as given
        from_cache: Served from the result cache
    """

    results: List[ScoredResult] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)
    total_match_count: int = 0
    elapsed_ms: float = 0.0
    query: str = ""
    from_cache: bool = False

    def __len__(self) -> int:
        return len(self.results)

    def __iter__(self) -> Iterator[ScoredResult]:
        return iter(self.results)

    def __getitem__(self, index: int) -> ScoredResult:
        return self.results[index]

    @property
    def record_ids(self) -> List[str]:
        return [r.record_id for r in self.results]


@dataclass(frozen=True)
class _Generation:
    """A built index with the components bound to it."""

    index: TermIndex
    matcher: Matcher
    suggester: SuggestionGenerator


class SearchEngine:
    """Main search engine class.

    Searches are served against the live index generation. A build
    creates a fresh index and swaps it in once complete, so a search
    that starts while a build is running sees the previous generation.
    """

    def __init__(
        self,
        provider: RecordProvider,
        config: Optional[SearchConfig] = None,
        preferences: Optional[PreferenceProvider] = None,
    ):
        """Initialize search engine.

        Args:
            provider: Source of catalog records
            config: Engine configuration
            preferences: Source of liked/disliked state for preference filters
        """
        self.provider = provider
        self.config = config or SearchConfig()
        self.preferences = preferences
        self._state = IndexState.EMPTY
        self._generation: Optional[_Generation] = None
        self._builds = 0

        self._ranker = Ranker(self.config)
        self._filter_stage = FilterStage()
        self._cache = ResultCache(self.config.cache_size)
        self.analytics = AnalyticsAgent()

    def build_index(self) -> TermIndex:
        """Build a new index generation from the provider's records.

        Returns:
            The new live index

        Raises:
            PreconditionError: If the provider has not loaded its records
        """
        if not self.provider.is_loaded:
            raise PreconditionError("Records not loaded. Load the record provider first.")
        records = self.provider.get_records()

        previous_state = self._state
        self._state = IndexState.BUILDING
        try:
            index = TermIndex.build(records, self.config, generation=self._builds + 1)
        except Exception:
            self._state = previous_state
            raise

        self._builds = index.generation
        self._generation = _Generation(
            index=index,
            matcher=Matcher(index, self.config),
            suggester=SuggestionGenerator(index, self.config),
        )
        self._cache.clear()
        self._state = IndexState.READY
        logger.info(
            f"Search index ready: generation {index.generation}, "
            f"{len(index)} terms from {index.record_count} records"
        )
        return index

    def rebuild_index(self) -> TermIndex:
        """Rebuild the index after the catalog changed.

        Raises:
            PreconditionError: If the provider has not loaded its records
        """
        logger.info("Rebuilding search index")
        self.clear_cache()
        return self.build_index()

    def search(self, query: str, filters: Filters = None) -> SearchResponse:
        """Execute a search query.

        Args:
            query: Raw user query
            filters: A predicate, a sequence of predicates, or a flag mapping such as
                ``{"vegetarian": True, "maxPrice": 15}``

        Returns:
            Search response; empty for blank, too-short or failing queries

        Raises:
            PreconditionError: If no index exists and records are not loaded
            ConfigurationError: On an invalid flag mapping or filters value
        """
        start_time = time.time()

        clean = query.strip() if query else ""
        if not clean or len(clean) < self.config.min_query_length:
            return SearchResponse(query=query or "", elapsed_ms=self._elapsed(start_time))

        if self._generation is None:
            self.build_index()
        generation = self._generation

        predicates = self._resolve_filters(filters)
        clean_query = generation.index.normalize(query)
        cacheable = all(is_cacheable(p) for p in predicates)
        cache_key = make_cache_key(clean_query, predicates)

        if cacheable:
            cached = self._cache.get(cache_key)
            if cached is not None:
                logger.debug(f"Cache hit for query: {clean_query!r}")
                return self._from_entry(query, clean_query, cached, start_time)

        try:
            accumulator = generation.matcher.match(clean_query)
            ranked = self._ranker.rank(accumulator)
            filtered = self._filter_stage.apply(ranked, predicates)
            suggestions = generation.suggester.generate(clean_query, accumulator.records())
        except Exception:
            logger.exception(f"Search failed for query: {query!r}")
            return SearchResponse(query=query, elapsed_ms=self._elapsed(start_time))

        results = filtered[:self.config.max_results]
        if cacheable:
            self._cache.put(cache_key, results, suggestions, len(filtered))

        response = SearchResponse(
            results=results,
            suggestions=suggestions,
            total_match_count=len(filtered),
            elapsed_ms=self._elapsed(start_time),
            query=query,
        )
        self.analytics.record_query(clean_query, response.elapsed_ms, len(filtered))
        return response

    def autocomplete(self, prefix: str, limit: Optional[int] = None) -> List[AutocompleteSuggestion]:
        """Complete a typed prefix from the index terms.

        Args:
            prefix: Raw typed text
            limit: Maximum completions (default ``autocomplete_limit``)

        Returns:
            Completions; empty for a blank prefix or an unbuilt index
        """
        generation = self._generation
        if generation is None:
            return []
        return generation.suggester.autocomplete(prefix, limit)

    def clear_cache(self) -> None:
        """Drop all memoized search results."""
        self._cache.clear()
        logger.info("Search cache cleared")

    def get_stats(self) -> Dict[str, Any]:
        """Get engine statistics.

        Returns:
            Search counters merged with cache and index figures
        """
        index = self.index
        stats = self.analytics.get_statistics()
        stats.update({
            "cache_size": len(self._cache),
            "cache_capacity": self._cache.capacity,
            "index_size": len(index) if index is not None else 0,
            "record_count": index.record_count if index is not None else 0,
            "generation": index.generation if index is not None else 0,
            "state": self._state.name,
        })
        return stats

    @property
    def state(self) -> IndexState:
        """Get current index state."""
        return self._state

    @property
    def index(self) -> Optional[TermIndex]:
        """Get the live index generation (None before the first build)."""
        return self._generation.index if self._generation is not None else None

    @property
    def cache(self) -> ResultCache:
        return self._cache

    def _resolve_filters(self, filters: Filters) -> List[PredicateLike]:
        if filters is None:
            return []
        if isinstance(filters, Mapping):
            return predicates_from_flags(filters, self.preferences)
        if callable(filters):
            return [filters]
        if isinstance(filters, (str, bytes)):
            raise ConfigurationError(f"Invalid filters value: {filters!r}")
        try:
            predicates = list(filters)
        except TypeError:
            raise ConfigurationError(
                f"Filters must be predicates or a flag mapping, got {type(filters).__name__}"
            ) from None
        for predicate in predicates:
            if not callable(predicate):
                raise ConfigurationError(f"Filter is not callable: {predicate!r}")
        return predicates

    def _from_entry(
        self, query: str, clean_query: str, entry: CacheEntry, start_time: float,
    ) -> SearchResponse:
        response = SearchResponse(
            results=list(entry.results),
            suggestions=list(entry.suggestions),
            total_match_count=entry.total_match_count,
            elapsed_ms=self._elapsed(start_time),
            query=query,
            from_cache=True,
        )
        self.analytics.record_query(
            clean_query, response.elapsed_ms, entry.total_match_count, cache_hit=True,
        )
        return response

    @staticmethod
    def _elapsed(start_time: float) -> float:
        return (time.time() - start_time) * 1000


__all__ = [
    "SearchEngine",
    "SearchConfig",
    "SearchResponse",
    "IndexState",
]
