"""MenuSearch - Fuzzy Menu Search Engine for BlackRoad OS.

An in-memory fuzzy search engine over a small catalog of menu records.
It turns a partial, possibly misspelled or accent-dropped query into a
ranked, filtered list of records plus autocomplete suggestions.

Architecture:
┌─────────────────────────────────────────────────────────────────────────────┐
│                           MenuSearch Engine                                 │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                             │
│   ┌─────────────────────────────────────────────────────────────────────┐   │
│   │                        Search Pipeline                              │   │
│   │  ┌────────────┐  ┌────────────┐  ┌────────────┐  ┌────────────┐    │   │
│   │  │   Cache    │→ │   Match    │→ │    Rank    │→ │   Filter   │    │   │
│   │  └────────────┘  └────────────┘  └────────────┘  └────────────┘    │   │
│   └─────────────────────────────────────────────────────────────────────┘   │
│                                                                             │
│   ┌─────────────────────────────────────────────────────────────────────┐   │
│   │                        Index Layer                                  │   │
│   │  ┌────────────┐  ┌────────────┐  ┌────────────┐  ┌────────────┐    │   │
│   │  │  Analyzer  │  │    Term    │  │   Record   │  │ Preference │    │   │
│   │  │  Pipeline  │  │   Index    │  │  Provider  │  │  Provider  │    │   │
│   │  └────────────┘  └────────────┘  └────────────┘  └────────────┘    │   │
│   └─────────────────────────────────────────────────────────────────────┘   │
│                                                                             │
│   ┌─────────────────────────────────────────────────────────────────────┐   │
│   │                        Ranking Engine                               │   │
│   │  ┌────────────┐  ┌────────────┐  ┌────────────┐  ┌────────────┐    │   │
│   │  │Levenshtein │  │  Bigram    │  │   Fuzzy    │  │  Ranker    │    │   │
│   │  │ Similarity │  │  Jaccard   │  │   Scorer   │  │            │    │   │
│   │  └────────────┘  └────────────┘  └────────────┘  └────────────┘    │   │
│   └─────────────────────────────────────────────────────────────────────┘   │
│                                                                             │
│   ┌─────────────────────────────────────────────────────────────────────┐   │
│   │                     Suggestions & Analytics                         │   │
│   │  ┌────────────┐  ┌────────────┐  ┌────────────┐                    │   │
│   │  │ Suggestion │  │Autocomplete│  │  Analytics │                    │   │
│   │  │ Generator  │  │            │  │   Agent    │                    │   │
│   │  └────────────┘  └────────────┘  └────────────┘                    │   │
│   └─────────────────────────────────────────────────────────────────────┘   │
│                                                                             │
└─────────────────────────────────────────────────────────────────────────────┘

Key Features:
- Fuzzy matching with blended edit-distance and bigram similarity
- Whole-name and per-word terms with per-field weights
- Exact-match and prefix bonuses
- Dietary, price and preference filters
- Bounded result cache keyed by query and filter set
- Prefix autocomplete with record context

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

__version__ = "1.0.0"
__author__ = "BlackRoad OS"
__license__ = "Proprietary"

# Core engine
from menusearch_core.engine import (
    SearchEngine,
    SearchResponse,
    IndexState,
)
from menusearch_core.config import SearchConfig
from menusearch_core.errors import (
    MenuSearchError,
    PreconditionError,
    ConfigurationError,
    DegradedSearchError,
)

# Index components
from menusearch_core.index.records import (
    FieldKind,
    MenuRecord,
    RecordProvider,
    StaticRecordProvider,
)
from menusearch_core.index.inverted import (
    Posting,
    TermIndex,
)

# Query components
from menusearch_core.query.matcher import (
    Matcher,
    MatchEntry,
    MatchAccumulator,
)

# Analyzers
from menusearch_core.analyzers.standard import (
    TermAnalyzer,
    WordAnalyzer,
    normalize_term,
    extract_words,
)

# Ranking
from menusearch_core.ranking.similarity import similarity
from menusearch_core.ranking.scorer import (
    Scorer,
    ScoringContext,
    FuzzyScorer,
)
from menusearch_core.ranking.ranker import (
    Ranker,
    ScoredResult,
)

# Filters
from menusearch_core.filters import (
    FilterStage,
    Predicate,
    PreferenceState,
    PreferenceProvider,
    StaticPreferenceProvider,
    canonical_filter_key,
    predicates_from_flags,
)

# Cache and suggestions
from menusearch_core.cache import (
    CacheEntry,
    ResultCache,
    make_cache_key,
)
from menusearch_core.suggest import (
    AutocompleteSuggestion,
    SuggestionGenerator,
)

# Agents
from menusearch_core.agents import AnalyticsAgent

__all__ = [
    # Core
    "SearchEngine",
    "SearchResponse",
    "IndexState",
    "SearchConfig",
    # Errors
    "MenuSearchError",
    "PreconditionError",
    "ConfigurationError",
    "DegradedSearchError",
    # Index
    "FieldKind",
    "MenuRecord",
    "RecordProvider",
    "StaticRecordProvider",
    "Posting",
    "TermIndex",
    # Query
    "Matcher",
    "MatchEntry",
    "MatchAccumulator",
    # Analyzers
    "TermAnalyzer",
    "WordAnalyzer",
    "normalize_term",
    "extract_words",
    # Ranking
    "similarity",
    "Scorer",
    "ScoringContext",
    "FuzzyScorer",
    "Ranker",
    "ScoredResult",
    # Filters
    "FilterStage",
    "Predicate",
    "PreferenceState",
    "PreferenceProvider",
    "StaticPreferenceProvider",
    "canonical_filter_key",
    "predicates_from_flags",
    # Cache and suggestions
    "CacheEntry",
    "ResultCache",
    "make_cache_key",
    "AutocompleteSuggestion",
    "SuggestionGenerator",
    # Agents
    "AnalyticsAgent",
]
