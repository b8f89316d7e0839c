"""MenuSearch Matcher - Fuzzy Match Evidence Collection.

Scans every term of the index, scores it against the query with the
similarity engine, and records one match entry per posting of every term
that clears the fuzzy threshold. Multi-word queries get a second pass per
query word at a reduced similarity.

A full scan per query is fine for catalogs of a few thousand terms. A
larger catalog would need a prefix or trigram pre-filter before the
similarity call.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Dict, Iterator, List, Optional, Tuple

from menusearch_core.analyzers.standard import WordAnalyzer
from menusearch_core.config import SearchConfig
from menusearch_core.errors import DegradedSearchError
from menusearch_core.index.records import FieldKind, MenuRecord
from menusearch_core.ranking.similarity import similarity

if TYPE_CHECKING:
    from menusearch_core.index.inverted import Posting, TermIndex

logger = logging.getLogger(__name__)

PARTIAL_WORD_PENALTY = 0.8


@dataclass(frozen=True)
class MatchEntry:
    """One piece of match evidence for a record.

    Attributes:
        similarity: Similarity of query (or query word) and term
        field_kind: Field the term came from
        weight: Field weight of the posting
        matched_term: The index term that matched
        is_exact: Term equals the query (or query word)
        is_prefix: Term and query are prefixes of one another
        is_partial_word: Produced by the per-word pass
    """

    similarity: float
    field_kind: FieldKind
    weight: float
    matched_term: str
    is_exact: bool = False
    is_prefix: bool = False
    is_partial_word: bool = False


@dataclass
class MatchStats:
    """Statistics about one match run."""

    terms_scanned: int = 0
    terms_matched: int = 0
    word_passes: int = 0
    degraded_terms: int = 0


class MatchAccumulator:
    """Per-search map of record id to match evidence.

    Records keep the order in which they were first matched.
    """

    def __init__(self):
        self._records: Dict[str, MenuRecord] = {}
        self._entries: Dict[str, List[MatchEntry]] = {}
        self.stats = MatchStats()

    def add(self, record: MenuRecord, entry: MatchEntry) -> None:
        """Record evidence for a record."""
        if record.id not in self._entries:
            self._records[record.id] = record
            self._entries[record.id] = []
        self._entries[record.id].append(entry)

    def entries(self, record_id: str) -> List[MatchEntry]:
        return list(self._entries.get(record_id, []))

    def records(self) -> List[MenuRecord]:
        """Matched records in first-match order."""
        return list(self._records.values())

    def __iter__(self) -> Iterator[Tuple[MenuRecord, List[MatchEntry]]]:
        """Iterate over (record, entries) in first-match order."""
        for record_id, record in self._records.items():
            yield record, list(self._entries[record_id])

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._records


class Matcher:
    """Collects match evidence for a query against a term index."""

    def __init__(
        self,
        index: "TermIndex",
        config: Optional[SearchConfig] = None,
        similarity_fn: Callable[[str, str], float] = similarity,
    ):
        """Initialize matcher.

        Args:
            index: Term index to scan
            config: Engine configuration
            similarity_fn: String similarity function
        """
        self.index = index
        self.config = config or SearchConfig()
        self._similarity = similarity_fn
        self._word_analyzer = WordAnalyzer(fold_accents=index.fold_accents)

    def query_words(self, query: str) -> List[str]:
        """Split a normalized query into words."""
        return self._word_analyzer.get_terms(query)

    def match(self, query: str) -> MatchAccumulator:
        """Collect match evidence for a raw query.

        Args:
            query: Raw query text

        Returns:
            Match accumulator (empty for a blank query)
        """
        accumulator = MatchAccumulator()
        clean_query = self.index.normalize(query)
        if not clean_query:
            return accumulator

        self._scan(clean_query, accumulator, partial=False)

        words = self.query_words(clean_query)
        if len(words) > 1:
            for word in words:
                accumulator.stats.word_passes += 1
                self._scan(word, accumulator, partial=True)

        logger.debug(
            f"Matched {len(accumulator)} records for {clean_query!r} "
            f"({accumulator.stats.terms_matched} term hits)"
        )
        return accumulator

    def _scan(self, needle: str, accumulator: MatchAccumulator, partial: bool) -> None:
        """Score every index term against one needle."""
        for term, postings in self.index.items():
            accumulator.stats.terms_scanned += 1
            try:
                score = self._score_term(needle, term)
            except DegradedSearchError as e:
                accumulator.stats.degraded_terms += 1
                logger.warning(f"Skipping term during match: {e}")
                continue

            if score < self.config.fuzzy_threshold:
                continue

            accumulator.stats.terms_matched += 1
            if partial:
                score *= PARTIAL_WORD_PENALTY
            is_exact = term == needle
            is_prefix = term.startswith(needle) or needle.startswith(term)

            for posting in postings:
                accumulator.add(posting.record, self._entry(
                    posting, term, score, is_exact, is_prefix, partial,
                ))

    def _score_term(self, needle: str, term: str) -> float:
        try:
            return self._similarity(needle, term)
        except (TypeError, ValueError, IndexError) as e:
            raise DegradedSearchError(f"Cannot score term {term!r}: {e}", term=term) from e

    @staticmethod
    def _entry(
        posting: "Posting",
        term: str,
        score: float,
        is_exact: bool,
        is_prefix: bool,
        partial: bool,
    ) -> MatchEntry:
        return MatchEntry(
            similarity=score,
            field_kind=posting.field_kind,
            weight=posting.weight,
            matched_term=term,
            is_exact=is_exact,
            is_prefix=is_prefix,
            is_partial_word=partial,
        )


__all__ = [
    "PARTIAL_WORD_PENALTY",
    "MatchEntry",
    "MatchStats",
    "MatchAccumulator",
    "Matcher",
]
