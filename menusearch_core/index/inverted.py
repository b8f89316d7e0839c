"""MenuSearch Term Index - Normalized Term to Postings Map.

The term index maps each normalized term (a whole name or a single word)
to the postings of every record it was taken from. One generation is
built per catalog snapshot and is never mutated after ``build`` returns.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from menusearch_core.analyzers.standard import TermAnalyzer, WordAnalyzer
from menusearch_core.config import SearchConfig
from menusearch_core.errors import DegradedSearchError
from menusearch_core.index.records import FieldKind, MenuRecord

logger = logging.getLogger(__name__)

# Words of names must be longer than 1 char, description words longer than 2.
MIN_NAME_WORD_LENGTH = 2
MIN_BODY_WORD_LENGTH = 3


@dataclass(frozen=True)
class Posting:
    """A posting (term occurrence) in a record.

    Attributes:
        record: The record the term was taken from
        field_kind: Which field produced the term
        weight: Field weight at build time
    """

    record: MenuRecord
    field_kind: FieldKind
    weight: float

    @property
    def record_id(self) -> str:
        return self.record.id


class TermIndex:
    """Inverted index from normalized terms to postings.

    Terms and postings keep insertion order, which makes iteration order
    (and therefore suggestion order and tie-breaking) deterministic for
    a given record order.
    """

    def __init__(self, fold_accents: bool = False):
        """Initialize an empty index.

        Args:
            fold_accents: Strip diacritics from terms
        """
        self.fold_accents = fold_accents
        self.term_analyzer = TermAnalyzer(fold_accents=fold_accents)
        self._terms: Dict[str, List[Posting]] = {}
        self._record_ids: Dict[str, MenuRecord] = {}
        self.generation = 0
        self.build_time_ms = 0.0
        self.skipped_records: List[str] = []

    @classmethod
    def build(
        cls,
        records: Iterable[MenuRecord],
        config: Optional[SearchConfig] = None,
        generation: int = 1,
    ) -> "TermIndex":
        """Build a new index generation from records.

        Records that cannot be indexed are skipped and logged.

        Args:
            records: Catalog records
            config: Engine configuration (weights, accent folding)
            generation: Generation number assigned by the owning engine

        Returns:
            Fully built index
        """
        config = config or SearchConfig()
        start_time = time.time()

        index = cls(fold_accents=config.fold_accents)
        weights = {kind: config.field_weight(kind) for kind in FieldKind}
        name_words = WordAnalyzer(
            min_length=MIN_NAME_WORD_LENGTH,
            fold_accents=config.fold_accents,
        )
        body_words = WordAnalyzer(
            min_length=MIN_BODY_WORD_LENGTH,
            fold_accents=config.fold_accents,
        )

        for record in records:
            try:
                index._index_record(record, weights, name_words, body_words)
            except DegradedSearchError as e:
                index.skipped_records.append(e.record_id)
                logger.warning(f"Skipping record during index build: {e}")

        index.generation = generation
        index.build_time_ms = (time.time() - start_time) * 1000
        logger.info(
            f"Term index generation {index.generation} built in "
            f"{index.build_time_ms:.2f}ms: {len(index)} terms, "
            f"{index.record_count} records"
        )
        return index

    def _index_record(
        self,
        record: MenuRecord,
        weights: Dict[FieldKind, float],
        name_words: WordAnalyzer,
        body_words: WordAnalyzer,
    ) -> None:
        """Index all fields of one record.

        Postings are collected first so a malformed record leaves no
        partial postings behind.
        """
        record_id = getattr(record, "id", None)
        if not record_id:
            raise DegradedSearchError("Record without id", record_id=repr(record))
        if record_id in self._record_ids:
            raise DegradedSearchError(
                f"Duplicate record id {record_id}", record_id=record_id
            )

        try:
            primary = self.term_analyzer.normalize(record.primary_name)
            secondary = self.term_analyzer.normalize(record.secondary_name)
            pending: List[Tuple[str, FieldKind]] = [
                (primary, FieldKind.PRIMARY),
                (secondary, FieldKind.SECONDARY),
            ]
            for word in body_words.get_terms(record.description):
                pending.append((word, FieldKind.BODY_WORD))
            for name in (record.primary_name, record.secondary_name):
                for word in name_words.get_terms(name):
                    pending.append((word, FieldKind.NAME_WORD))
        except (AttributeError, TypeError) as e:
            raise DegradedSearchError(
                f"Malformed record {record_id}: {e}", record_id=record_id
            ) from e

        self._record_ids[record_id] = record
        for term, kind in pending:
            self.add(term, Posting(record, kind, weights[kind]))

    def add(self, term: str, posting: Posting) -> None:
        """Add a posting under a normalized term. Empty terms are ignored."""
        if not term:
            return
        self._terms.setdefault(term, []).append(posting)

    def normalize(self, text: str) -> str:
        """Normalize text with the same analyzer used for index terms."""
        return self.term_analyzer.normalize(text)

    def postings(self, term: str) -> List[Posting]:
        """Get postings for a term (empty list if absent)."""
        return list(self._terms.get(term, []))

    def terms(self) -> List[str]:
        """All terms in insertion order."""
        return list(self._terms.keys())

    def items(self) -> Iterator[Tuple[str, List[Posting]]]:
        """Iterate over (term, postings) in insertion order."""
        return iter(self._terms.items())

    def prefix_search(self, prefix: str, limit: int = 100) -> List[Tuple[str, List[Posting]]]:
        """Find terms starting with a normalized prefix.

        The prefix itself is excluded.

        Args:
            prefix: Normalized prefix
            limit: Maximum results

        Returns:
            (term, postings) pairs in insertion order
        """
        results = []
        if not prefix or limit <= 0:
            return results

        for term, postings in self._terms.items():
            if term != prefix and term.startswith(prefix):
                results.append((term, list(postings)))
                if len(results) >= limit:
                    break

        return results

    def get_record(self, record_id: str) -> Optional[MenuRecord]:
        return self._record_ids.get(record_id)

    @property
    def record_count(self) -> int:
        return len(self._record_ids)

    def __len__(self) -> int:
        """Return number of unique terms."""
        return len(self._terms)

    def __contains__(self, term: object) -> bool:
        return term in self._terms

    def stats(self) -> Dict[str, Any]:
        """Get index statistics."""
        return {
            "generation": self.generation,
            "term_count": len(self._terms),
            "posting_count": sum(len(p) for p in self._terms.values()),
            "record_count": self.record_count,
            "skipped_records": len(self.skipped_records),
            "build_time_ms": self.build_time_ms,
        }


__all__ = [
    "Posting",
    "TermIndex",
    "MIN_NAME_WORD_LENGTH",
    "MIN_BODY_WORD_LENGTH",
]
