"""MenuSearch Ranker - Per-Record Relevance Scores.

Turns the match evidence of each record into a single score. The sum of
the adjusted entry scores is divided by the square root of the entry
count, so a record with many weak word hits cannot outrank one with a
near-exact name match.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional, Tuple

from menusearch_core.config import SearchConfig
from menusearch_core.errors import DegradedSearchError
from menusearch_core.index.records import FieldKind, MenuRecord
from menusearch_core.ranking.scorer import FuzzyScorer, Scorer, ScoringContext

if TYPE_CHECKING:
    from menusearch_core.query.matcher import MatchAccumulator, MatchEntry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoredResult:
    """A ranked record.

    Attributes:
        record: The matched record
        score: Final normalized score
        best_field_kind: Field of the highest-scoring entry
        match_count: Number of match entries
        max_score: Highest single adjusted entry score
        matched_terms: Distinct matched terms, first-seen order
    """

    record: MenuRecord
    score: float
    best_field_kind: FieldKind
    match_count: int
    max_score: float = 0.0
    matched_terms: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def record_id(self) -> str:
        return self.record.id


class Ranker:
    """Scores and sorts match evidence."""

    def __init__(
        self,
        config: Optional[SearchConfig] = None,
        scorer: Optional[Scorer] = None,
    ):
        """Initialize ranker.

        Args:
            config: Engine configuration (bonuses)
            scorer: Per-entry scorer
        """
        self.config = config or SearchConfig()
        self.scorer = scorer or FuzzyScorer()
        self.context = ScoringContext.from_config(self.config)

    def rank(self, accumulator: MatchAccumulator) -> List[ScoredResult]:
        """Rank all records in an accumulator.

        Ties keep first-match order.

        Args:
            accumulator: Match evidence

        Returns:
            Results sorted by descending score
        """
        results = []
        for record, entries in accumulator:
            try:
                results.append(self.score_record(record, entries))
            except DegradedSearchError as e:
                logger.warning(f"Skipping record during ranking: {e}")

        results.sort(key=lambda r: r.score, reverse=True)
        return results

    def score_record(self, record: MenuRecord, entries: List[MatchEntry]) -> ScoredResult:
        """Score one record from its entries.

        Raises:
            DegradedSearchError: If the entries cannot be scored
        """
        if not entries:
            raise DegradedSearchError(f"No match entries for {record.id}", record_id=record.id)

        total = 0.0
        max_score = float("-inf")
        best_kind = entries[0].field_kind
        terms: List[str] = []

        try:
            for entry in entries:
                adjusted = self.scorer.score(entry, self.context)
                total += adjusted
                if adjusted > max_score:
                    max_score = adjusted
                    best_kind = entry.field_kind
                if entry.matched_term not in terms:
                    terms.append(entry.matched_term)
        except (TypeError, ValueError, AttributeError) as e:
            raise DegradedSearchError(
                f"Cannot score record {record.id}: {e}", record_id=record.id
            ) from e

        if math.isnan(total):
            raise DegradedSearchError(f"Score is NaN for {record.id}", record_id=record.id)

        return ScoredResult(
            record=record,
            score=total / math.sqrt(len(entries)),
            best_field_kind=best_kind,
            match_count=len(entries),
            max_score=max_score,
            matched_terms=tuple(terms),
        )


__all__ = ["ScoredResult", "Ranker"]
