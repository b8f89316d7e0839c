"""MenuSearch Scorer - Per-Entry Scoring.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict

from menusearch_core.config import SearchConfig

if TYPE_CHECKING:
    from menusearch_core.query.matcher import MatchEntry

PARTIAL_WORD_FACTOR = 0.9


@dataclass
class ScoringContext:
    """Context for scoring operations."""
    exact_match_bonus: float = 0.5
    prefix_bonus: float = 0.3
    partial_word_factor: float = PARTIAL_WORD_FACTOR

    @classmethod
    def from_config(cls, config: SearchConfig) -> "ScoringContext":
        return cls(
            exact_match_bonus=config.exact_match_bonus,
            prefix_bonus=config.prefix_bonus,
        )


class Scorer(ABC):
    """Base scorer class."""

    @abstractmethod
    def score(self, entry: MatchEntry, context: ScoringContext) -> float:
        pass

    def explain(self, entry: MatchEntry, context: ScoringContext) -> Dict[str, Any]:
        return {"score": self.score(entry, context), "description": "base scorer"}


class FuzzyScorer(Scorer):
    """Weighted similarity plus exact and prefix bonuses.

    adjusted = similarity * weight (+ exact bonus) (+ prefix bonus),
    then scaled down for entries from the per-word pass.
    """

    def score(self, entry: MatchEntry, context: ScoringContext) -> float:
        adjusted = entry.similarity * entry.weight
        if entry.is_exact:
            adjusted += context.exact_match_bonus
        if entry.is_prefix:
            adjusted += context.prefix_bonus
        if entry.is_partial_word:
            adjusted *= context.partial_word_factor
        return adjusted

    def explain(self, entry: MatchEntry, context: ScoringContext) -> Dict[str, Any]:
        return {
            "score": self.score(entry, context),
            "description": f"fuzzy match on {entry.matched_term!r} ({entry.field_kind.value})",
            "details": {
                "similarity": entry.similarity,
                "weight": entry.weight,
                "exact_bonus": context.exact_match_bonus if entry.is_exact else 0.0,
                "prefix_bonus": context.prefix_bonus if entry.is_prefix else 0.0,
                "partial_word": entry.is_partial_word,
            },
        }


__all__ = ["Scorer", "ScoringContext", "FuzzyScorer", "PARTIAL_WORD_FACTOR"]
