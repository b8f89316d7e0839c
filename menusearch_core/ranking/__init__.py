"""MenuSearch Ranking Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from menusearch_core.ranking.similarity import similarity, levenshtein_distance, bigram_jaccard
from menusearch_core.ranking.scorer import Scorer, ScoringContext, FuzzyScorer
from menusearch_core.ranking.ranker import Ranker, ScoredResult

__all__ = ["similarity", "levenshtein_distance", "bigram_jaccard", "Scorer", "ScoringContext", "FuzzyScorer", "Ranker", "ScoredResult"]
