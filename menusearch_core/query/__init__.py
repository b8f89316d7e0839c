"""MenuSearch Query Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from menusearch_core.query.matcher import (
    MatchAccumulator,
    MatchEntry,
    MatchStats,
    Matcher,
)

__all__ = [
    "MatchAccumulator",
    "MatchEntry",
    "MatchStats",
    "Matcher",
]
