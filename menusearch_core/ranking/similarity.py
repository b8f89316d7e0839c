"""MenuSearch Similarity - Composite String Similarity.

Blends normalized edit distance with character-bigram overlap. Edit
distance tolerates single-character typos and OCR noise; bigram overlap
tolerates transpositions and partial words. A containment shortcut skips
the dynamic program when one string contains the other, which is the
common case while a user is still typing.

Inputs are expected to be normalized (lowercased) by the caller.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from typing import Set

EDIT_DISTANCE_WEIGHT = 0.7
BIGRAM_WEIGHT = 0.3


def levenshtein_distance(s1: str, s2: str) -> int:
    """Calculate Levenshtein edit distance.

    Insert, delete and substitute all cost 1.
    """
    if len(s1) < len(s2):
        return levenshtein_distance(s2, s1)

    if len(s2) == 0:
        return len(s1)

    previous_row = list(range(len(s2) + 1))
    for i, c1 in enumerate(s1):
        current_row = [i + 1]
        for j, c2 in enumerate(s2):
            insertions = previous_row[j + 1] + 1
            deletions = current_row[j] + 1
            substitutions = previous_row[j] + (c1 != c2)
            current_row.append(min(insertions, deletions, substitutions))
        previous_row = current_row

    return previous_row[-1]


def levenshtein_similarity(s1: str, s2: str) -> float:
    """Edit distance scaled to [0, 1] by the longer length."""
    max_len = max(len(s1), len(s2))
    if max_len == 0:
        return 1.0
    return 1.0 - levenshtein_distance(s1, s2) / max_len


def bigrams(text: str) -> Set[str]:
    """Set of adjacent character pairs."""
    return {text[i:i + 2] for i in range(len(text) - 1)}


def bigram_jaccard(s1: str, s2: str) -> float:
    """Jaccard similarity of the two bigram sets; 0 when both are empty."""
    b1 = bigrams(s1)
    b2 = bigrams(s2)
    union = b1 | b2
    if not union:
        return 0.0
    return len(b1 & b2) / len(union)


def similarity(a: str, b: str) -> float:
    """Composite similarity in [0, 1].

    Args:
        a: First normalized string
        b: Second normalized string

    Returns:
        1.0 for equal strings, 0.0 if either is empty, the length ratio
        when one contains the other, otherwise the weighted blend of
        edit-distance and bigram similarity.
    """
    if a == b:
        return 1.0
    if not a or not b:
        return 0.0

    if a in b or b in a:
        shorter, longer = (a, b) if len(a) <= len(b) else (b, a)
        return len(shorter) / len(longer)

    return (
        EDIT_DISTANCE_WEIGHT * levenshtein_similarity(a, b)
        + BIGRAM_WEIGHT * bigram_jaccard(a, b)
    )


__all__ = [
    "levenshtein_distance",
    "levenshtein_similarity",
    "bigrams",
    "bigram_jaccard",
    "similarity",
]
