"""MenuSearch Standard Analyzers - Pre-configured Analyzers.

Two analyzers cover the engine's needs: a keyword analyzer that turns a
whole field value (or a whole query) into one normalized term, and a word
analyzer that extracts individual words from names and descriptions.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from typing import List

from menusearch_core.analyzers.base import (
    Analyzer,
    PatternReplaceCharacterFilter,
)
from menusearch_core.analyzers.tokenizers import (
    KeywordTokenizer,
    PatternTokenizer,
)
from menusearch_core.analyzers.filters import (
    ASCIIFoldingFilter,
    LengthFilter,
    LowercaseFilter,
    TrimFilter,
)


class TermAnalyzer(Analyzer):
    """Keyword analyzer for whole field values and queries.

    Collapses whitespace runs, trims and lowercases. Produces at most
    one token.
    """

    def __init__(self, fold_accents: bool = False):
        """Initialize term analyzer.

        Args:
            fold_accents: Strip diacritics after lowercasing
        """
        token_filters = [TrimFilter(), LowercaseFilter()]
        if fold_accents:
            token_filters.append(ASCIIFoldingFilter())
        super().__init__(
            tokenizer=KeywordTokenizer(),
            char_filters=[PatternReplaceCharacterFilter(r"\s+", " ")],
            token_filters=token_filters,
        )

    def normalize(self, text: str) -> str:
        """Return the normalized term, or "" for blank input."""
        terms = self.get_terms(text)
        return terms[0] if terms else ""


class WordAnalyzer(Analyzer):
    """Word analyzer for names and descriptions.

    Splits on anything that is not a word character or a catalog letter,
    lowercases, and drops words shorter than ``min_length``.
    """

    def __init__(self, min_length: int = 1, fold_accents: bool = False):
        """Initialize word analyzer.

        Args:
            min_length: Minimum word length kept
            fold_accents: Strip diacritics after lowercasing
        """
        token_filters = [LowercaseFilter()]
        if fold_accents:
            token_filters.append(ASCIIFoldingFilter())
        token_filters.append(LengthFilter(min_length=min_length))
        super().__init__(
            tokenizer=PatternTokenizer(),
            token_filters=token_filters,
        )


def normalize_term(text: str, fold_accents: bool = False) -> str:
    """Normalize a term the way the index stores it.

    Args:
        text: Raw text
        fold_accents: Strip diacritics

    Returns:
        Normalized term ("" for blank input)
    """
    return TermAnalyzer(fold_accents=fold_accents).normalize(text)


def extract_words(text: str, min_length: int = 1, fold_accents: bool = False) -> List[str]:
    """Extract normalized words from text.

    Args:
        text: Raw text
        min_length: Minimum word length kept
        fold_accents: Strip diacritics

    Returns:
        Words in order of appearance
    """
    return WordAnalyzer(min_length=min_length, fold_accents=fold_accents).get_terms(text)


__all__ = [
    "TermAnalyzer",
    "WordAnalyzer",
    "normalize_term",
    "extract_words",
]
