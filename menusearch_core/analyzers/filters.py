"""MenuSearch Token Filters - Case, Whitespace, Length and Accents.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import unicodedata

from menusearch_core.analyzers.base import (
    TokenFilter,
    TokenStream,
)


class LowercaseFilter(TokenFilter):
    """Lowercases token text."""

    def filter(self, stream: TokenStream) -> TokenStream:
        return stream.map(str.lower)


class TrimFilter(TokenFilter):
    """Strips surrounding whitespace, dropping tokens left empty."""

    def filter(self, stream: TokenStream) -> TokenStream:
        return stream.map(str.strip).filter(lambda t: bool(t.text))


class LengthFilter(TokenFilter):
    """Keeps tokens whose length lies within bounds."""

    def __init__(self, min_length: int = 1, max_length: int = 255):
        """Initialize filter.

        Args:
            min_length: Shortest token kept
            max_length: Longest token kept
        """
        self.min_length = min_length
        self.max_length = max_length

    def filter(self, stream: TokenStream) -> TokenStream:
        return stream.filter(
            lambda t: self.min_length <= len(t.text) <= self.max_length
        )


class ASCIIFoldingFilter(TokenFilter):
    """Strips diacritics so "jamon" and "jamón" produce the same term.

    Characters without an ASCII base letter are kept as they are.
    """

    # Letters whose folding is not a plain NFD decomposition.
    SPECIAL_CASES = {"ß": "ss", "æ": "ae", "œ": "oe", "ø": "o"}

    def filter(self, stream: TokenStream) -> TokenStream:
        return stream.map(self.fold)

    def fold(self, text: str) -> str:
        folded = []
        for char in text:
            if ord(char) < 128:
                folded.append(char)
            elif char in self.SPECIAL_CASES:
                folded.append(self.SPECIAL_CASES[char])
            else:
                base = "".join(
                    c for c in unicodedata.normalize("NFD", char) if ord(c) < 128
                )
                folded.append(base or char)
        return "".join(folded)


__all__ = [
    "LowercaseFilter",
    "TrimFilter",
    "LengthFilter",
    "ASCIIFoldingFilter",
]
