"""MenuSearch Tokenizers - Text Tokenization Strategies.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import re

from menusearch_core.analyzers.base import (
    Tokenizer,
    Token,
    TokenStream,
)

# Accented letters used by the Spanish/Portuguese/French menu catalogs.
CATALOG_LETTERS = "áàâãäéèêëíìîïóòôõöúùûüçñ"

# Everything that is not an ASCII word character or a catalog letter.
WORD_SEPARATOR_PATTERN = (
    r"[^0-9A-Za-z_" + CATALOG_LETTERS + CATALOG_LETTERS.upper() + r"]+"
)


class KeywordTokenizer(Tokenizer):
    """Keyword tokenizer.

    Emits the entire input as a single token. Empty input yields an
    empty stream.
    """

    def tokenize(self, text: str) -> TokenStream:
        """Return input as single token."""
        if not text:
            return TokenStream()
        return TokenStream([Token(
            text=text,
            position=0,
            start_offset=0,
            end_offset=len(text),
        )])


class PatternTokenizer(Tokenizer):
    """Pattern-based tokenizer.

    Splits text on every match of a separator pattern.
    """

    def __init__(self, pattern: str = WORD_SEPARATOR_PATTERN):
        """Initialize tokenizer.

        Args:
            pattern: Separator regex pattern
        """
        self.pattern = re.compile(pattern)

    def tokenize(self, text: str) -> TokenStream:
        """Tokenize text on separator pattern."""
        tokens = []
        position = 0
        offset = 0

        for match in self.pattern.finditer(text):
            if match.start() > offset:
                tokens.append(Token(
                    text=text[offset:match.start()],
                    position=position,
                    start_offset=offset,
                    end_offset=match.start(),
                ))
                position += 1
            offset = match.end()

        # Last token
        if offset < len(text):
            tokens.append(Token(
                text=text[offset:],
                position=position,
                start_offset=offset,
                end_offset=len(text),
            ))

        return TokenStream(tokens)


__all__ = [
    "CATALOG_LETTERS",
    "WORD_SEPARATOR_PATTERN",
    "KeywordTokenizer",
    "PatternTokenizer",
]
