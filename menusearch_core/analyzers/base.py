"""MenuSearch Analyzer Base - Text Analysis Pipeline.

Index terms and queries go through the same pipeline: character
filters rewrite the raw text, a tokenizer cuts it into tokens and token
filters rewrite or drop tokens. A term only matches when both sides were
produced by equivalent pipelines.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Callable, Iterator, List, Optional


@dataclass(frozen=True)
class Token:
    """A piece of analyzed text.

    Attributes:
        text: Token text after filtering
        position: Ordinal of the token in its field
        start_offset: Start offset in the raw text
        end_offset: End offset in the raw text
    """

    text: str
    position: int = 0
    start_offset: int = 0
    end_offset: int = 0

    def with_text(self, text: str) -> "Token":
        """Copy of this token carrying new text."""
        return replace(self, text=text)


class TokenStream:
    """Ordered tokens of one field value."""

    def __init__(self, tokens: Optional[List[Token]] = None):
        self._tokens: List[Token] = list(tokens or [])

    def __iter__(self) -> Iterator[Token]:
        return iter(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __getitem__(self, index: int) -> Token:
        return self._tokens[index]

    def get_texts(self) -> List[str]:
        return [t.text for t in self._tokens]

    def map(self, fn: Callable[[str], str]) -> "TokenStream":
        """Rewrite the text of every token."""
        return TokenStream([t.with_text(fn(t.text)) for t in self._tokens])

    def filter(self, predicate: Callable[[Token], bool]) -> "TokenStream":
        """Keep tokens for which ``predicate`` holds."""
        return TokenStream([t for t in self._tokens if predicate(t)])


class CharacterFilter(ABC):
    """Rewrites raw text before tokenization."""

    @abstractmethod
    def filter(self, text: str) -> str:
        pass


class PatternReplaceCharacterFilter(CharacterFilter):
    """Replaces every match of a regex."""

    def __init__(self, pattern: str, replacement: str):
        self.pattern = re.compile(pattern)
        self.replacement = replacement

    def filter(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)


class Tokenizer(ABC):
    """Cuts text into tokens."""

    @abstractmethod
    def tokenize(self, text: str) -> TokenStream:
        pass


class TokenFilter(ABC):
    """Rewrites or drops tokens."""

    @abstractmethod
    def filter(self, stream: TokenStream) -> TokenStream:
        pass


class Analyzer:
    """Character filters, a tokenizer and token filters, applied in order."""

    def __init__(
        self,
        tokenizer: Tokenizer,
        char_filters: Optional[List[CharacterFilter]] = None,
        token_filters: Optional[List[TokenFilter]] = None,
    ):
        """Initialize analyzer.

        Args:
            tokenizer: Tokenizer to use
            char_filters: Applied to the raw text
            token_filters: Applied to the token stream
        """
        self._tokenizer = tokenizer
        self._char_filters = char_filters or []
        self._token_filters = token_filters or []

    def analyze(self, text: str) -> TokenStream:
        for char_filter in self._char_filters:
            text = char_filter.filter(text)

        stream = self._tokenizer.tokenize(text)
        for token_filter in self._token_filters:
            stream = token_filter.filter(stream)
        return stream

    def get_terms(self, text: str) -> List[str]:
        """Analyzed term texts; empty for empty or missing text."""
        if not text:
            return []
        return self.analyze(text).get_texts()


__all__ = [
    "Analyzer",
    "Token",
    "TokenStream",
    "Tokenizer",
    "TokenFilter",
    "CharacterFilter",
    "PatternReplaceCharacterFilter",
]
