"""MenuSearch Analyzers - Text Analysis Pipeline.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from menusearch_core.analyzers.base import (
    Analyzer,
    Token,
    TokenStream,
)
from menusearch_core.analyzers.standard import (
    TermAnalyzer,
    WordAnalyzer,
    normalize_term,
    extract_words,
)
from menusearch_core.analyzers.filters import (
    LowercaseFilter,
    TrimFilter,
    LengthFilter,
    ASCIIFoldingFilter,
)
from menusearch_core.analyzers.tokenizers import (
    KeywordTokenizer,
    PatternTokenizer,
)

__all__ = [
    "Analyzer",
    "Token",
    "TokenStream",
    "TermAnalyzer",
    "WordAnalyzer",
    "normalize_term",
    "extract_words",
    "LowercaseFilter",
    "TrimFilter",
    "LengthFilter",
    "ASCIIFoldingFilter",
    "KeywordTokenizer",
    "PatternTokenizer",
]
