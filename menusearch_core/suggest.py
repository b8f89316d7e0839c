"""MenuSearch Suggestions - Search Suggestions and Autocomplete.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Iterable, List, Optional

from menusearch_core.analyzers.standard import WordAnalyzer
from menusearch_core.config import SearchConfig
from menusearch_core.index.records import FieldKind, MenuRecord
from menusearch_core.ranking.similarity import similarity

if TYPE_CHECKING:
    from menusearch_core.index.inverted import TermIndex

logger = logging.getLogger(__name__)

MIN_SUGGESTION_LENGTH = 2
# Number of matched records whose names are offered as suggestions
RECORD_NAME_SUGGESTIONS = 3


@dataclass(frozen=True)
class AutocompleteSuggestion:
    """A completion of a typed prefix.

    Attributes:
        text: The completed index term
        context: Primary name of a record containing the term
        field_kind: Field the term was taken from in that record
        record_id: Id of that record
    """

    text: str
    context: str
    field_kind: FieldKind
    record_id: str


class SuggestionGenerator:
    """Builds "did you mean" suggestions and prefix completions."""

    def __init__(
        self,
        index: "TermIndex",
        config: Optional[SearchConfig] = None,
        similarity_fn: Callable[[str, str], float] = similarity,
    ):
        self.index = index
        self.config = config or SearchConfig()
        self._similarity = similarity_fn
        self._word_analyzer = WordAnalyzer(fold_accents=index.fold_accents)

    @property
    def threshold(self) -> float:
        """Similarity needed for a fuzzy (non-prefix) suggestion."""
        return self.config.fuzzy_threshold + self.config.suggestion_threshold_boost

    def generate(
        self,
        query: str,
        matched_records: Iterable[MenuRecord] = (),
        limit: Optional[int] = None,
    ) -> List[str]:
        """Generate suggestions for a normalized query.

        Index terms come first (prefix matches of the query or of any of
        its words, then sufficiently similar terms), followed by the names
        of the first matched records.

        Args:
            query: Normalized query
            matched_records: Records in first-match order
            limit: Maximum suggestions (default ``max_suggestions``)

        Returns:
            Distinct suggestions, query-prefixed first, then shorter first
        """
        limit = self.config.max_suggestions if limit is None else limit
        if not query or limit <= 0:
            return []

        words = self._word_analyzer.get_terms(query)
        suggestions: List[str] = []

        for term in self.index.terms():
            if len(suggestions) >= limit:
                break
            if len(term) < MIN_SUGGESTION_LENGTH or term == query or term in suggestions:
                continue
            if term.startswith(query) or any(term.startswith(w) for w in words):
                suggestions.append(term)
            elif self._similarity(query, term) >= self.threshold:
                suggestions.append(term)

        for i, record in enumerate(matched_records):
            if i >= RECORD_NAME_SUGGESTIONS or len(suggestions) >= limit:
                break
            for name in (record.primary_name, record.secondary_name):
                name = self.index.normalize(name)
                if name and name not in suggestions:
                    suggestions.append(name)

        suggestions = suggestions[:limit]
        suggestions.sort(key=lambda s: (not s.startswith(query), len(s)))
        return suggestions

    def autocomplete(self, prefix: str, limit: Optional[int] = None) -> List[AutocompleteSuggestion]:
        """Complete a raw prefix from the index terms.

        Args:
            prefix: Raw typed text
            limit: Maximum completions (default ``autocomplete_limit``)

        Returns:
            Completions in index order; the prefix itself is excluded
        """
        limit = self.config.autocomplete_limit if limit is None else limit
        clean_prefix = self.index.normalize(prefix or "")
        if not clean_prefix:
            return []

        completions = []
        for term, postings in self.index.prefix_search(clean_prefix, limit):
            first = postings[0]
            completions.append(AutocompleteSuggestion(
                text=term,
                context=first.record.primary_name,
                field_kind=first.field_kind,
                record_id=first.record_id,
            ))
        return completions


__all__ = [
    "AutocompleteSuggestion",
    "SuggestionGenerator",
    "MIN_SUGGESTION_LENGTH",
]
