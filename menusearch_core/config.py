"""MenuSearch Configuration - Engine Settings.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Dict

from menusearch_core.errors import ConfigurationError


@dataclass(frozen=True)
class SearchConfig:
    """Search engine configuration.

    Set once at construction and read-only afterwards.

    Attributes:
        min_query_length: Shorter queries return an empty response
        max_suggestions: Maximum suggestions per search response
        max_results: Maximum results per search response
        fuzzy_threshold: Minimum similarity for a term to match at all
        exact_match_bonus: Added when the matched term equals the query
        prefix_bonus: Added when term and query are prefixes of each other
        primary_weight: Weight of whole primary-name matches
        secondary_weight: Weight of whole secondary-name matches
        name_word_weight: Weight of single words from either name
        body_word_weight: Weight of description words
        cache_size: Result cache capacity (0 disables caching)
        suggestion_threshold_boost: Extra similarity a fuzzy suggestion needs
        autocomplete_limit: Default autocomplete list length
        fold_accents: Strip diacritics from terms and queries
    """

    min_query_length: int = 1
    max_suggestions: int = 8
    max_results: int = 20
    fuzzy_threshold: float = 0.3
    exact_match_bonus: float = 0.5
    prefix_bonus: float = 0.3
    primary_weight: float = 1.0
    secondary_weight: float = 0.8
    name_word_weight: float = 0.7
    body_word_weight: float = 0.5
    cache_size: int = 100
    suggestion_threshold_boost: float = 0.2
    autocomplete_limit: int = 5
    fold_accents: bool = False

    def __post_init__(self):
        """Validate settings."""
        if self.min_query_length < 0:
            raise ConfigurationError(
                f"min_query_length must be >= 0, got {self.min_query_length}"
            )
        for name in ("max_suggestions", "max_results", "autocomplete_limit"):
            value = getattr(self, name)
            if value < 1:
                raise ConfigurationError(f"{name} must be >= 1, got {value}")
        if not 0.0 <= self.fuzzy_threshold <= 1.0:
            raise ConfigurationError(
                f"fuzzy_threshold must be within [0, 1], got {self.fuzzy_threshold}"
            )
        for name in (
            "exact_match_bonus",
            "prefix_bonus",
            "primary_weight",
            "secondary_weight",
            "name_word_weight",
            "body_word_weight",
            "suggestion_threshold_boost",
        ):
            value = getattr(self, name)
            if value < 0:
                raise ConfigurationError(f"{name} must be >= 0, got {value}")
        if self.cache_size < 0:
            raise ConfigurationError(f"cache_size must be >= 0, got {self.cache_size}")

    def field_weights(self) -> Dict[str, float]:
        """Get field weights keyed by field kind name."""
        return {
            "primary": self.primary_weight,
            "secondary": self.secondary_weight,
            "name_word": self.name_word_weight,
            "body_word": self.body_word_weight,
        }

    def field_weight(self, kind: Any) -> float:
        """Get the weight for one field kind (enum member or its value)."""
        return self.field_weights()[getattr(kind, "value", kind)]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SearchConfig":
        """Create from dictionary.

        Raises:
            ConfigurationError: On unknown keys or invalid values
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(f"Unknown config options: {', '.join(unknown)}")
        return cls(**data)


__all__ = ["SearchConfig"]
