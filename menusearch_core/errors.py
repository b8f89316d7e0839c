"""MenuSearch Errors - Exception Hierarchy.

Precondition and configuration errors reach the caller. Degraded search
errors stay inside the engine: they are raised per record or per term,
caught by the loop that owns the record or term, and logged.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations


class MenuSearchError(Exception):
    """Base class for all engine errors."""
    pass


class PreconditionError(MenuSearchError):
    """Engine used before the record provider has loaded its records."""
    pass


class ConfigurationError(MenuSearchError, ValueError):
    """Invalid engine configuration or filter specification."""
    pass


class DegradedSearchError(MenuSearchError):
    """A single record or term could not be indexed, matched or scored."""

    def __init__(self, message: str, record_id: str = "", term: str = ""):
        super().__init__(message)
        self.record_id = record_id
        self.term = term


__all__ = [
    "MenuSearchError",
    "PreconditionError",
    "ConfigurationError",
    "DegradedSearchError",
]
