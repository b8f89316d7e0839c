"""MenuSearch Records - Catalog Record Shape and Providers.

The engine never parses catalog sources. It consumes already validated
records from a provider that has its own load lifecycle.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional

from menusearch_core.errors import PreconditionError

logger = logging.getLogger(__name__)


class FieldKind(Enum):
    """Which part of a record a term was taken from."""

    PRIMARY = "primary"  # Whole primary name
    SECONDARY = "secondary"  # Whole secondary name
    NAME_WORD = "name_word"  # One word of either name
    BODY_WORD = "body_word"  # One word of the description


@dataclass(frozen=True)
class MenuRecord:
    """A catalog record.

    Attributes:
        id: Unique, stable record identifier
        primary_name: Name in the catalog's language (e.g. Spanish)
        secondary_name: Translated name (e.g. English)
        description: Free-text description
        is_vegetarian: Vegetarian dish
        has_pork: Contains pork
        has_other_meat: Contains meat other than pork
        has_seafood: Contains fish or seafood
        has_dairy: Contains dairy
        price_range: Display price range such as "€12-18"
        translations: Extra display names keyed by language code
    """

    id: str
    primary_name: str
    secondary_name: str = ""
    description: str = ""
    is_vegetarian: bool = False
    has_pork: bool = False
    has_other_meat: bool = False
    has_seafood: bool = False
    has_dairy: bool = False
    price_range: str = ""
    translations: Dict[str, str] = field(default_factory=dict, compare=False, hash=False)

    # Keys used by the catalog loader's camelCase output.
    ALIASES = {
        "spanishName": "primary_name",
        "englishName": "secondary_name",
        "isVegetarian": "is_vegetarian",
        "hasPork": "has_pork",
        "hasOtherMeat": "has_other_meat",
        "hasSeafood": "has_seafood",
        "hasDairy": "has_dairy",
        "priceRange": "price_range",
    }

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "primary_name": self.primary_name,
            "secondary_name": self.secondary_name,
            "description": self.description,
            "is_vegetarian": self.is_vegetarian,
            "has_pork": self.has_pork,
            "has_other_meat": self.has_other_meat,
            "has_seafood": self.has_seafood,
            "has_dairy": self.has_dairy,
            "price_range": self.price_range,
            "translations": dict(self.translations),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MenuRecord":
        """Create from dictionary.

        Accepts both snake_case keys and the loader's camelCase keys.
        Keys that are not record fields are ignored.
        """
        values: Dict[str, Any] = {}
        for key, value in data.items():
            name = cls.ALIASES.get(key, key)
            if name in cls.__dataclass_fields__:
                values[name] = value
        if "id" in values:
            values["id"] = str(values["id"])
        if "translations" in values:
            values["translations"] = dict(values["translations"] or {})
        return cls(**values)


class RecordProvider(ABC):
    """Source of catalog records.

    Implementations own loading and validation; the engine only checks
    ``is_loaded`` and reads ``get_records()``.
    """

    @property
    @abstractmethod
    def is_loaded(self) -> bool:
        """Whether records are available."""
        pass

    @abstractmethod
    def get_records(self) -> List[MenuRecord]:
        """Get all records.

        Raises:
            PreconditionError: If called before load
        """
        pass


class StaticRecordProvider(RecordProvider):
    """In-memory record provider."""

    def __init__(self, records: Optional[Iterable[MenuRecord]] = None):
        """Initialize provider.

        Args:
            records: Records to serve; None leaves the provider unloaded
        """
        self._records: List[MenuRecord] = []
        self._loaded = False
        if records is not None:
            self.load(records)

    def load(self, records: Iterable[MenuRecord]) -> None:
        """Replace the served records and mark the provider loaded.

        Raises:
            ValueError: On duplicate record ids
        """
        records = list(records)
        seen = set()
        for record in records:
            if record.id in seen:
                raise ValueError(f"Duplicate record id: {record.id}")
            seen.add(record.id)
        self._records = records
        self._loaded = True
        logger.debug(f"Loaded {len(records)} records")

    def unload(self) -> None:
        """Drop all records and mark the provider unloaded."""
        self._records = []
        self._loaded = False

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def get_records(self) -> List[MenuRecord]:
        if not self._loaded:
            raise PreconditionError("Records not loaded. Call load() first.")
        return list(self._records)


__all__ = [
    "FieldKind",
    "MenuRecord",
    "RecordProvider",
    "StaticRecordProvider",
]
