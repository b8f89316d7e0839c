"""
Pytest configuration and shared fixtures for MenuSearch tests.

This module provides:
- A small Spanish menu catalog
- Record provider, index and engine fixtures built on that catalog

Usage:
    pytest tests/ -v
    pytest tests/test_engine.py -v
"""

from typing import List

import pytest

from menusearch_core.config import SearchConfig
from menusearch_core.engine import SearchEngine
from menusearch_core.filters.preferences import StaticPreferenceProvider
from menusearch_core.index.inverted import TermIndex
from menusearch_core.index.records import MenuRecord, StaticRecordProvider


# =============================================================================
# Catalog
# =============================================================================

CATALOG = [
    {
        "id": "paella-valenciana",
        "spanishName": "Paella Valenciana",
        "englishName": "Valencian Paella",
        "description": "Rice dish with chicken, rabbit and saffron",
        "isVegetarian": False,
        "hasPork": False,
        "hasOtherMeat": True,
        "hasSeafood": False,
        "hasDairy": False,
        "priceRange": "€12-15",
        "translations": {"nl": "Valenciaanse paella"},
    },
    {
        "id": "jamon-iberico",
        "spanishName": "Jamón Ibérico",
        "englishName": "Iberian Ham",
        "description": "Cured ham from acorn-fed pigs",
        "hasPork": True,
        "priceRange": "€18-25",
    },
    {
        "id": "gazpacho",
        "spanishName": "Gazpacho Andaluz",
        "englishName": "Andalusian Gazpacho",
        "description": "Cold tomato soup",
        "isVegetarian": True,
        "priceRange": "€6-8",
    },
    {
        "id": "tortilla",
        "spanishName": "Tortilla Española",
        "englishName": "Spanish Omelette",
        "description": "Potato and egg omelette",
        "isVegetarian": True,
        "priceRange": "€8-10",
    },
    {
        "id": "gambas",
        "spanishName": "Gambas al Ajillo",
        "englishName": "Garlic Prawns",
        "description": "Prawns sautéed in garlic and olive oil",
        "hasSeafood": True,
        "priceRange": "€12-16",
    },
    {
        "id": "queso",
        "spanishName": "Queso Manchego",
        "englishName": "Manchego Cheese",
        "description": "Aged sheep's milk cheese",
        "isVegetarian": True,
        "hasDairy": True,
        "priceRange": "€9",
    },
    {
        "id": "paella-marisco",
        "spanishName": "Paella de Marisco",
        "englishName": "Seafood Paella",
        "description": "Rice with prawns, mussels and squid",
        "hasSeafood": True,
        "priceRange": "€16-22",
    },
]


@pytest.fixture
def records() -> List[MenuRecord]:
    """Catalog records in catalog order."""
    return [MenuRecord.from_dict(item) for item in CATALOG]


@pytest.fixture
def provider(records) -> StaticRecordProvider:
    """Loaded record provider."""
    return StaticRecordProvider(records)


@pytest.fixture
def config() -> SearchConfig:
    return SearchConfig()


@pytest.fixture
def index(records, config) -> TermIndex:
    """Term index built from the catalog."""
    return TermIndex.build(records, config)


@pytest.fixture
def preferences() -> StaticPreferenceProvider:
    """Preferences with one liked and one disliked record."""
    return StaticPreferenceProvider({
        "gazpacho": "liked",
        "jamon-iberico": "disliked",
    })


@pytest.fixture
def engine(provider, config, preferences) -> SearchEngine:
    """Engine over the catalog (index not built yet)."""
    return SearchEngine(provider, config=config, preferences=preferences)
