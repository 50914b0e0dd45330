"""Root-level pytest fixtures for all tests.

This module provides fixtures that are available to all tests in the project.
"""

import sys
from pathlib import Path
from unittest import mock

# Mock wx before any imports that might need it (for Linux/headless environments)
if "wx" not in sys.modules:
    wx_mock = mock.MagicMock()
    wx_mock.OK = 131072
    wx_mock.ICON_WARNING = 524288
    wx_mock.ICON_ERROR = 1048576
    wx_mock.YES_NO = 2097152
    wx_mock.YES = 4194304
    wx_mock.NO = 8388608
    wx_mock.Colour = mock.Mock(return_value=mock.MagicMock())
    sys.modules["wx"] = wx_mock

import pytest
from test_helpers import reset_all_globals

from repositories.card_repository import CardRepository
from repositories.deck_repository import DeckRepository
from services.store_service import InMemoryStoreService

SAMPLE_CARDS = [
    {"id": "c1", "name": "Nekker", "strength": 3, "cost": 4, "tags": "Ogroid", "ability": "Thrive.", "type": "bronze", "category": "Unit", "faction": "monster"},
    {"id": "m_gold", "name": "Imlerith", "strength": 8, "cost": 10, "tags": "Wild Hunt, Officer", "ability": "Deal 4 damage.", "type": "gold", "category": "Unit", "faction": "monster"},
    {"id": "m_leader", "name": "Eredin", "strength": 0, "cost": 0, "tags": "Wild Hunt", "ability": "Order: Spawn a Rider.", "type": "gold", "category": "Leader", "faction": "monster"},
    {"id": "m_leader_2", "name": "Unseen Elder", "strength": 0, "cost": 0, "tags": "Vampire", "ability": "Order: Consume.", "type": "gold", "category": "Leader", "faction": "monster"},
    {"id": "m_spell", "name": "Full Moon", "strength": 0, "cost": 6, "tags": "Organic", "ability": "Boost a Beast by 4.", "type": "bronze", "category": "Spell", "faction": "monster"},
    {"id": "n_bronze", "name": "Roach", "strength": 4, "cost": 5, "tags": "Beast", "ability": "Summon on Gold play.", "type": "bronze", "category": "Unit", "faction": "neutral"},
    {"id": "n_gold", "name": "Geralt of Rivia", "strength": 12, "cost": 12, "tags": "Witcher", "ability": "No ability.", "type": "gold", "category": "Unit", "faction": "neutral"},
    {"id": "n_spell", "name": "Swallow", "strength": 0, "cost": 5, "tags": "Alchemy, Item", "ability": "Boost a unit by 10.", "type": "bronze", "category": "Spell", "faction": "neutral"},
    {"id": "s_leader", "name": "Crach an Craite", "strength": 0, "cost": 0, "tags": "Clan an Craite", "ability": "Order: Strengthen.", "type": "gold", "category": "Leader", "faction": "skellige"},
    {"id": "s_unit", "name": "Drummond Warmonger", "strength": 4, "cost": 10, "tags": "Clan Drummond", "ability": "Deal 4 damage.", "type": "bronze", "category": "Unit", "faction": "skellige"},
    {"id": "s_giant", "name": "Lord of Undvik", "strength": 30, "cost": 30, "tags": "Ogroid", "ability": "Deathwish.", "type": "bronze", "category": "Unit", "faction": "skellige"},
]

DECK_STORE_PATH = Path("memory") / "decks.json"


@pytest.fixture(autouse=True)
def reset_global_state():
    """Automatically reset all global service and repository instances after each test.

    This fixture ensures test isolation by resetting all singleton instances
    to None after each test completes, preventing state leakage between tests.
    """
    yield
    reset_all_globals()


@pytest.fixture
def card_repo() -> CardRepository:
    """CardRepository over a small in-memory catalog."""
    return CardRepository(cards=SAMPLE_CARDS)


@pytest.fixture
def memory_store() -> InMemoryStoreService:
    return InMemoryStoreService()


@pytest.fixture
def deck_repo(memory_store) -> DeckRepository:
    """DeckRepository backed by an in-memory store."""
    return DeckRepository(store_service=memory_store, store_path=DECK_STORE_PATH)
