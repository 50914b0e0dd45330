"""Constants file."""

import os
import sys
from pathlib import Path

APP_NAME = "Gwent Companion"


def _default_base_dir() -> Path:
    """Return the writable base directory for config/data/logging."""
    if getattr(sys, "frozen", False):
        local_appdata = os.getenv("LOCALAPPDATA")
        if local_appdata:
            return Path(local_appdata) / APP_NAME
        return Path.home() / ".gwent_companion"
    return Path(__file__).resolve().parent.parent


SUBDUED_TEXT = (185, 191, 202)
DARK_BG = (26, 20, 16)
DARK_PANEL = (41, 32, 25)
DARK_ALT = (56, 44, 34)
DARK_ACCENT = (16, 150, 105)
LIGHT_TEXT = (240, 232, 214)
GOLD_TEXT = (245, 200, 95)
WARN_TEXT = (245, 170, 60)
ERROR_TEXT = (240, 100, 100)
OK_TEXT = (80, 210, 150)

VIEW_TITLES = {
    "builder": "Builder",
    "decks": "Decks",
    "tracker": "Tracker",
}

__all__ = [
    "SUBDUED_TEXT",
    "DARK_BG",
    "DARK_PANEL",
    "DARK_ALT",
    "DARK_ACCENT",
    "LIGHT_TEXT",
    "GOLD_TEXT",
    "WARN_TEXT",
    "ERROR_TEXT",
    "OK_TEXT",
    "VIEW_TITLES",
]

BASE_DATA_DIR = _default_base_dir()
CONFIG_DIR = BASE_DATA_DIR / "config"
DATA_DIR = BASE_DATA_DIR / "data"
LOGS_DIR = BASE_DATA_DIR / "logs"


def ensure_base_dirs() -> None:
    """Ensure base config/data/log directories exist without importing side effects."""
    BASE_DATA_DIR.mkdir(parents=True, exist_ok=True)
    for path in (CONFIG_DIR, DATA_DIR, LOGS_DIR):
        path.mkdir(parents=True, exist_ok=True)


SETTINGS_FILE = CONFIG_DIR / "settings.json"
DECK_STORE_FILE = DATA_DIR / "decks.json"
CATALOG_FILE = Path(__file__).resolve().parent.parent / "repositories" / "data" / "cards.json"

# Single slot inside the deck store holding every saved deck
DECK_STORAGE_KEY = "custom_decks"

__all__ += [
    "APP_NAME",
    "BASE_DATA_DIR",
    "CONFIG_DIR",
    "DATA_DIR",
    "LOGS_DIR",
    "SETTINGS_FILE",
    "DECK_STORE_FILE",
    "CATALOG_FILE",
    "DECK_STORAGE_KEY",
    "ensure_base_dirs",
]

# Deck-building rules shared across services

NEUTRAL_FACTION = "neutral"
DEFAULT_FACTION = "monster"

RARITY_GOLD = "gold"
RARITY_BRONZE = "bronze"
RARITIES = (RARITY_GOLD, RARITY_BRONZE)

CATEGORY_UNIT = "Unit"
CATEGORY_SPELL = "Spell"
CATEGORY_LEADER = "Leader"
CATEGORIES = (CATEGORY_UNIT, CATEGORY_SPELL, CATEGORY_LEADER)

DECK_SIZE_LIMIT = 26
COST_LIMIT = 65
MIN_UNIT_COUNT = 13
LEADER_COUNT_REQUIRED = 1
BRONZE_COPY_LIMIT = 2
GOLD_COPY_LIMIT = 1

VIEW_OPTIONS = ("builder", "decks", "tracker")
DEFAULT_VIEW = "builder"

__all__ += [
    "NEUTRAL_FACTION",
    "DEFAULT_FACTION",
    "RARITY_GOLD",
    "RARITY_BRONZE",
    "RARITIES",
    "CATEGORY_UNIT",
    "CATEGORY_SPELL",
    "CATEGORY_LEADER",
    "CATEGORIES",
    "DECK_SIZE_LIMIT",
    "COST_LIMIT",
    "MIN_UNIT_COUNT",
    "LEADER_COUNT_REQUIRED",
    "BRONZE_COPY_LIMIT",
    "GOLD_COPY_LIMIT",
    "VIEW_OPTIONS",
    "DEFAULT_VIEW",
]
