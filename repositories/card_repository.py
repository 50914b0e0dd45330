"""
Card Repository - Data access layer for the static card catalog.

This module handles all card-related data access including:
- Loading the versioned catalog file shipped with the application
- Card lookup by identifier
- Faction enumeration
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from loguru import logger

from utils.constants import CATALOG_FILE, CATEGORIES, NEUTRAL_FACTION, RARITIES

_REQUIRED_KEYS = ("id", "name", "strength", "cost", "type", "category", "faction")


@dataclass(frozen=True)
class CardRecord:
    """Immutable catalog entry."""

    id: str
    name: str
    strength: int
    cost: int
    tags: str
    ability: str
    rarity: str
    category: str
    faction: str

    @property
    def is_neutral(self) -> bool:
        return self.faction == NEUTRAL_FACTION

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CardRecord":
        """
        Build a record from a catalog entry.

        Raises:
            ValueError: If the entry is missing keys or carries invalid values
        """
        missing = [key for key in _REQUIRED_KEYS if key not in data]
        if missing:
            raise ValueError(f"missing keys: {', '.join(missing)}")

        strength = int(data["strength"])
        cost = int(data["cost"])
        if strength < 0 or cost < 0:
            raise ValueError("strength and cost must be non-negative")
        if data["type"] not in RARITIES:
            raise ValueError(f"unknown rarity tier {data['type']!r}")
        if data["category"] not in CATEGORIES:
            raise ValueError(f"unknown category {data['category']!r}")

        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            strength=strength,
            cost=cost,
            tags=str(data.get("tags", "")),
            ability=str(data.get("ability", "")),
            rarity=data["type"],
            category=data["category"],
            faction=str(data["faction"]),
        )


class CardRepository:
    """Repository for read-only catalog access."""

    def __init__(
        self,
        catalog_path: Path | None = None,
        cards: list[dict[str, Any]] | None = None,
    ):
        """
        Initialize the card repository.

        Args:
            catalog_path: Catalog JSON file. Defaults to the bundled catalog.
            cards: Raw card entries to use instead of reading a file.
        """
        self.catalog_path = catalog_path or CATALOG_FILE
        self._raw_cards = cards
        self._cards: list[CardRecord] | None = None
        self._cards_by_id: dict[str, CardRecord] = {}
        self._factions: list[str] = []
        self._version: str | None = None

    # ============= Catalog Loading =============

    def _ensure_loaded(self) -> None:
        if self._cards is not None:
            return

        if self._raw_cards is not None:
            entries = self._raw_cards
            self._version = "inline"
        else:
            entries = self._read_catalog_file()

        cards: list[CardRecord] = []
        by_id: dict[str, CardRecord] = {}
        for entry in entries:
            try:
                card = CardRecord.from_dict(entry)
            except (TypeError, ValueError) as exc:
                logger.warning(f"Skipping malformed catalog entry {entry!r}: {exc}")
                continue
            if card.id in by_id:
                logger.warning(f"Duplicate card id {card.id!r} in catalog; keeping the first")
                continue
            by_id[card.id] = card
            cards.append(card)

        factions: list[str] = []
        for card in cards:
            if card.faction != NEUTRAL_FACTION and card.faction not in factions:
                factions.append(card.faction)

        self._cards = cards
        self._cards_by_id = by_id
        self._factions = factions
        logger.debug(f"Loaded {len(cards)} cards (catalog version {self._version})")

    def _read_catalog_file(self) -> list[dict[str, Any]]:
        try:
            with self.catalog_path.open("r", encoding="utf-8") as fh:
                payload = json.load(fh)
        except (json.JSONDecodeError, OSError) as exc:
            logger.error(f"Failed to load card catalog {self.catalog_path}: {exc}")
            return []

        if isinstance(payload, list):
            return payload
        if not isinstance(payload, dict) or not isinstance(payload.get("cards"), list):
            logger.error(f"Card catalog {self.catalog_path} has no card list")
            return []
        self._version = payload.get("version")
        return payload["cards"]

    # ============= Card Lookup =============

    def get_card(self, card_id: str) -> CardRecord | None:
        """
        Look up a card by identifier.

        Returns:
            The card, or None when the identifier does not resolve
        """
        self._ensure_loaded()
        card = self._cards_by_id.get(card_id)
        if card is None:
            logger.debug(f"Card id {card_id!r} not found in catalog")
        return card

    def get_cards(self) -> list[CardRecord]:
        """Return every catalog card in file order."""
        self._ensure_loaded()
        return list(self._cards or [])

    def get_factions(self) -> list[str]:
        """Return the distinct non-neutral factions in first-seen order."""
        self._ensure_loaded()
        return list(self._factions)

    @property
    def catalog_version(self) -> str | None:
        self._ensure_loaded()
        return self._version


# Global instance for backward compatibility
_default_repository: CardRepository | None = None


def get_card_repository() -> CardRepository:
    """Get the default card repository instance."""
    global _default_repository
    if _default_repository is None:
        _default_repository = CardRepository()
    return _default_repository


def reset_card_repository() -> None:
    """
    Reset the global card repository instance.

    This is primarily useful for testing to ensure test isolation
    and prevent state leakage between tests.
    """
    global _default_repository
    _default_repository = None
