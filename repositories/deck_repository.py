"""
Deck Repository - Centralized data access layer for saved decks.

This module handles all deck persistence including:
- Reading the saved-deck slot from the local key/value store
- Writing the whole deck list back on every add, update and delete
- Minting identifiers and creation timestamps for new decks
"""

import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from loguru import logger

from services.store_service import StoreService, get_store_service
from utils.constants import DECK_STORAGE_KEY, DECK_STORE_FILE


@dataclass
class Deck:
    """A named multiset of card identifiers tagged with a faction."""

    name: str
    faction: str
    card_ids: list[str] = field(default_factory=list)
    id: str | None = None
    created_at: int | None = None

    def copy(self) -> "Deck":
        return Deck(
            name=self.name,
            faction=self.faction,
            card_ids=list(self.card_ids),
            id=self.id,
            created_at=self.created_at,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "faction": self.faction,
            "cardIds": list(self.card_ids),
            "createdAt": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Deck":
        """
        Build a deck from its stored representation.

        Raises:
            ValueError: If the entry cannot be decoded
        """
        if not isinstance(data, dict):
            raise ValueError("deck entry is not an object")
        deck_id = data.get("id")
        name = data.get("name")
        faction = data.get("faction")
        card_ids = data.get("cardIds")
        created_at = data.get("createdAt")
        if not isinstance(deck_id, str) or not deck_id:
            raise ValueError("deck entry has no id")
        if not isinstance(name, str) or not isinstance(faction, str):
            raise ValueError(f"deck {deck_id} has an invalid name or faction")
        if not isinstance(card_ids, list) or not all(isinstance(cid, str) for cid in card_ids):
            raise ValueError(f"deck {deck_id} has an invalid card list")
        if created_at is not None and not isinstance(created_at, int):
            raise ValueError(f"deck {deck_id} has an invalid creation timestamp")
        return cls(
            name=name,
            faction=faction,
            card_ids=list(card_ids),
            id=deck_id,
            created_at=created_at,
        )


def _now_ms() -> int:
    return int(time.time() * 1000)


class DeckRepository:
    """Repository for saved decks backed by a single key/value store slot."""

    def __init__(
        self,
        store_service: StoreService | None = None,
        store_path: Path | None = None,
        storage_key: str = DECK_STORAGE_KEY,
    ):
        """
        Initialize the deck repository.

        Args:
            store_service: Backing key/value store. Defaults to the JSON file store.
            store_path: Store location. Defaults to DECK_STORE_FILE.
            storage_key: Slot inside the store that holds the deck list
        """
        self.store_service = store_service or get_store_service()
        self.store_path = store_path or DECK_STORE_FILE
        self.storage_key = storage_key
        self._decks: list[Deck] | None = None

    # ============= Store Operations =============

    def load(self) -> list[Deck]:
        """
        Read every saved deck from the store.

        A missing slot, an unreadable store or a slot that is not a list all
        load as "no decks". Individual entries that cannot be decoded are skipped.
        """
        data = self.store_service.load_store(self.store_path)
        raw = data.get(self.storage_key)
        if raw is None:
            raw = []
        elif not isinstance(raw, list):
            logger.warning(f"Saved deck slot '{self.storage_key}' is not a list; treating as empty")
            raw = []

        decks: list[Deck] = []
        seen: set[str] = set()
        for entry in raw:
            try:
                deck = Deck.from_dict(entry)
            except ValueError as exc:
                logger.warning(f"Skipping unreadable saved deck: {exc}")
                continue
            if deck.id in seen:
                logger.warning(f"Skipping duplicate saved deck id {deck.id}")
                continue
            seen.add(deck.id)
            decks.append(deck)

        self._decks = decks
        logger.debug(f"Loaded {len(decks)} saved decks from {self.store_path}")
        return [deck.copy() for deck in decks]

    def save_all(self, decks: list[Deck]) -> None:
        """Replace the stored deck list wholesale."""
        data = self.store_service.load_store(self.store_path)
        data[self.storage_key] = [deck.to_dict() for deck in decks]
        self.store_service.save_store(self.store_path, data)
        self._decks = [deck.copy() for deck in decks]

    # ============= Deck Operations =============

    def get_decks(self) -> list[Deck]:
        """Return a snapshot of the saved decks, loading them on first use."""
        if self._decks is None:
            return self.load()
        return [deck.copy() for deck in self._decks]

    def get_deck(self, deck_id: str | None) -> Deck | None:
        if not deck_id:
            return None
        for deck in self.get_decks():
            if deck.id == deck_id:
                return deck
        return None

    def save_deck(self, deck: Deck, now_ms: int | None = None) -> Deck:
        """
        Insert or update a deck.

        New decks receive a freshly minted id and creation timestamp and are
        appended. Existing decks replace the stored entry with the same id and
        keep its original creation timestamp.

        Returns:
            The stored copy of the deck
        """
        decks = self.get_decks()
        now = _now_ms() if now_ms is None else now_ms
        stored = deck.copy()

        index = next((i for i, saved in enumerate(decks) if deck.id and saved.id == deck.id), None)
        if index is not None:
            stored.created_at = decks[index].created_at
            if stored.created_at is None:
                stored.created_at = deck.created_at if deck.created_at is not None else now
            decks[index] = stored
            logger.info(f"Updated deck '{stored.name}' ({stored.id})")
        else:
            if not stored.id:
                stored.id = self._mint_id(decks, now)
            elif deck.id:
                logger.warning(f"Deck {deck.id} is no longer stored; saving it as a new entry")
            if stored.created_at is None:
                stored.created_at = now
            decks.append(stored)
            logger.info(f"Saved new deck '{stored.name}' ({stored.id})")

        self.save_all(decks)
        return stored.copy()

    def delete_deck(self, deck_id: str) -> bool:
        """
        Delete a saved deck.

        Returns:
            True if deleted, False if not found
        """
        decks = self.get_decks()
        remaining = [deck for deck in decks if deck.id != deck_id]
        if len(remaining) == len(decks):
            logger.warning(f"Deck with ID {deck_id} not found for deletion")
            return False
        self.save_all(remaining)
        logger.info(f"Deleted deck with ID: {deck_id}")
        return True

    # ============= Private Helper Methods =============

    @staticmethod
    def _mint_id(decks: list[Deck], now_ms: int) -> str:
        taken = {deck.id for deck in decks}
        candidate = now_ms
        while str(candidate) in taken:
            candidate += 1
        return str(candidate)


# Global instance for backward compatibility
_default_repository = None


def get_deck_repository() -> DeckRepository:
    """Get the default deck repository instance."""
    global _default_repository
    if _default_repository is None:
        _default_repository = DeckRepository()
    return _default_repository


def reset_deck_repository() -> None:
    """
    Reset the global deck repository instance.

    This is primarily useful for testing to ensure test isolation
    and prevent state leakage between tests.
    """
    global _default_repository
    _default_repository = None
