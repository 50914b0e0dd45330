"""
Deck Service - Business logic for deck operations.

This module contains all the rules for building decks:
- Copy limits and shared-pool accounting for neutral cards
- Adding and removing cards
- Derived statistics (cost, units, leaders)
- Save gating and advisory indicators
"""

from collections import Counter
from dataclasses import dataclass

from loguru import logger

from repositories.card_repository import CardRecord, CardRepository, get_card_repository
from repositories.deck_repository import Deck
from utils.constants import (
    BRONZE_COPY_LIMIT,
    CATEGORY_LEADER,
    CATEGORY_UNIT,
    COST_LIMIT,
    DECK_SIZE_LIMIT,
    GOLD_COPY_LIMIT,
    LEADER_COUNT_REQUIRED,
    MIN_UNIT_COUNT,
    NEUTRAL_FACTION,
    RARITY_GOLD,
)


@dataclass(frozen=True)
class DeckStats:
    """Aggregates recomputed from a card sequence."""

    card_count: int
    total_cost: int
    unit_count: int
    leader_count: int


@dataclass(frozen=True)
class DeckValidation:
    """
    Result of checking a deck against the building rules.

    Blockers disable saving. Advisories are only shown in the status bar.
    """

    stats: DeckStats
    blockers: tuple[str, ...]
    advisories: tuple[str, ...]

    @property
    def is_saveable(self) -> bool:
        return not self.blockers

    @property
    def size_level(self) -> str:
        if self.stats.card_count == DECK_SIZE_LIMIT:
            return "ok"
        return "over" if self.stats.card_count > DECK_SIZE_LIMIT else "under"

    @property
    def leader_level(self) -> str:
        return "ok" if self.stats.leader_count == LEADER_COUNT_REQUIRED else "warn"

    @property
    def unit_level(self) -> str:
        return "ok" if self.stats.unit_count >= MIN_UNIT_COUNT else "warn"

    @property
    def cost_level(self) -> str:
        return "over" if self.stats.total_cost > COST_LIMIT else "neutral"


class DeckService:
    """Service for deck-building rules."""

    def __init__(self, card_repository: CardRepository | None = None):
        """
        Initialize the deck service.

        Args:
            card_repository: CardRepository used to resolve card identifiers
        """
        self.card_repo = card_repository or get_card_repository()

    # ============= Copy Limits =============

    @staticmethod
    def copy_limit(card: CardRecord) -> int:
        """Return how many copies of a card a deck may hold."""
        return GOLD_COPY_LIMIT if card.rarity == RARITY_GOLD else BRONZE_COPY_LIMIT

    @staticmethod
    def count_copies(card_ids: list[str]) -> Counter:
        return Counter(card_ids)

    def neutral_usage(self, peer_deck: Deck | None) -> Counter:
        """
        Count the neutral cards used by a linked deck.

        Non-neutral and unresolved entries in the peer deck are ignored.
        """
        usage: Counter = Counter()
        if peer_deck is None:
            return usage
        for card_id in peer_deck.card_ids:
            card = self.card_repo.get_card(card_id)
            if card is not None and card.faction == NEUTRAL_FACTION:
                usage[card_id] += 1
        return usage

    def is_at_copy_limit(
        self, deck: Deck, card: CardRecord, peer_deck: Deck | None = None
    ) -> bool:
        """
        Check whether another copy of a card would break its copy limit.

        Neutral cards count copies in the linked deck as well.
        """
        local_count = deck.card_ids.count(card.id)
        limit = self.copy_limit(card)
        if card.faction == NEUTRAL_FACTION and peer_deck is not None:
            peer_count = self.neutral_usage(peer_deck)[card.id]
            return local_count + peer_count >= limit
        return local_count >= limit

    def can_add_card(self, deck: Deck, card: CardRecord, peer_deck: Deck | None = None) -> bool:
        if card.faction not in (deck.faction, NEUTRAL_FACTION):
            return False
        if len(deck.card_ids) >= DECK_SIZE_LIMIT:
            return False
        return not self.is_at_copy_limit(deck, card, peer_deck)

    # ============= Deck Editing =============

    def add_card(self, deck: Deck, card: CardRecord, peer_deck: Deck | None = None) -> bool:
        """
        Append a card to the deck.

        Returns:
            True if the card was added, False if a rule rejected it
        """
        if not self.can_add_card(deck, card, peer_deck):
            logger.debug(f"Rejected adding {card.id} to '{deck.name}'")
            return False
        deck.card_ids.append(card.id)
        return True

    @staticmethod
    def remove_card(deck: Deck, card_id: str) -> bool:
        """
        Remove the most recently added copy of a card.

        Returns:
            True if a copy was removed, False if the card was not in the deck
        """
        for index in range(len(deck.card_ids) - 1, -1, -1):
            if deck.card_ids[index] == card_id:
                del deck.card_ids[index]
                return True
        return False

    def change_faction(self, deck: Deck, faction: str) -> None:
        """
        Switch a deck to another faction, clearing its cards.

        Raises:
            ValueError: If the faction is not a playable catalog faction
        """
        if faction not in self.card_repo.get_factions():
            raise ValueError(f"Unknown faction: {faction}")
        if faction == deck.faction:
            return
        deck.faction = faction
        deck.card_ids = []

    # ============= Analysis =============

    def resolve_cards(self, card_ids: list[str]) -> list[tuple[int, CardRecord]]:
        """Pair each resolvable position with its card, skipping dangling ids."""
        entries = []
        for index, card_id in enumerate(card_ids):
            card = self.card_repo.get_card(card_id)
            if card is not None:
                entries.append((index, card))
        return entries

    def deck_stats(self, card_ids: list[str]) -> DeckStats:
        cards = [card for _, card in self.resolve_cards(card_ids)]
        return DeckStats(
            card_count=len(card_ids),
            total_cost=sum(card.cost for card in cards),
            unit_count=sum(1 for card in cards if card.category == CATEGORY_UNIT),
            leader_count=sum(1 for card in cards if card.category == CATEGORY_LEADER),
        )

    def validate_deck(self, deck: Deck) -> DeckValidation:
        """
        Check a deck against the save gate and the advisory limits.

        Only the name, a non-empty card list, exactly one leader and the cost
        limit block saving. Deck size and minimum unit count are advisory.
        """
        stats = self.deck_stats(deck.card_ids)

        blockers: list[str] = []
        if not deck.name.strip():
            blockers.append("Deck needs a name")
        if stats.card_count == 0:
            blockers.append("Deck has no cards")
        if stats.leader_count != LEADER_COUNT_REQUIRED:
            blockers.append(f"Deck needs exactly {LEADER_COUNT_REQUIRED} leader")
        if stats.total_cost > COST_LIMIT:
            blockers.append(f"Total cost {stats.total_cost} exceeds {COST_LIMIT}")

        advisories: list[str] = []
        if stats.card_count != DECK_SIZE_LIMIT:
            advisories.append(f"{stats.card_count} / {DECK_SIZE_LIMIT} cards")
        if stats.unit_count < MIN_UNIT_COUNT:
            advisories.append(f"{stats.unit_count} / {MIN_UNIT_COUNT}+ units")

        return DeckValidation(stats=stats, blockers=tuple(blockers), advisories=tuple(advisories))

    # ============= Shared Pool =============

    @staticmethod
    def shared_pool_candidates(decks: list[Deck], deck: Deck) -> list[Deck]:
        """Saved decks that may share the neutral pool with the given deck."""
        return [
            saved
            for saved in decks
            if (deck.id is None or saved.id != deck.id) and saved.faction != deck.faction
        ]


# Global instance for backward compatibility
_default_service: DeckService | None = None


def get_deck_service() -> DeckService:
    """Get the default deck service instance."""
    global _default_service
    if _default_service is None:
        _default_service = DeckService()
    return _default_service


def reset_deck_service() -> None:
    """Reset the global deck service instance."""
    global _default_service
    _default_service = None


__all__ = [
    "DeckService",
    "DeckStats",
    "DeckValidation",
    "get_deck_service",
    "reset_deck_service",
]
