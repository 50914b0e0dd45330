"""
Search Service - Business logic for browsing the card catalog.

This module contains the catalog filtering used by the deck builder:
- Faction filtering (deck faction plus neutral cards)
- Text search across name, tags and ability
- Restricting the list to cards already in the deck
- Ordering by cost, then name
"""

from collections.abc import Iterable, Mapping

from repositories.card_repository import CardRecord, CardRepository, get_card_repository
from utils.constants import NEUTRAL_FACTION


def card_sort_key(card: CardRecord) -> tuple[int, str]:
    """Sort key placing the most expensive cards first, ties broken by name."""
    return (-card.cost, card.name.casefold())


def sort_cards(cards: Iterable[CardRecord]) -> list[CardRecord]:
    return sorted(cards, key=card_sort_key)


def matches_query(card: CardRecord, query: str) -> bool:
    """Case-insensitive substring match against name, tags and ability text."""
    needle = query.strip().casefold()
    if not needle:
        return True
    return (
        needle in card.name.casefold()
        or needle in card.tags.casefold()
        or needle in card.ability.casefold()
    )


class SearchService:
    """Service for catalog search and filtering logic."""

    def __init__(self, card_repository: CardRepository | None = None):
        """
        Initialize the search service.

        Args:
            card_repository: CardRepository instance
        """
        self.card_repo = card_repository or get_card_repository()

    def filter_catalog(
        self,
        faction: str,
        query: str = "",
        only_in_deck: bool = False,
        deck_counts: Mapping[str, int] | None = None,
    ) -> list[CardRecord]:
        """
        Return the catalog cards playable in a deck of the given faction.

        Args:
            faction: Deck faction; neutral cards are always included
            query: Text that must appear in the name, tags or ability
            only_in_deck: Keep only cards with at least one copy in the deck
            deck_counts: Copies per card id in the deck being edited

        Returns:
            Matching cards sorted by cost descending, then name
        """
        counts = deck_counts or {}
        matches = [
            card
            for card in self.card_repo.get_cards()
            if card.faction in (faction, NEUTRAL_FACTION)
            and matches_query(card, query)
            and (not only_in_deck or counts.get(card.id, 0) > 0)
        ]
        return sort_cards(matches)


# Global instance for backward compatibility
_default_service = None


def get_search_service() -> SearchService:
    """Get the default search service instance."""
    global _default_service
    if _default_service is None:
        _default_service = SearchService()
    return _default_service


def reset_search_service() -> None:
    """Reset the global search service instance."""
    global _default_service
    _default_service = None
