"""
Tracker Service - In-match bookkeeping of drawn cards.

A tracker session overlays a saved deck with the set of positions already
drawn. Sessions live only in memory and are rebuilt whenever tracking starts.
"""

from dataclasses import dataclass, field

from loguru import logger

from repositories.card_repository import CardRecord, CardRepository, get_card_repository
from repositories.deck_repository import Deck
from services.search_service import card_sort_key
from utils.constants import CATEGORY_LEADER


@dataclass
class TrackerSession:
    """Drawn/not-drawn state for every position of a deck's card sequence."""

    deck: Deck
    drawn: set[int] = field(default_factory=set)

    @property
    def total(self) -> int:
        return len(self.deck.card_ids)

    @property
    def drawn_count(self) -> int:
        return len(self.drawn)

    @property
    def remaining(self) -> int:
        return max(0, self.total - self.drawn_count)

    @property
    def is_complete(self) -> bool:
        return self.drawn_count == self.total

    def is_drawn(self, index: int) -> bool:
        return index in self.drawn

    def toggle(self, index: int) -> bool:
        """
        Flip the drawn flag of one position.

        Returns:
            The new drawn state, or False when the index is out of range
        """
        if not 0 <= index < self.total:
            logger.warning(f"Ignoring toggle of position {index} in a {self.total}-card deck")
            return False
        if index in self.drawn:
            self.drawn.discard(index)
            return False
        self.drawn.add(index)
        return True


class TrackerService:
    """Service creating and inspecting tracker sessions."""

    def __init__(self, card_repository: CardRepository | None = None):
        self.card_repo = card_repository or get_card_repository()

    def initial_drawn(self, deck: Deck) -> set[int]:
        """Leaders start on the board, so their positions begin as drawn."""
        drawn = set()
        for index, card_id in enumerate(deck.card_ids):
            card = self.card_repo.get_card(card_id)
            if card is not None and card.category == CATEGORY_LEADER:
                drawn.add(index)
        return drawn

    def start(self, deck: Deck) -> TrackerSession:
        session = TrackerSession(deck=deck.copy(), drawn=self.initial_drawn(deck))
        logger.info(
            f"Tracking '{deck.name}': {session.remaining} of {session.total} cards remaining"
        )
        return session

    def reset(self, session: TrackerSession) -> None:
        session.drawn = self.initial_drawn(session.deck)

    def in_deck_entries(self, session: TrackerSession) -> list[tuple[int, CardRecord]]:
        return self._entries(session, drawn=False)

    def drawn_entries(self, session: TrackerSession) -> list[tuple[int, CardRecord]]:
        return self._entries(session, drawn=True)

    def card_details(self, card_id: str) -> CardRecord | None:
        return self.card_repo.get_card(card_id)

    def _entries(self, session: TrackerSession, drawn: bool) -> list[tuple[int, CardRecord]]:
        entries = []
        for index, card_id in enumerate(session.deck.card_ids):
            if session.is_drawn(index) != drawn:
                continue
            card = self.card_repo.get_card(card_id)
            if card is not None:
                entries.append((index, card))
        entries.sort(key=lambda entry: card_sort_key(entry[1]))
        return entries


_default_service: TrackerService | None = None


def get_tracker_service() -> TrackerService:
    """Get the default tracker service instance."""
    global _default_service
    if _default_service is None:
        _default_service = TrackerService()
    return _default_service


def reset_tracker_service() -> None:
    global _default_service
    _default_service = None
