"""
App Controller - Application logic for the companion window.

This controller separates business logic and state management from UI presentation.
It owns the deck being edited, the shared-pool link, the saved-deck library and
the tracker session, and exposes one method per user intent for the UI layer.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    import wx

    from widgets.app_frame import AppFrame

from repositories.card_repository import CardRecord, CardRepository, get_card_repository
from repositories.deck_repository import Deck, DeckRepository, get_deck_repository
from services.deck_service import DeckService, DeckValidation
from services.search_service import SearchService
from services.state_service import AppSettings, StateService
from services.tracker_service import TrackerService, TrackerSession
from utils.constants import DEFAULT_FACTION, VIEW_OPTIONS


@dataclass(frozen=True)
class CatalogEntry:
    """A catalog card as shown in the builder list."""

    card: CardRecord
    count: int
    at_limit: bool


class AppController:

    def __init__(
        self,
        card_repository: CardRepository | None = None,
        deck_repository: DeckRepository | None = None,
        state_service: StateService | None = None,
    ):
        # Services and repositories
        self.card_repo = card_repository or get_card_repository()
        self.deck_repo = deck_repository or get_deck_repository()
        self.deck_service = DeckService(self.card_repo)
        self.search_service = SearchService(self.card_repo)
        self.tracker_service = TrackerService(self.card_repo)
        self.state_service = state_service or StateService()

        # Settings management
        self.settings: AppSettings = self.state_service.load_settings(self.factions())
        if self.settings.builder_faction not in self.factions() and self.factions():
            self.settings.builder_faction = self.factions()[0]

        # Application state
        self.decks: list[Deck] = self.deck_repo.load()
        self.draft: Deck = self._blank_deck()
        self.shared_pool_id: str | None = None
        self.search_query: str = ""
        self.only_in_deck: bool = False
        self.tracker_session: TrackerSession | None = None
        self.selected_card_id: str | None = None
        self.view: str = "decks" if self.settings.last_view == "tracker" else self.settings.last_view

        self.frame: AppFrame | None = None

    # ============= Catalog =============

    def factions(self) -> list[str]:
        return self.card_repo.get_factions()

    def get_card(self, card_id: str) -> CardRecord | None:
        return self.card_repo.get_card(card_id)

    # ============= Navigation =============

    def navigate(self, view: str) -> str:
        """
        Switch the active view.

        Leaving the tracker discards its session. The tracker view is only
        reachable while a session exists; otherwise the library is shown.
        """
        if view not in VIEW_OPTIONS:
            raise ValueError(f"Unknown view: {view}")
        if self.view == "tracker" and view != "tracker":
            self.tracker_session = None
            self.selected_card_id = None
        if view == "tracker" and self.tracker_session is None:
            view = "decks"
        self.view = view
        return view

    # ============= Builder =============

    def _blank_deck(self) -> Deck:
        faction = self.settings.builder_faction or DEFAULT_FACTION
        return Deck(name="", faction=faction)

    def new_deck(self) -> Deck:
        self.draft = self._blank_deck()
        self.shared_pool_id = None
        self.navigate("builder")
        return self.draft

    def edit_deck(self, deck_id: str) -> Deck | None:
        deck = self.deck_repo.get_deck(deck_id)
        if deck is None:
            logger.warning(f"Cannot edit missing deck {deck_id}")
            return None
        self.draft = deck
        self.navigate("builder")
        return self.draft

    def set_deck_name(self, name: str) -> None:
        self.draft.name = name

    def set_deck_faction(self, faction: str) -> None:
        self.deck_service.change_faction(self.draft, faction)
        self.settings.builder_faction = faction

    def set_search_query(self, query: str) -> None:
        self.search_query = query

    def set_only_in_deck(self, enabled: bool) -> None:
        self.only_in_deck = bool(enabled)

    def add_card(self, card_id: str) -> bool:
        card = self.card_repo.get_card(card_id)
        if card is None:
            return False
        return self.deck_service.add_card(self.draft, card, self.shared_pool_deck())

    def remove_card(self, card_id: str) -> bool:
        return self.deck_service.remove_card(self.draft, card_id)

    def builder_cards(self) -> list[CatalogEntry]:
        """Catalog cards for the builder list with per-card copy counts and limit flags."""
        counts = Counter(self.draft.card_ids)
        peer = self.shared_pool_deck()
        cards = self.search_service.filter_catalog(
            self.draft.faction,
            query=self.search_query,
            only_in_deck=self.only_in_deck,
            deck_counts=counts,
        )
        return [
            CatalogEntry(
                card=card,
                count=counts.get(card.id, 0),
                at_limit=self.deck_service.is_at_copy_limit(self.draft, card, peer),
            )
            for card in cards
        ]

    def validation(self) -> DeckValidation:
        return self.deck_service.validate_deck(self.draft)

    def can_save(self) -> bool:
        return self.validation().is_saveable

    def save_label(self) -> str:
        return "Update" if self.draft.id else "Save"

    # ============= Shared Pool =============

    def shared_pool_options(self) -> list[Deck]:
        return self.deck_service.shared_pool_candidates(self.decks, self.draft)

    def set_shared_pool(self, deck_id: str | None) -> bool:
        if not deck_id:
            self.shared_pool_id = None
            return True
        if deck_id not in {deck.id for deck in self.shared_pool_options()}:
            logger.warning(f"Deck {deck_id} cannot share a pool with '{self.draft.name}'")
            return False
        self.shared_pool_id = deck_id
        return True

    def shared_pool_deck(self) -> Deck | None:
        """Resolve the linked deck against the current saved decks."""
        if not self.shared_pool_id:
            return None
        peer = self.deck_repo.get_deck(self.shared_pool_id)
        if peer is None:
            return None
        if self.draft.id and peer.id == self.draft.id:
            return None
        if peer.faction == self.draft.faction:
            return None
        return peer

    # ============= Library =============

    def refresh_decks(self) -> list[Deck]:
        self.decks = self.deck_repo.get_decks()
        return self.decks

    def save_deck(self) -> Deck | None:
        """
        Persist the deck being edited.

        Returns:
            The stored deck, or None when the save gate rejects the deck
        """
        validation = self.validation()
        if not validation.is_saveable:
            logger.info(f"Save blocked: {'; '.join(validation.blockers)}")
            return None

        stored = self.deck_repo.save_deck(self.draft)
        self.draft.id = stored.id
        self.draft.created_at = stored.created_at
        self.refresh_decks()
        self.shared_pool_id = None
        self.navigate("decks")
        return stored

    def delete_deck(self, deck_id: str) -> bool:
        deleted = self.deck_repo.delete_deck(deck_id)
        self.refresh_decks()
        if self.shared_pool_id == deck_id:
            self.shared_pool_id = None
        return deleted

    # ============= Tracker =============

    def start_tracking(self, deck_id: str) -> TrackerSession | None:
        deck = self.deck_repo.get_deck(deck_id)
        if deck is None:
            logger.warning(f"Cannot track missing deck {deck_id}")
            return None
        self.tracker_session = self.tracker_service.start(deck)
        self.selected_card_id = None
        self.view = "tracker"
        return self.tracker_session

    def toggle_drawn(self, index: int) -> bool:
        if self.tracker_session is None:
            return False
        return self.tracker_session.toggle(index)

    def reset_tracker(self) -> None:
        if self.tracker_session is not None:
            self.tracker_service.reset(self.tracker_session)

    def tracker_in_deck(self) -> list[tuple[int, CardRecord]]:
        if self.tracker_session is None:
            return []
        return self.tracker_service.in_deck_entries(self.tracker_session)

    def tracker_drawn(self) -> list[tuple[int, CardRecord]]:
        if self.tracker_session is None:
            return []
        return self.tracker_service.drawn_entries(self.tracker_session)

    def select_card(self, card_id: str) -> CardRecord | None:
        card = self.tracker_service.card_details(card_id)
        self.selected_card_id = card.id if card else None
        return card

    def clear_selection(self) -> None:
        self.selected_card_id = None

    # ============= Settings =============

    def save_settings(self) -> None:
        self.settings.last_view = self.view
        self.state_service.save_settings(self.settings)

    # ============= UI =============

    def create_frame(self, parent: wx.Window | None = None) -> AppFrame:
        from widgets.app_frame import AppFrame

        self.frame = AppFrame(controller=self, parent=parent)
        return self.frame


_controller_instance: AppController | None = None


def get_app_controller() -> AppController:
    global _controller_instance
    if _controller_instance is None:
        _controller_instance = AppController()
    return _controller_instance


def reset_app_controller() -> None:
    global _controller_instance
    _controller_instance = None
