from __future__ import annotations

from typing import TYPE_CHECKING

import wx
from loguru import logger

from widgets.dialogs.card_detail_dialog import show_card_detail_dialog

if TYPE_CHECKING:
    from widgets.app_frame import AppFrame


class AppEventHandlers:
    """User intents from the panels, forwarded to the controller followed by a redraw."""

    # ------------------------------------------------------------------ Builder ------------------------------------------------------------------
    def on_name_changed(self: AppFrame, name: str) -> None:
        self.controller.set_deck_name(name)
        self.refresh_builder(cards=False)

    def on_faction_changed(self: AppFrame, faction: str) -> None:
        try:
            self.controller.set_deck_faction(faction)
        except ValueError as exc:
            logger.warning(f"Faction change rejected: {exc}")
        self.refresh_builder()

    def on_shared_pool_changed(self: AppFrame, deck_id: str | None) -> None:
        if not self.controller.set_shared_pool(deck_id):
            self._set_status("That deck cannot share a pool with this one")
        self.refresh_builder()

    def on_search_changed(self: AppFrame, query: str) -> None:
        self.controller.set_search_query(query)
        self.refresh_builder()

    def on_only_in_deck_toggled(self: AppFrame, enabled: bool) -> None:
        self.controller.set_only_in_deck(enabled)
        self.refresh_builder()

    def on_add_card(self: AppFrame, card_id: str) -> None:
        if not self.controller.add_card(card_id):
            self._set_status("Card limit reached")
        self.refresh_builder()

    def on_remove_card(self: AppFrame, card_id: str) -> None:
        self.controller.remove_card(card_id)
        self.refresh_builder()

    def on_save_deck(self: AppFrame) -> None:
        stored = self.controller.save_deck()
        if stored is None:
            blockers = self.controller.validation().blockers
            self._set_status("Cannot save: " + "; ".join(blockers))
            return
        self._set_status(f"Saved '{stored.name}'")
        self.show_view(self.controller.view)

    # ------------------------------------------------------------------ Library ------------------------------------------------------------------
    def on_new_deck(self: AppFrame) -> None:
        self.controller.new_deck()
        self.show_view(self.controller.view)

    def on_edit_deck(self: AppFrame, deck_id: str) -> None:
        if self.controller.edit_deck(deck_id) is None:
            self._set_status("Deck not found")
        self.show_view(self.controller.view)

    def on_delete_deck(self: AppFrame, deck_id: str) -> None:
        if self.controller.delete_deck(deck_id):
            self._set_status("Deck deleted")
        self.refresh_library()

    def on_track_deck(self: AppFrame, deck_id: str) -> None:
        if self.controller.start_tracking(deck_id) is None:
            self._set_status("Deck not found")
        self.show_view(self.controller.view)

    # ------------------------------------------------------------------ Tracker ------------------------------------------------------------------
    def on_toggle_drawn(self: AppFrame, index: int) -> None:
        self.controller.toggle_drawn(index)
        self.refresh_tracker()

    def on_reset_tracker(self: AppFrame) -> None:
        self.controller.reset_tracker()
        self.refresh_tracker()

    def on_show_card_details(self: AppFrame, card_id: str) -> None:
        card = self.controller.select_card(card_id)
        if card is None:
            return
        try:
            show_card_detail_dialog(self, card)
        finally:
            self.controller.clear_selection()

    # ------------------------------------------------------------------ Navigation ------------------------------------------------------------------
    def on_navigate(self: AppFrame, view: str) -> None:
        self.controller.navigate(view)
        self.show_view(self.controller.view)

    def on_close(self: AppFrame, event: wx.CloseEvent) -> None:
        self.controller.save_settings()
        event.Skip()
