"""
Deck Library Panel - Lists saved decks with track, edit and delete actions.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import wx

from utils.stylize import stylize_button, stylize_label, stylize_listctrl
from utils.ui_constants import DARK_PANEL

if TYPE_CHECKING:
    from repositories.deck_repository import Deck


class DeckLibraryPanel(wx.Panel):
    """Panel listing the saved decks."""

    def __init__(
        self,
        parent: wx.Window,
        on_new_deck: Callable[[], None],
        on_track_deck: Callable[[str], None],
        on_edit_deck: Callable[[str], None],
        on_delete_deck: Callable[[str], None],
    ) -> None:
        """
        Initialize the deck library panel.

        Args:
            parent: Parent window
            on_new_deck: Callback starting a fresh deck in the builder
            on_track_deck: Callback starting the tracker for a deck id
            on_edit_deck: Callback loading a deck id into the builder
            on_delete_deck: Callback deleting a deck id
        """
        super().__init__(parent)
        self.SetBackgroundColour(DARK_PANEL)

        self._on_new_deck = on_new_deck
        self._on_track_deck = on_track_deck
        self._on_edit_deck = on_edit_deck
        self._on_delete_deck = on_delete_deck
        self._deck_ids: list[str] = []

        self._build_ui()

    def _build_ui(self) -> None:
        sizer = wx.BoxSizer(wx.VERTICAL)
        self.SetSizer(sizer)

        header = wx.BoxSizer(wx.HORIZONTAL)
        sizer.Add(header, 0, wx.EXPAND | wx.ALL, 6)
        title = wx.StaticText(self, label="My Saved Decks")
        stylize_label(title)
        header.Add(title, 1, wx.ALIGN_CENTER_VERTICAL)
        new_btn = wx.Button(self, label="New Deck")
        stylize_button(new_btn)
        new_btn.Bind(wx.EVT_BUTTON, lambda _evt: self._on_new_deck())
        header.Add(new_btn, 0)

        self.empty_label = wx.StaticText(self, label="No decks found. Start building!")
        stylize_label(self.empty_label, subtle=True)
        sizer.Add(self.empty_label, 0, wx.ALL, 12)

        self.deck_list = wx.ListCtrl(self, style=wx.LC_REPORT | wx.LC_SINGLE_SEL)
        self.deck_list.InsertColumn(0, "Deck", width=260)
        self.deck_list.InsertColumn(1, "Faction", width=150)
        self.deck_list.InsertColumn(2, "Cards", width=70)
        stylize_listctrl(self.deck_list)
        self.deck_list.Bind(wx.EVT_LIST_ITEM_ACTIVATED, lambda _evt: self._with_selected(self._on_edit_deck))
        sizer.Add(self.deck_list, 1, wx.EXPAND | wx.LEFT | wx.RIGHT, 6)

        buttons = wx.BoxSizer(wx.HORIZONTAL)
        sizer.Add(buttons, 0, wx.EXPAND | wx.ALL, 6)
        for label, callback in (
            ("Track", self._on_track_deck),
            ("Edit", self._on_edit_deck),
            ("Delete", self._confirm_delete),
        ):
            btn = wx.Button(self, label=label)
            stylize_button(btn)
            btn.Bind(wx.EVT_BUTTON, lambda _evt, cb=callback: self._with_selected(cb))
            buttons.Add(btn, 0, wx.RIGHT, 6)

    # ============= Public API =============

    def set_decks(self, decks: list[Deck]) -> None:
        self.deck_list.DeleteAllItems()
        self._deck_ids = []
        for deck in decks:
            row = self.deck_list.InsertItem(self.deck_list.GetItemCount(), deck.name)
            self.deck_list.SetItem(row, 1, deck.faction.replace("_", " ").title())
            self.deck_list.SetItem(row, 2, str(len(deck.card_ids)))
            self._deck_ids.append(deck.id or "")
        self.empty_label.Show(not decks)
        self.deck_list.Show(bool(decks))
        self.Layout()

    # ============= Event Handlers =============

    def _with_selected(self, callback: Callable[[str], None]) -> None:
        index = self.deck_list.GetFirstSelected()
        if 0 <= index < len(self._deck_ids):
            callback(self._deck_ids[index])

    def _confirm_delete(self, deck_id: str) -> None:
        answer = wx.MessageBox(
            "Delete this deck? This cannot be undone.",
            "Delete Deck",
            wx.YES_NO | wx.ICON_WARNING,
            self,
        )
        if answer == wx.YES:
            self._on_delete_deck(deck_id)
