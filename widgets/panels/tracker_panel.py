"""
Tracker Panel - Marks cards as drawn during a match.

Shows the cards still in the deck and the cards already drawn, each sorted by
cost then name, with a completion message once every card has been drawn.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import wx

from utils.stylize import stylize_button, stylize_label, stylize_listctrl
from utils.ui_constants import DARK_PANEL

if TYPE_CHECKING:
    from repositories.card_repository import CardRecord


class _TrackerList(wx.ListCtrl):
    """Report list remembering which deck position each row stands for."""

    def __init__(self, parent: wx.Window):
        super().__init__(parent, style=wx.LC_REPORT | wx.LC_SINGLE_SEL)
        self.InsertColumn(0, "Str", width=45)
        self.InsertColumn(1, "Card", width=230)
        self.InsertColumn(2, "Cost", width=50)
        self._entries: list[tuple[int, CardRecord]] = []
        stylize_listctrl(self)

    def SetEntries(self, entries: list[tuple[int, CardRecord]]) -> None:
        self.DeleteAllItems()
        self._entries = entries
        for _, card in entries:
            row = self.InsertItem(self.GetItemCount(), str(card.strength))
            self.SetItem(row, 1, card.name)
            self.SetItem(row, 2, str(card.cost))

    def GetSelectedEntry(self) -> tuple[int, CardRecord] | None:
        row = self.GetFirstSelected()
        if 0 <= row < len(self._entries):
            return self._entries[row]
        return None


class TrackerPanel(wx.Panel):
    """Panel for the in-match card tracker."""

    def __init__(
        self,
        parent: wx.Window,
        on_toggle_drawn: Callable[[int], None],
        on_show_details: Callable[[str], None],
        on_reset: Callable[[], None],
        on_back: Callable[[], None],
    ) -> None:
        super().__init__(parent)
        self.SetBackgroundColour(DARK_PANEL)

        self._on_toggle_drawn = on_toggle_drawn
        self._on_show_details = on_show_details
        self._on_reset = on_reset
        self._on_back = on_back

        self._build_ui()

    def _build_ui(self) -> None:
        sizer = wx.BoxSizer(wx.VERTICAL)
        self.SetSizer(sizer)

        header = wx.BoxSizer(wx.HORIZONTAL)
        sizer.Add(header, 0, wx.EXPAND | wx.ALL, 6)
        back_btn = wx.Button(self, label="Decks")
        stylize_button(back_btn)
        back_btn.Bind(wx.EVT_BUTTON, lambda _evt: self._on_back())
        header.Add(back_btn, 0, wx.RIGHT, 12)
        self.title_label = wx.StaticText(self, label="")
        stylize_label(self.title_label)
        header.Add(self.title_label, 1, wx.ALIGN_CENTER_VERTICAL)
        self.remaining_label = wx.StaticText(self, label="")
        stylize_label(self.remaining_label)
        header.Add(self.remaining_label, 0, wx.ALIGN_CENTER_VERTICAL)

        in_deck_label = wx.StaticText(self, label="In Deck")
        stylize_label(in_deck_label, subtle=True)
        sizer.Add(in_deck_label, 0, wx.LEFT | wx.TOP, 6)
        self.in_deck_list = _TrackerList(self)
        self.in_deck_list.Bind(wx.EVT_LIST_ITEM_ACTIVATED, lambda _evt: self._toggle_selected(self.in_deck_list))
        sizer.Add(self.in_deck_list, 1, wx.EXPAND | wx.ALL, 6)

        drawn_label = wx.StaticText(self, label="Drawn / Out of Deck")
        stylize_label(drawn_label, subtle=True)
        sizer.Add(drawn_label, 0, wx.LEFT, 6)
        self.drawn_list = _TrackerList(self)
        self.drawn_list.Bind(wx.EVT_LIST_ITEM_ACTIVATED, lambda _evt: self._toggle_selected(self.drawn_list))
        sizer.Add(self.drawn_list, 1, wx.EXPAND | wx.ALL, 6)

        buttons = wx.BoxSizer(wx.HORIZONTAL)
        sizer.Add(buttons, 0, wx.EXPAND | wx.LEFT | wx.RIGHT | wx.BOTTOM, 6)
        draw_btn = wx.Button(self, label="Mark Drawn")
        stylize_button(draw_btn)
        draw_btn.Bind(wx.EVT_BUTTON, lambda _evt: self._toggle_selected(self.in_deck_list))
        buttons.Add(draw_btn, 0, wx.RIGHT, 6)
        return_btn = wx.Button(self, label="Return to Deck")
        stylize_button(return_btn)
        return_btn.Bind(wx.EVT_BUTTON, lambda _evt: self._toggle_selected(self.drawn_list))
        buttons.Add(return_btn, 0, wx.RIGHT, 6)
        details_btn = wx.Button(self, label="Details")
        stylize_button(details_btn)
        details_btn.Bind(wx.EVT_BUTTON, self._on_details_clicked)
        buttons.Add(details_btn, 0)

        self.complete_sizer = wx.BoxSizer(wx.HORIZONTAL)
        sizer.Add(self.complete_sizer, 0, wx.ALIGN_CENTER_HORIZONTAL | wx.ALL, 12)
        self.complete_label = wx.StaticText(self, label="Deck Empty!")
        stylize_label(self.complete_label)
        self.complete_sizer.Add(self.complete_label, 0, wx.ALIGN_CENTER_VERTICAL | wx.RIGHT, 12)
        self.reset_btn = wx.Button(self, label="Reset Tracker")
        stylize_button(self.reset_btn)
        self.reset_btn.Bind(wx.EVT_BUTTON, lambda _evt: self._on_reset())
        self.complete_sizer.Add(self.reset_btn, 0)

    # ============= Public API =============

    def set_session(
        self,
        deck_name: str,
        remaining: int,
        in_deck: list[tuple[int, CardRecord]],
        drawn: list[tuple[int, CardRecord]],
        complete: bool,
    ) -> None:
        self.title_label.SetLabel(deck_name)
        self.remaining_label.SetLabel(f"{remaining} remaining")
        self.in_deck_list.SetEntries(in_deck)
        self.drawn_list.SetEntries(drawn)
        self.complete_sizer.ShowItems(complete)
        self.Layout()

    # ============= Event Handlers =============

    def _toggle_selected(self, source: _TrackerList) -> None:
        entry = source.GetSelectedEntry()
        if entry is not None:
            self._on_toggle_drawn(entry[0])

    def _on_details_clicked(self, _event: wx.CommandEvent) -> None:
        entry = self.in_deck_list.GetSelectedEntry() or self.drawn_list.GetSelectedEntry()
        if entry is not None:
            self._on_show_details(entry[1].id)
