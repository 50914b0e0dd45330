"""Dialog showing the full text of a single card."""

from __future__ import annotations

from typing import TYPE_CHECKING

import wx

from utils.stylize import stylize_button, stylize_label
from utils.ui_constants import DARK_ALT, DARK_BG, DARK_PANEL, GOLD_TEXT, LIGHT_TEXT

if TYPE_CHECKING:
    from repositories.card_repository import CardRecord


class CardDetailDialog(wx.Dialog):
    """Modal overlay with a card's faction, tags, ability, strength and cost."""

    def __init__(self, parent: wx.Window, card: CardRecord) -> None:
        super().__init__(parent, title=card.name, size=(420, 340))
        self.SetBackgroundColour(DARK_BG)

        main_sizer = wx.BoxSizer(wx.VERTICAL)
        self.SetSizer(main_sizer)

        panel = wx.Panel(self)
        panel.SetBackgroundColour(DARK_PANEL)
        panel_sizer = wx.BoxSizer(wx.VERTICAL)
        panel.SetSizer(panel_sizer)
        main_sizer.Add(panel, 1, wx.EXPAND | wx.ALL, 8)

        title = wx.StaticText(panel, label=card.name)
        title.SetForegroundColour(GOLD_TEXT if card.rarity == "gold" else LIGHT_TEXT)
        title.SetFont(title.GetFont().Bold().Larger())
        panel_sizer.Add(title, 0, wx.ALL, 6)

        subtitle = wx.StaticText(panel, label=f"{card.faction} • {card.tags}")
        stylize_label(subtitle, subtle=True)
        panel_sizer.Add(subtitle, 0, wx.LEFT | wx.RIGHT | wx.BOTTOM, 6)

        ability = wx.TextCtrl(
            panel, value=card.ability, style=wx.TE_MULTILINE | wx.TE_READONLY | wx.TE_WORDWRAP
        )
        ability.SetBackgroundColour(DARK_ALT)
        ability.SetForegroundColour(LIGHT_TEXT)
        panel_sizer.Add(ability, 1, wx.EXPAND | wx.ALL, 6)

        stats = wx.BoxSizer(wx.HORIZONTAL)
        for caption, value in (("Strength", card.strength), ("Cost", card.cost)):
            label = wx.StaticText(panel, label=f"{caption}: {value}")
            stylize_label(label)
            stats.Add(label, 1, wx.ALL, 6)
        panel_sizer.Add(stats, 0, wx.EXPAND)

        close_btn = wx.Button(panel, wx.ID_OK, label="Close")
        stylize_button(close_btn)
        panel_sizer.Add(close_btn, 0, wx.ALIGN_RIGHT | wx.ALL, 6)


def show_card_detail_dialog(parent: wx.Window, card: CardRecord) -> None:
    dialog = CardDetailDialog(parent, card)
    try:
        dialog.ShowModal()
    finally:
        dialog.Destroy()
