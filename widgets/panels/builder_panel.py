from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import wx

from utils.constants import COST_LIMIT, DECK_SIZE_LIMIT, LEADER_COUNT_REQUIRED, MIN_UNIT_COUNT
from utils.stylize import (
    stylize_button,
    stylize_choice,
    stylize_indicator,
    stylize_label,
    stylize_listctrl,
    stylize_textctrl,
    stylize_toggle,
)
from utils.ui_constants import DARK_PANEL

if TYPE_CHECKING:
    from controllers.app_controller import CatalogEntry
    from services.deck_service import DeckValidation

_COLUMNS = (("Card", 210), ("Cost", 50), ("Str", 45), ("Rarity", 70), ("Tags", 170), ("In deck", 70))


class _CatalogListView(wx.ListCtrl):
    """Virtual ListCtrl showing the filtered catalog with per-card copy counts."""

    def __init__(self, parent: wx.Window):
        super().__init__(parent, style=wx.LC_REPORT | wx.LC_VIRTUAL | wx.LC_SINGLE_SEL)
        self._data: list[CatalogEntry] = []
        for index, (title, width) in enumerate(_COLUMNS):
            self.InsertColumn(index, title, width=width)

    def SetData(self, data: list[CatalogEntry]) -> None:
        """Set the data source and refresh the display."""
        self._data = data
        self.SetItemCount(len(data))
        self.Refresh()

    def GetEntry(self, item: int) -> CatalogEntry | None:
        if item < 0 or item >= len(self._data):
            return None
        return self._data[item]

    def OnGetItemText(self, item: int, column: int) -> str:
        """Return text for the given item and column."""
        entry = self.GetEntry(item)
        if entry is None:
            return ""
        card = entry.card
        if column == 0:
            return card.name
        if column == 1:
            return str(card.cost)
        if column == 2:
            return str(card.strength)
        if column == 3:
            return card.rarity
        if column == 4:
            return card.tags
        if column == 5:
            return f"{entry.count}{' (max)' if entry.at_limit else ''}"
        return ""


class BuilderPanel(wx.Panel):
    """Deck builder: deck settings, rule indicators and the catalog list."""

    def __init__(
        self,
        parent: wx.Window,
        factions: list[str],
        on_name_changed: Callable[[str], None],
        on_faction_changed: Callable[[str], None],
        on_shared_pool_changed: Callable[[str | None], None],
        on_search_changed: Callable[[str], None],
        on_only_in_deck_toggled: Callable[[bool], None],
        on_add_card: Callable[[str], None],
        on_remove_card: Callable[[str], None],
        on_save: Callable[[], None],
    ) -> None:
        super().__init__(parent)

        self.factions = factions
        self._on_name_changed = on_name_changed
        self._on_faction_changed = on_faction_changed
        self._on_shared_pool_changed = on_shared_pool_changed
        self._on_search_changed = on_search_changed
        self._on_only_in_deck_toggled = on_only_in_deck_toggled
        self._on_add_card = on_add_card
        self._on_remove_card = on_remove_card
        self._on_save = on_save

        self._pool_ids: list[str | None] = [None]

        self._build_ui()

    def _build_ui(self) -> None:
        self.SetBackgroundColour(DARK_PANEL)
        sizer = wx.BoxSizer(wx.VERTICAL)
        self.SetSizer(sizer)

        # Deck settings
        header = wx.BoxSizer(wx.HORIZONTAL)
        sizer.Add(header, 0, wx.EXPAND | wx.ALL, 6)

        name_label = wx.StaticText(self, label="Deck name")
        stylize_label(name_label, subtle=True)
        header.Add(name_label, 0, wx.ALIGN_CENTER_VERTICAL | wx.RIGHT, 6)
        self.name_ctrl = wx.TextCtrl(self)
        self.name_ctrl.SetHint("Enter deck name...")
        stylize_textctrl(self.name_ctrl)
        self.name_ctrl.Bind(wx.EVT_TEXT, lambda _evt: self._on_name_changed(self.name_ctrl.GetValue()))
        header.Add(self.name_ctrl, 1, wx.RIGHT, 6)

        self.save_btn = wx.Button(self, label="Save")
        stylize_button(self.save_btn)
        self.save_btn.Bind(wx.EVT_BUTTON, lambda _evt: self._on_save())
        header.Add(self.save_btn, 0)

        selectors = wx.BoxSizer(wx.HORIZONTAL)
        sizer.Add(selectors, 0, wx.EXPAND | wx.LEFT | wx.RIGHT | wx.BOTTOM, 6)

        faction_label = wx.StaticText(self, label="Faction")
        stylize_label(faction_label, subtle=True)
        selectors.Add(faction_label, 0, wx.ALIGN_CENTER_VERTICAL | wx.RIGHT, 6)
        self.faction_choice = wx.Choice(self, choices=[f.replace("_", " ").title() for f in self.factions])
        stylize_choice(self.faction_choice)
        self.faction_choice.Bind(wx.EVT_CHOICE, self._on_faction_choice)
        selectors.Add(self.faction_choice, 1, wx.RIGHT, 12)

        pool_label = wx.StaticText(self, label="Shared pool with")
        stylize_label(pool_label, subtle=True)
        selectors.Add(pool_label, 0, wx.ALIGN_CENTER_VERTICAL | wx.RIGHT, 6)
        self.pool_choice = wx.Choice(self, choices=["None"])
        stylize_choice(self.pool_choice)
        self.pool_choice.Bind(wx.EVT_CHOICE, self._on_pool_choice)
        selectors.Add(self.pool_choice, 1)

        # Rule indicators
        indicators = wx.BoxSizer(wx.HORIZONTAL)
        sizer.Add(indicators, 0, wx.EXPAND | wx.LEFT | wx.RIGHT | wx.BOTTOM, 6)
        self.cards_indicator = wx.StaticText(self, label="")
        self.leader_indicator = wx.StaticText(self, label="")
        self.units_indicator = wx.StaticText(self, label="")
        self.cost_indicator = wx.StaticText(self, label="")
        for indicator in (
            self.cards_indicator,
            self.leader_indicator,
            self.units_indicator,
            self.cost_indicator,
        ):
            indicators.Add(indicator, 1, wx.ALIGN_CENTER_VERTICAL)

        self.blockers_label = wx.StaticText(self, label="")
        stylize_label(self.blockers_label, subtle=True)
        sizer.Add(self.blockers_label, 0, wx.LEFT | wx.RIGHT | wx.BOTTOM, 6)

        # Search and filter
        search_row = wx.BoxSizer(wx.HORIZONTAL)
        sizer.Add(search_row, 0, wx.EXPAND | wx.LEFT | wx.RIGHT | wx.BOTTOM, 6)
        self.only_in_deck_btn = wx.ToggleButton(self, label="Only in deck")
        stylize_toggle(self.only_in_deck_btn)
        self.only_in_deck_btn.Bind(wx.EVT_TOGGLEBUTTON, self._on_only_in_deck)
        search_row.Add(self.only_in_deck_btn, 0, wx.RIGHT, 6)
        self.search_ctrl = wx.SearchCtrl(self)
        self.search_ctrl.SetDescriptiveText("Search name, tags, ability...")
        self.search_ctrl.Bind(wx.EVT_TEXT, lambda _evt: self._on_search_changed(self.search_ctrl.GetValue()))
        search_row.Add(self.search_ctrl, 1)

        # Catalog list
        self.catalog_list = _CatalogListView(self)
        stylize_listctrl(self.catalog_list)
        self.catalog_list.Bind(wx.EVT_LIST_ITEM_ACTIVATED, self._on_item_activated)
        sizer.Add(self.catalog_list, 1, wx.EXPAND | wx.LEFT | wx.RIGHT, 6)

        buttons = wx.BoxSizer(wx.HORIZONTAL)
        sizer.Add(buttons, 0, wx.EXPAND | wx.ALL, 6)
        self.remove_btn = wx.Button(self, label="−")
        stylize_button(self.remove_btn)
        self.remove_btn.Bind(wx.EVT_BUTTON, lambda _evt: self._with_selected(self._on_remove_card))
        buttons.Add(self.remove_btn, 0, wx.RIGHT, 6)
        self.add_btn = wx.Button(self, label="+")
        stylize_button(self.add_btn)
        self.add_btn.Bind(wx.EVT_BUTTON, lambda _evt: self._with_selected(self._on_add_card))
        buttons.Add(self.add_btn, 0)
        self.catalog_list.Bind(wx.EVT_LIST_ITEM_SELECTED, lambda _evt: self._sync_add_button())

    # ============= Public API =============

    def set_deck(self, name: str, faction: str) -> None:
        if self.name_ctrl.GetValue() != name:
            self.name_ctrl.ChangeValue(name)
        if faction in self.factions:
            self.faction_choice.SetSelection(self.factions.index(faction))

    def set_shared_pool_options(self, options: list[tuple[str, str]], selected_id: str | None) -> None:
        """Fill the shared pool choice with (deck id, deck name) pairs."""
        self._pool_ids = [None] + [deck_id for deck_id, _ in options]
        self.pool_choice.SetItems(["None"] + [name for _, name in options])
        selection = self._pool_ids.index(selected_id) if selected_id in self._pool_ids else 0
        self.pool_choice.SetSelection(selection)

    def set_validation(self, validation: DeckValidation, save_label: str) -> None:
        stats = validation.stats
        self.cards_indicator.SetLabel(f"Cards {stats.card_count} / {DECK_SIZE_LIMIT}")
        stylize_indicator(self.cards_indicator, validation.size_level)
        self.leader_indicator.SetLabel(f"Leader {stats.leader_count} / {LEADER_COUNT_REQUIRED}")
        stylize_indicator(self.leader_indicator, validation.leader_level)
        self.units_indicator.SetLabel(f"Units {stats.unit_count} / {MIN_UNIT_COUNT}+")
        stylize_indicator(self.units_indicator, validation.unit_level)
        self.cost_indicator.SetLabel(f"Cost {stats.total_cost} / {COST_LIMIT}")
        stylize_indicator(self.cost_indicator, validation.cost_level)
        self.blockers_label.SetLabel("  •  ".join(validation.blockers))
        self.save_btn.SetLabel(save_label)
        self.save_btn.Enable(validation.is_saveable)
        self.Layout()

    def set_cards(self, entries: list[CatalogEntry]) -> None:
        self.catalog_list.SetData(entries)
        self._sync_add_button()

    # ============= Event Handlers =============

    def _selected_entry(self) -> CatalogEntry | None:
        return self.catalog_list.GetEntry(self.catalog_list.GetFirstSelected())

    def _with_selected(self, callback: Callable[[str], None]) -> None:
        entry = self._selected_entry()
        if entry is not None:
            callback(entry.card.id)

    def _sync_add_button(self) -> None:
        entry = self._selected_entry()
        self.add_btn.Enable(entry is not None and not entry.at_limit)
        self.remove_btn.Enable(entry is not None and entry.count > 0)

    def _on_item_activated(self, event: wx.ListEvent) -> None:
        entry = self.catalog_list.GetEntry(event.GetIndex())
        if entry is not None and not entry.at_limit:
            self._on_add_card(entry.card.id)

    def _on_faction_choice(self, _event: wx.CommandEvent) -> None:
        index = self.faction_choice.GetSelection()
        if 0 <= index < len(self.factions):
            self._on_faction_changed(self.factions[index])

    def _on_pool_choice(self, _event: wx.CommandEvent) -> None:
        index = self.pool_choice.GetSelection()
        self._on_shared_pool_changed(self._pool_ids[index] if 0 <= index < len(self._pool_ids) else None)

    def _on_only_in_deck(self, _event: wx.CommandEvent) -> None:
        stylize_toggle(self.only_in_deck_btn)
        self._on_only_in_deck_toggled(self.only_in_deck_btn.GetValue())
