from typing import TYPE_CHECKING

import wx

if TYPE_CHECKING:
    from controllers.app_controller import AppController

from utils.constants import APP_NAME, VIEW_OPTIONS, VIEW_TITLES
from utils.stylize import stylize_button
from utils.ui_constants import DARK_BG, DARK_PANEL, LIGHT_TEXT
from widgets.handlers.app_event_handlers import AppEventHandlers
from widgets.panels.builder_panel import BuilderPanel
from widgets.panels.deck_library_panel import DeckLibraryPanel
from widgets.panels.tracker_panel import TrackerPanel


class AppFrame(AppEventHandlers, wx.Frame):
    """wxPython deck builder, deck library and match tracker."""

    def __init__(
        self,
        controller: "AppController",
        parent: wx.Window | None = None,
    ):
        super().__init__(parent, title=APP_NAME, size=(760, 860))

        # Store controller reference - ALL state and business logic goes through this
        self.controller: AppController = controller
        self.stack: wx.Simplebook | None = None
        self.builder_panel: BuilderPanel | None = None
        self.library_panel: DeckLibraryPanel | None = None
        self.tracker_panel: TrackerPanel | None = None

        self._build_ui()
        self.SetMinSize((640, 640))
        self.Centre(wx.BOTH)

        self.Bind(wx.EVT_CLOSE, self.on_close)
        self.show_view(self.controller.view)

    # ------------------------------------------------------------------ UI ------------------------------------------------------------------
    def _build_ui(self) -> None:
        """Build the main UI structure."""
        self.SetBackgroundColour(DARK_BG)
        self._setup_status_bar()

        root_panel = wx.Panel(self)
        root_panel.SetBackgroundColour(DARK_BG)
        root_sizer = wx.BoxSizer(wx.VERTICAL)
        root_panel.SetSizer(root_sizer)

        self.stack = wx.Simplebook(root_panel)
        self.stack.SetBackgroundColour(DARK_PANEL)
        root_sizer.Add(self.stack, 1, wx.EXPAND | wx.ALL, 10)

        self.builder_panel = BuilderPanel(
            parent=self.stack,
            factions=self.controller.factions(),
            on_name_changed=self.on_name_changed,
            on_faction_changed=self.on_faction_changed,
            on_shared_pool_changed=self.on_shared_pool_changed,
            on_search_changed=self.on_search_changed,
            on_only_in_deck_toggled=self.on_only_in_deck_toggled,
            on_add_card=self.on_add_card,
            on_remove_card=self.on_remove_card,
            on_save=self.on_save_deck,
        )
        self.stack.AddPage(self.builder_panel, VIEW_TITLES["builder"])

        self.library_panel = DeckLibraryPanel(
            parent=self.stack,
            on_new_deck=self.on_new_deck,
            on_track_deck=self.on_track_deck,
            on_edit_deck=self.on_edit_deck,
            on_delete_deck=self.on_delete_deck,
        )
        self.stack.AddPage(self.library_panel, VIEW_TITLES["decks"])

        self.tracker_panel = TrackerPanel(
            parent=self.stack,
            on_toggle_drawn=self.on_toggle_drawn,
            on_show_details=self.on_show_card_details,
            on_reset=self.on_reset_tracker,
            on_back=lambda: self.on_navigate("decks"),
        )
        self.stack.AddPage(self.tracker_panel, VIEW_TITLES["tracker"])

        nav = wx.BoxSizer(wx.HORIZONTAL)
        root_sizer.Add(nav, 0, wx.EXPAND | wx.LEFT | wx.RIGHT | wx.BOTTOM, 10)
        for view in VIEW_OPTIONS:
            btn = wx.Button(root_panel, label=VIEW_TITLES[view])
            stylize_button(btn)
            btn.Bind(wx.EVT_BUTTON, lambda _evt, v=view: self.on_navigate(v))
            nav.Add(btn, 1, wx.RIGHT, 6)

    def _setup_status_bar(self) -> None:
        self.status_bar = self.CreateStatusBar()
        self.status_bar.SetBackgroundColour(DARK_PANEL)
        self.status_bar.SetForegroundColour(LIGHT_TEXT)
        self._set_status("Ready")

    def _set_status(self, message: str) -> None:
        if self.status_bar:
            self.status_bar.SetStatusText(message)

    # ------------------------------------------------------------------ Rendering ------------------------------------------------------------------
    def show_view(self, view: str) -> None:
        if view == "builder":
            self.refresh_builder()
        elif view == "decks":
            self.refresh_library()
        else:
            self.refresh_tracker()
        self.stack.ChangeSelection(VIEW_OPTIONS.index(view))

    def refresh_builder(self, cards: bool = True) -> None:
        controller = self.controller
        draft = controller.draft
        self.builder_panel.set_deck(draft.name, draft.faction)
        self.builder_panel.set_shared_pool_options(
            [(deck.id, deck.name) for deck in controller.shared_pool_options()],
            controller.shared_pool_id,
        )
        self.builder_panel.set_validation(controller.validation(), controller.save_label())
        if cards:
            self.builder_panel.set_cards(controller.builder_cards())

    def refresh_library(self) -> None:
        self.library_panel.set_decks(self.controller.decks)

    def refresh_tracker(self) -> None:
        session = self.controller.tracker_session
        if session is None:
            return
        self.tracker_panel.set_session(
            deck_name=session.deck.name,
            remaining=session.remaining,
            in_deck=self.controller.tracker_in_deck(),
            drawn=self.controller.tracker_drawn(),
            complete=session.is_complete,
        )
