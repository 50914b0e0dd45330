"""Reusable UI panels for the companion application."""

from widgets.panels.builder_panel import BuilderPanel
from widgets.panels.deck_library_panel import DeckLibraryPanel
from widgets.panels.tracker_panel import TrackerPanel

__all__ = [
    "BuilderPanel",
    "DeckLibraryPanel",
    "TrackerPanel",
]
