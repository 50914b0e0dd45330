"""UI-specific constants shared across widgets."""

import wx

SUBDUED_TEXT = wx.Colour(185, 191, 202)
DARK_BG = wx.Colour(26, 20, 16)
DARK_PANEL = wx.Colour(41, 32, 25)
DARK_ALT = wx.Colour(56, 44, 34)
DARK_ACCENT = wx.Colour(16, 150, 105)
LIGHT_TEXT = wx.Colour(240, 232, 214)
GOLD_TEXT = wx.Colour(245, 200, 95)

# Status bar indicator colours keyed by the levels DeckValidation reports
LEVEL_COLOURS = {
    "ok": wx.Colour(80, 210, 150),
    "warn": wx.Colour(245, 170, 60),
    "under": wx.Colour(245, 170, 60),
    "over": wx.Colour(240, 100, 100),
    "neutral": wx.Colour(240, 232, 214),
}

__all__ = [
    "SUBDUED_TEXT",
    "DARK_BG",
    "DARK_PANEL",
    "DARK_ALT",
    "DARK_ACCENT",
    "LIGHT_TEXT",
    "GOLD_TEXT",
    "LEVEL_COLOURS",
]
