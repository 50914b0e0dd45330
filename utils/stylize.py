import wx

from utils.ui_constants import (
    DARK_ACCENT,
    DARK_ALT,
    DARK_BG,
    DARK_PANEL,
    LEVEL_COLOURS,
    LIGHT_TEXT,
    SUBDUED_TEXT,
)


def stylize_label(label: wx.StaticText, subtle: bool = False) -> None:
    label.SetForegroundColour(SUBDUED_TEXT if subtle else LIGHT_TEXT)
    label.SetBackgroundColour(DARK_PANEL if subtle else DARK_BG)
    font = label.GetFont()
    if not subtle:
        font.MakeBold()
    label.SetFont(font)


def stylize_indicator(label: wx.StaticText, level: str) -> None:
    """Colour a status bar indicator according to its validation level."""
    label.SetForegroundColour(LEVEL_COLOURS.get(level, LIGHT_TEXT))
    font = label.GetFont()
    font.MakeBold()
    label.SetFont(font)


def stylize_textctrl(ctrl: wx.TextCtrl) -> None:
    ctrl.SetBackgroundColour(DARK_ALT)
    ctrl.SetForegroundColour(LIGHT_TEXT)


def stylize_choice(ctrl: wx.Choice) -> None:
    ctrl.SetBackgroundColour(DARK_ALT)
    ctrl.SetForegroundColour(LIGHT_TEXT)


def stylize_listctrl(ctrl: wx.ListCtrl) -> None:
    ctrl.SetBackgroundColour(DARK_ALT)
    ctrl.SetTextColour(LIGHT_TEXT)
    if hasattr(ctrl, "SetHighlightColour"):
        ctrl.SetHighlightColour(DARK_ACCENT)


def stylize_button(button: wx.Button) -> None:
    button.SetBackgroundColour(DARK_ACCENT)
    button.SetForegroundColour(wx.Colour(12, 14, 18))
    font = button.GetFont()
    font.MakeBold()
    button.SetFont(font)


def stylize_toggle(button: wx.ToggleButton) -> None:
    active = button.GetValue()
    button.SetBackgroundColour(DARK_ACCENT if active else DARK_ALT)
    button.SetForegroundColour(wx.Colour(12, 14, 18) if active else SUBDUED_TEXT)
