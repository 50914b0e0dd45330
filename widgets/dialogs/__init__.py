"""Dialog windows for the companion application."""

from widgets.dialogs.card_detail_dialog import CardDetailDialog, show_card_detail_dialog

__all__ = [
    "CardDetailDialog",
    "show_card_detail_dialog",
]
