"""Handler mixins for widgets."""

from widgets.handlers.app_event_handlers import AppEventHandlers

__all__ = [
    "AppEventHandlers",
]
