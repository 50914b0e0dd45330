"""
Services package - Business logic layer.

This package exposes business services while avoiding heavy imports at module load time.
"""

from importlib import import_module
from typing import Any

__all__ = [
    "AppSettings",
    "DeckService",
    "DeckStats",
    "DeckValidation",
    "InMemoryStoreService",
    "SearchService",
    "StateService",
    "StoreService",
    "TrackerService",
    "TrackerSession",
    "get_deck_service",
    "get_search_service",
    "get_store_service",
    "get_tracker_service",
]

_LAZY_MODULES = {
    "DeckService": "services.deck_service",
    "DeckStats": "services.deck_service",
    "DeckValidation": "services.deck_service",
    "get_deck_service": "services.deck_service",
    "SearchService": "services.search_service",
    "get_search_service": "services.search_service",
    "AppSettings": "services.state_service",
    "StateService": "services.state_service",
    "InMemoryStoreService": "services.store_service",
    "StoreService": "services.store_service",
    "get_store_service": "services.store_service",
    "TrackerService": "services.tracker_service",
    "TrackerSession": "services.tracker_service",
    "get_tracker_service": "services.tracker_service",
}


def __getattr__(name: str) -> Any:
    if name in _LAZY_MODULES:
        module = import_module(_LAZY_MODULES[name])
        value = getattr(module, name)
        globals()[name] = value
        return value

    raise AttributeError(f"module 'services' has no attribute '{name}'")
