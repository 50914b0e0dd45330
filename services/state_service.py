from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable

from loguru import logger

from services.store_service import StoreService, get_store_service
from utils.constants import DEFAULT_FACTION, DEFAULT_VIEW, SETTINGS_FILE, VIEW_OPTIONS


@dataclass
class AppSettings:
    """User preferences restored at startup."""

    last_view: str = DEFAULT_VIEW
    builder_faction: str = DEFAULT_FACTION


class StateService:
    """Loads and persists application preferences."""

    def __init__(
        self,
        settings_path: Path | None = None,
        store_service: StoreService | None = None,
    ) -> None:
        self.settings_path = settings_path or SETTINGS_FILE
        self.store_service = store_service or get_store_service()

    def load(self) -> dict[str, Any]:
        return self.store_service.load_store(self.settings_path)

    def save(self, data: dict[str, Any]) -> None:
        self.store_service.save_store(self.settings_path, data)

    def build_settings(
        self,
        data: dict[str, Any],
        *,
        factions: Iterable[str] = (),
        default_view: str = DEFAULT_VIEW,
        default_faction: str = DEFAULT_FACTION,
    ) -> AppSettings:
        """Coerce persisted preferences, falling back to defaults for unknown values."""
        view = data.get("last_view", default_view)
        if view not in VIEW_OPTIONS:
            logger.debug(f"Ignoring unknown saved view {view!r}")
            view = default_view

        known_factions = set(factions)
        faction = data.get("builder_faction", default_faction)
        if known_factions and faction not in known_factions:
            logger.debug(f"Ignoring unknown saved faction {faction!r}")
            faction = default_faction

        return AppSettings(last_view=view, builder_faction=faction)

    def load_settings(self, factions: Iterable[str] = ()) -> AppSettings:
        return self.build_settings(self.load(), factions=factions)

    def save_settings(self, settings: AppSettings) -> None:
        data = self.load()
        data["last_view"] = settings.last_view
        data["builder_faction"] = settings.builder_faction
        self.save(data)


__all__ = ["AppSettings", "StateService"]
