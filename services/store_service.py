"""Utility service for simple JSON-backed key/value stores."""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any

from loguru import logger


class StoreService:
    """Service that reads and writes lightweight JSON stores."""

    def load_store(self, path: Path) -> dict[str, Any]:
        """
        Load JSON data from the given path.

        Args:
            path: Path to the JSON store

        Returns:
            Dictionary payload (empty dict if unreadable)
        """
        if not path.exists():
            return {}
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError:
            logger.warning(f"Invalid JSON at {path}; ignoring store")
            return {}
        except OSError as exc:
            logger.warning(f"Failed to read {path}: {exc}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Store at {path} is not a JSON object; ignoring store")
            return {}
        return data

    def save_store(self, path: Path, data: dict[str, Any]) -> None:
        """
        Persist JSON data to the given path.

        Args:
            path: Path to write
            data: Dictionary payload
        """
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
        except OSError as exc:
            logger.warning(f"Failed to write {path}: {exc}")


class InMemoryStoreService(StoreService):
    """StoreService variant that keeps every store in memory instead of on disk."""

    def __init__(self, initial: dict[Path, dict[str, Any]] | None = None) -> None:
        self._stores: dict[Path, dict[str, Any]] = {
            Path(path): copy.deepcopy(data) for path, data in (initial or {}).items()
        }

    def load_store(self, path: Path) -> dict[str, Any]:
        return copy.deepcopy(self._stores.get(Path(path), {}))

    def save_store(self, path: Path, data: dict[str, Any]) -> None:
        self._stores[Path(path)] = copy.deepcopy(data)


_default_store_service: StoreService | None = None


def get_store_service() -> StoreService:
    """Return a shared StoreService instance."""
    global _default_store_service
    if _default_store_service is None:
        _default_store_service = StoreService()
    return _default_store_service


def reset_store_service() -> None:
    global _default_store_service
    _default_store_service = None
