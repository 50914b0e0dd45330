"""Tests for StoreService JSON persistence helper."""

import json
from pathlib import Path

import pytest

import services.store_service as store_service_module
from services.store_service import InMemoryStoreService, StoreService, get_store_service


@pytest.fixture(autouse=True)
def reset_store_service():
    """Ensure global store service state is reset between tests."""
    store_service_module._default_store_service = None  # type: ignore[attr-defined]
    yield
    store_service_module._default_store_service = None  # type: ignore[attr-defined]


@pytest.fixture
def store_service() -> StoreService:
    """Provide a fresh StoreService instance."""
    return StoreService()


def test_load_store_missing_file_returns_empty_dict(tmp_path: Path, store_service: StoreService):
    """Loading a non-existent store returns an empty dictionary."""
    path = tmp_path / "missing.json"

    result = store_service.load_store(path)

    assert result == {}


def test_load_store_reads_valid_json(tmp_path: Path, store_service: StoreService):
    """Valid JSON payload is loaded into a dictionary."""
    path = tmp_path / "store.json"
    payload = {"custom_decks": [{"id": "1", "name": "Wild Hunt"}], "version": 1}
    path.write_text(json.dumps(payload), encoding="utf-8")

    result = store_service.load_store(path)

    assert result == payload


def test_load_store_returns_empty_on_invalid_json(tmp_path: Path, store_service: StoreService):
    """Invalid JSON is ignored and returns an empty dict."""
    path = tmp_path / "corrupt.json"
    path.write_text("{bad json", encoding="utf-8")

    result = store_service.load_store(path)

    assert result == {}


def test_load_store_ignores_non_object_payload(tmp_path: Path, store_service: StoreService):
    """A JSON list at the top level is not a store."""
    path = tmp_path / "list.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")

    assert store_service.load_store(path) == {}


def test_load_store_handles_oserror(monkeypatch, tmp_path: Path, store_service: StoreService):
    """OS errors while reading a store fallback to an empty dict."""
    path = tmp_path / "store.json"
    path.write_text("{}", encoding="utf-8")

    def fake_read_text(self, *args, **kwargs):  # pylint: disable=unused-argument
        raise OSError("boom")

    monkeypatch.setattr(type(path), "read_text", fake_read_text)

    result = store_service.load_store(path)

    assert result == {}


def test_save_store_writes_json_payload(tmp_path: Path, store_service: StoreService):
    """save_store creates parent directories and writes JSON data."""
    target = tmp_path / "nested" / "store.json"
    data = {"custom_decks": [{"id": "1700000000000", "name": "Skellige Discard", "cardIds": ["s_unit"]}]}

    store_service.save_store(target, data)

    assert target.exists()
    contents = json.loads(target.read_text(encoding="utf-8"))
    assert contents == data


def test_save_store_keeps_non_ascii_text(tmp_path: Path, store_service: StoreService):
    """Deck names with accents are written as-is."""
    target = tmp_path / "store.json"

    store_service.save_store(target, {"name": "Scoia'tael Ólaf"})

    assert "Ólaf" in target.read_text(encoding="utf-8")


def test_save_store_logs_oserror(monkeypatch, tmp_path: Path, store_service: StoreService):
    """Write failures are logged instead of raised."""
    target = tmp_path / "store.json"

    def fake_write_text(self, *args, **kwargs):  # pylint: disable=unused-argument
        raise OSError("disk full")

    monkeypatch.setattr(type(target), "write_text", fake_write_text)

    store_service.save_store(target, {"a": 1})

    assert not target.exists()


def test_get_store_service_returns_singleton():
    """get_store_service caches the StoreService instance."""
    first = get_store_service()
    second = get_store_service()

    assert first is second


# ============= In-memory store =============


def test_in_memory_store_round_trips_without_sharing_state():
    """Loaded payloads are copies; mutating them does not touch the store."""
    store = InMemoryStoreService()
    path = Path("memory") / "decks.json"
    store.save_store(path, {"custom_decks": []})

    loaded = store.load_store(path)
    loaded["custom_decks"].append({"id": "x"})

    assert store.load_store(path) == {"custom_decks": []}


def test_in_memory_store_seeded_from_initial_payload():
    store = InMemoryStoreService({"a.json": {"key": 1}})

    assert store.load_store(Path("a.json")) == {"key": 1}
    assert store.load_store(Path("b.json")) == {}
