"""Tests for AppController, the state holder behind the companion window."""

from pathlib import Path

import pytest

from controllers.app_controller import AppController, get_app_controller, reset_app_controller
from repositories.deck_repository import Deck
from services.state_service import AppSettings, StateService
from services.store_service import InMemoryStoreService

SETTINGS_PATH = Path("memory") / "settings.json"


@pytest.fixture
def state_service() -> StateService:
    return StateService(settings_path=SETTINGS_PATH, store_service=InMemoryStoreService())


@pytest.fixture
def controller(card_repo, deck_repo, state_service) -> AppController:
    return AppController(card_repository=card_repo, deck_repository=deck_repo, state_service=state_service)


def _build_saveable(controller, name="Test"):
    controller.set_deck_name(name)
    assert controller.add_card("m_leader")
    assert controller.add_card("c1")
    assert controller.add_card("c1")


def _save_deck(deck_repo, name, faction, card_ids, now_ms):
    return deck_repo.save_deck(Deck(name=name, faction=faction, card_ids=card_ids), now_ms=now_ms)


# ============= Startup =============


def test_initial_state(controller):
    """A fresh controller edits a blank deck of the first faction."""
    assert controller.view == "builder"
    assert controller.draft.name == ""
    assert controller.draft.faction == "monster"
    assert controller.draft.card_ids == []
    assert controller.decks == []
    assert controller.shared_pool_id is None
    assert controller.tracker_session is None
    assert controller.save_label() == "Save"


def test_saved_settings_restore_view_and_faction(card_repo, deck_repo, state_service):
    state_service.save_settings(AppSettings(last_view="decks", builder_faction="skellige"))

    controller = AppController(card_repository=card_repo, deck_repository=deck_repo, state_service=state_service)

    assert controller.view == "decks"
    assert controller.draft.faction == "skellige"


def test_saved_tracker_view_restores_library(card_repo, deck_repo, state_service):
    """Tracker sessions are not persisted, so the tracker view cannot be restored."""
    state_service.save_settings(AppSettings(last_view="tracker", builder_faction="monster"))

    controller = AppController(card_repository=card_repo, deck_repository=deck_repo, state_service=state_service)

    assert controller.view == "decks"


def test_save_settings_records_view(controller, state_service):
    controller.navigate("decks")
    controller.set_deck_faction("skellige")

    controller.save_settings()

    data = state_service.load()
    assert data["last_view"] == "decks"
    assert data["builder_faction"] == "skellige"


# ============= Builder =============


def test_save_flow_example(controller, deck_repo):
    """Leader plus two copies of a bronze unit saves and lands in the library."""
    _build_saveable(controller)

    assert controller.can_save()
    stored = controller.save_deck()

    assert stored is not None
    assert stored.card_ids == ["m_leader", "c1", "c1"]
    assert [deck.name for deck in controller.decks] == ["Test"]
    assert controller.view == "decks"
    assert deck_repo.load()[0].id == stored.id


def test_save_blocked_without_name(controller, deck_repo):
    controller.add_card("m_leader")

    assert not controller.can_save()
    assert controller.save_deck() is None
    assert deck_repo.load() == []
    assert controller.view == "builder"


def test_second_save_updates_in_place(controller, deck_repo):
    """After the first save the draft keeps its id, so saving again updates the entry."""
    _build_saveable(controller)
    first = controller.save_deck()

    assert controller.save_label() == "Update"
    controller.set_deck_name("Renamed")
    second = controller.save_deck()

    assert second.id == first.id
    assert [deck.name for deck in deck_repo.get_decks()] == ["Renamed"]


def test_edit_then_save_updates_existing(controller, deck_repo):
    saved = _save_deck(deck_repo, "Original", "monster", ["m_leader", "c1"], now_ms=10)
    controller.refresh_decks()

    draft = controller.edit_deck(saved.id)
    assert draft is controller.draft
    assert controller.view == "builder"
    controller.add_card("m_gold")
    controller.save_deck()

    decks = deck_repo.get_decks()
    assert len(decks) == 1
    assert decks[0].card_ids == ["m_leader", "c1", "m_gold"]
    assert decks[0].created_at == 10


def test_edit_missing_deck(controller):
    assert controller.edit_deck("missing") is None
    assert controller.view == "builder"


def test_edit_does_not_mutate_library_until_saved(controller, deck_repo):
    saved = _save_deck(deck_repo, "Original", "monster", ["m_leader"], now_ms=1)
    controller.refresh_decks()

    controller.edit_deck(saved.id)
    controller.add_card("c1")

    assert controller.decks[0].card_ids == ["m_leader"]
    assert deck_repo.get_deck(saved.id).card_ids == ["m_leader"]


def test_new_deck_resets_draft(controller):
    _build_saveable(controller)
    controller.navigate("decks")

    controller.new_deck()

    assert controller.draft.card_ids == []
    assert controller.draft.id is None
    assert controller.view == "builder"


def test_faction_change_clears_cards(controller):
    controller.add_card("c1")

    controller.set_deck_faction("skellige")

    assert controller.draft.card_ids == []
    assert controller.settings.builder_faction == "skellige"


def test_unknown_card_is_not_added(controller):
    assert not controller.add_card("ghost")
    assert controller.draft.card_ids == []


def test_remove_card(controller):
    controller.add_card("c1")
    controller.add_card("m_leader")
    controller.add_card("c1")

    assert controller.remove_card("c1")

    assert controller.draft.card_ids == ["c1", "m_leader"]


def test_builder_cards_reports_counts_and_limits(controller):
    controller.add_card("m_gold")
    controller.add_card("c1")

    entries = {entry.card.id: entry for entry in controller.builder_cards()}

    assert entries["m_gold"].count == 1
    assert entries["m_gold"].at_limit
    assert entries["c1"].count == 1
    assert not entries["c1"].at_limit
    assert "s_unit" not in entries


def test_builder_cards_search_and_only_in_deck(controller):
    controller.add_card("c1")
    controller.set_search_query("nekker")

    assert [entry.card.id for entry in controller.builder_cards()] == ["c1"]

    controller.set_search_query("")
    controller.set_only_in_deck(True)

    assert [entry.card.id for entry in controller.builder_cards()] == ["c1"]


# ============= Shared Pool =============


def test_shared_pool_limits_neutral_copies(controller, deck_repo):
    """A neutral bronze used once by the linked deck can be added only once more."""
    peer = _save_deck(deck_repo, "Skellige", "skellige", ["s_leader", "n_bronze"], now_ms=1)
    controller.refresh_decks()

    assert controller.set_shared_pool(peer.id)
    assert controller.add_card("n_bronze")
    assert not controller.add_card("n_bronze")

    entry = next(e for e in controller.builder_cards() if e.card.id == "n_bronze")
    assert entry.at_limit


def test_shared_pool_rejects_same_faction(controller, deck_repo):
    same = _save_deck(deck_repo, "Monsters", "monster", ["m_leader"], now_ms=1)
    controller.refresh_decks()

    assert controller.shared_pool_options() == []
    assert not controller.set_shared_pool(same.id)
    assert controller.shared_pool_id is None


def test_shared_pool_link_ignored_after_faction_change(controller, deck_repo):
    """A link to a deck that now shares the draft's faction no longer counts."""
    peer = _save_deck(deck_repo, "Skellige", "skellige", ["n_gold"], now_ms=1)
    controller.refresh_decks()
    controller.set_shared_pool(peer.id)

    controller.set_deck_faction("skellige")

    assert controller.shared_pool_deck() is None
    assert controller.add_card("n_gold")


def test_shared_pool_link_cleared_when_peer_deleted(controller, deck_repo):
    peer = _save_deck(deck_repo, "Skellige", "skellige", ["n_gold"], now_ms=1)
    controller.refresh_decks()
    controller.set_shared_pool(peer.id)

    assert controller.delete_deck(peer.id)

    assert controller.shared_pool_id is None
    assert controller.shared_pool_deck() is None


def test_shared_pool_cleared_by_none(controller, deck_repo):
    peer = _save_deck(deck_repo, "Skellige", "skellige", [], now_ms=1)
    controller.refresh_decks()
    controller.set_shared_pool(peer.id)

    assert controller.set_shared_pool(None)
    assert controller.shared_pool_id is None


# ============= Library =============


def test_delete_deck_updates_library(controller, deck_repo):
    first = _save_deck(deck_repo, "One", "monster", ["m_leader"], now_ms=1)
    _save_deck(deck_repo, "Two", "skellige", ["s_leader"], now_ms=2)
    controller.refresh_decks()

    assert controller.delete_deck(first.id)

    assert [deck.name for deck in controller.decks] == ["Two"]
    assert not controller.delete_deck(first.id)


# ============= Tracker =============


def test_start_tracking_and_navigate_away_discards_session(controller, deck_repo):
    saved = _save_deck(deck_repo, "Track", "monster", ["m_leader", "c1", "c1"], now_ms=1)

    session = controller.start_tracking(saved.id)

    assert controller.view == "tracker"
    assert session.remaining == 2
    assert controller.toggle_drawn(1)
    assert [index for index, _ in controller.tracker_in_deck()] == [2]
    assert [index for index, _ in controller.tracker_drawn()] == [1, 0]

    controller.navigate("decks")

    assert controller.tracker_session is None
    assert controller.tracker_in_deck() == []


def test_tracker_view_requires_session(controller):
    assert controller.navigate("tracker") == "decks"
    assert controller.view == "decks"


def test_navigate_rejects_unknown_view(controller):
    with pytest.raises(ValueError):
        controller.navigate("stats")


def test_start_tracking_missing_deck(controller):
    assert controller.start_tracking("missing") is None
    assert controller.view == "builder"


def test_reset_tracker(controller, deck_repo):
    saved = _save_deck(deck_repo, "Track", "monster", ["m_leader", "c1"], now_ms=1)
    controller.start_tracking(saved.id)
    controller.toggle_drawn(1)

    controller.reset_tracker()

    assert controller.tracker_session.drawn == {0}


def test_toggle_without_session(controller):
    assert controller.toggle_drawn(0) is False


def test_select_card_for_details(controller):
    card = controller.select_card("m_gold")

    assert card.name == "Imlerith"
    assert controller.selected_card_id == "m_gold"

    controller.clear_selection()
    assert controller.selected_card_id is None
    assert controller.select_card("ghost") is None


def test_get_app_controller_singleton(monkeypatch, card_repo, deck_repo, state_service):
    monkeypatch.setattr("controllers.app_controller.get_card_repository", lambda: card_repo)
    monkeypatch.setattr("controllers.app_controller.get_deck_repository", lambda: deck_repo)
    monkeypatch.setattr("controllers.app_controller.StateService", lambda: state_service)

    controller = get_app_controller()

    assert get_app_controller() is controller
    reset_app_controller()
    assert get_app_controller() is not controller
