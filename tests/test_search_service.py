"""Tests for catalog filtering in the deck builder."""

import pytest

from repositories.card_repository import CardRecord
from services.search_service import SearchService, card_sort_key, matches_query, sort_cards


@pytest.fixture
def search_service(card_repo) -> SearchService:
    return SearchService(card_repository=card_repo)


def _card(name, cost, **overrides) -> CardRecord:
    data = dict(
        id=name.lower(),
        name=name,
        strength=1,
        cost=cost,
        tags="",
        ability="",
        rarity="bronze",
        category="Unit",
        faction="monster",
    )
    data.update(overrides)
    return CardRecord(**data)


def test_sort_by_cost_descending_then_name():
    """Expensive cards first; equal costs ordered by name ignoring case."""
    cards = [_card("beta", 4), _card("Alpha", 4), _card("Zed", 9), _card("gamma", 0)]

    ordered = sort_cards(cards)

    assert [card.name for card in ordered] == ["Zed", "Alpha", "beta", "gamma"]
    assert card_sort_key(cards[2]) < card_sort_key(cards[0])


@pytest.mark.parametrize(
    "query,expected",
    [
        ("", True),
        ("   ", True),
        ("NEKK", True),
        ("ogroid", True),
        ("thrive", True),
        ("dragon", False),
    ],
)
def test_matches_query_checks_name_tags_and_ability(card_repo, query, expected):
    assert matches_query(card_repo.get_card("c1"), query) is expected


def test_filter_catalog_includes_faction_and_neutral(search_service):
    """Cards of other factions never appear."""
    cards = search_service.filter_catalog("monster")

    factions = {card.faction for card in cards}
    assert factions == {"monster", "neutral"}
    assert [card.cost for card in cards] == sorted((card.cost for card in cards), reverse=True)


def test_filter_catalog_text_search(search_service):
    cards = search_service.filter_catalog("skellige", query="ogroid")

    assert [card.id for card in cards] == ["s_giant"]


def test_filter_catalog_search_matches_ability_text(search_service):
    cards = search_service.filter_catalog("monster", query="boost")

    assert {card.id for card in cards} == {"m_spell", "n_spell"}


def test_filter_catalog_only_in_deck(search_service):
    """The in-deck filter keeps only cards with at least one copy."""
    cards = search_service.filter_catalog(
        "monster",
        only_in_deck=True,
        deck_counts={"c1": 2, "n_bronze": 1, "m_gold": 0},
    )

    assert [card.id for card in cards] == ["n_bronze", "c1"]


def test_filter_catalog_only_in_deck_with_empty_deck(search_service):
    assert search_service.filter_catalog("monster", only_in_deck=True) == []
