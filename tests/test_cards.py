from __future__ import annotations

import pytest

from slotduel.engine.cards import CardHandle, CardPool, UnknownHandleError, builtin_cards
from slotduel.engine.match import MatchConfig, new_match
from slotduel.engine.types import BasicUnit, card_strength


def test_pool_issues_distinct_handles_for_same_definition() -> None:
    pool = CardPool(cards=builtin_cards())
    a = pool.create("rat")
    b = pool.create("rat")
    assert a != b
    assert pool.definition_of(a) is pool.definition_of(b)
    assert pool.strength_of(a) == 1
    assert len(pool) == 2


def test_unknown_handle_raises() -> None:
    pool = CardPool(cards=builtin_cards())
    with pytest.raises(UnknownHandleError):
        pool.strength_of(CardHandle(99))


def test_unknown_card_id_rejected_by_pool() -> None:
    pool = CardPool(cards=builtin_cards())
    with pytest.raises(KeyError):
        pool.create("dragon")
    assert len(pool) == 0


def test_card_strength_dispatch() -> None:
    assert card_strength(BasicUnit(id="x", name="X", strength=4)) == 4
    with pytest.raises(TypeError):
        card_strength("not a card")  # type: ignore[arg-type]


def test_new_match_validates_config() -> None:
    with pytest.raises(ValueError):
        new_match(config=MatchConfig(starter_card_id="dragon"))
    with pytest.raises(ValueError):
        new_match(config=MatchConfig(draws_per_round=0))
    with pytest.raises(ValueError):
        new_match(config=MatchConfig(deck_size=-1))
    with pytest.raises(ValueError):
        new_match(config=MatchConfig(player_board=("rat", None)))  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        new_match(deck=["rat", "dragon"])


def test_every_card_in_match_comes_from_pool() -> None:
    state = new_match(config=MatchConfig(deck_size=4, computer_board=(None, "rat", None)))
    assert len(state.pool) == 5
    assert state.computer.board[1] is not None
    assert state.pool.card_id_of(state.computer.board[1]) == "rat"


def test_negative_strength_rejected() -> None:
    with pytest.raises(ValueError, match="negative strength"):
        BasicUnit(id="leech", name="Leech", strength=-4)
    assert BasicUnit(id="moth", name="Moth", strength=0).strength == 0
