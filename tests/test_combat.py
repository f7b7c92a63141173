from __future__ import annotations

import pytest

from slotduel.engine.cards import CardPool
from slotduel.engine.combat import resolve
from slotduel.engine.types import BasicUnit, CardDatabase


def _pool() -> CardPool:
    cards = CardDatabase(
        cards={
            "rat": BasicUnit(id="rat", name="Rat", strength=1),
            "wolf": BasicUnit(id="wolf", name="Wolf", strength=3),
            "ogre": BasicUnit(id="ogre", name="Ogre", strength=5),
            "moth": BasicUnit(id="moth", name="Moth", strength=0),
        }
    )
    return CardPool(cards=cards)


def test_round_zero_never_deals_damage() -> None:
    pool = _pool()
    full = [pool.create("ogre"), pool.create("ogre"), pool.create("ogre")]
    assert resolve(0, full, [None, None, None], pool) == (0, 0)
    assert resolve(0, [None, None, None], full, pool) == (0, 0)


def test_empty_side_takes_opposing_strength() -> None:
    pool = _pool()
    rat, wolf, ogre = pool.create("rat"), pool.create("wolf"), pool.create("ogre")
    board_a = [rat, None, ogre]
    board_b = [None, wolf, None]
    assert resolve(1, board_a, board_b, pool) == (3, 6)


def test_mutual_occupation_and_mutual_absence_do_nothing() -> None:
    pool = _pool()
    board_a = [pool.create("ogre"), None, pool.create("rat")]
    board_b = [pool.create("rat"), None, pool.create("wolf")]
    assert resolve(4, board_a, board_b, pool) == (0, 0)


def test_zero_strength_card_blocks_but_deals_nothing() -> None:
    pool = _pool()
    moth = pool.create("moth")
    assert resolve(1, [moth, None, None], [None, None, None], pool) == (0, 0)
    assert resolve(1, [moth, None, None], [pool.create("ogre"), None, None], pool) == (0, 0)


@pytest.mark.parametrize("size", [0, 2, 4])
def test_board_size_is_fixed(size: int) -> None:
    pool = _pool()
    with pytest.raises(ValueError):
        resolve(1, [None] * size, [None, None, None], pool)
    with pytest.raises(ValueError):
        resolve(1, [None, None, None], [None] * size, pool)


def test_resolver_does_not_mutate_boards() -> None:
    pool = _pool()
    board_a = [pool.create("wolf"), None, None]
    board_b = [None, None, pool.create("rat")]
    snapshot = (list(board_a), list(board_b))
    resolve(2, board_a, board_b, pool)
    assert (board_a, board_b) == snapshot
