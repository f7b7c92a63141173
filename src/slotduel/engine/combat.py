from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from .cards import CardHandle, CardPool
from .types import BOARD_SLOTS

if TYPE_CHECKING:
    from .match import SideState

Board = Sequence[CardHandle | None]


def resolve(round_counter: int, board_a: Board, board_b: Board, pool: CardPool) -> tuple[int, int]:
    """Compare two boards column by column.

    Returns (damage_to_a, damage_to_b). A side takes the strength of the
    opposing card in every column where it is empty and the opponent is
    not. Round 0 is a setup round and never deals damage.
    """
    if len(board_a) != BOARD_SLOTS or len(board_b) != BOARD_SLOTS:
        raise ValueError(f"Boards must have exactly {BOARD_SLOTS} slots.")
    if round_counter == 0:
        return 0, 0

    damage_to_a = 0
    damage_to_b = 0
    for a, b in zip(board_a, board_b):
        if a is not None and b is None:
            damage_to_b += pool.strength_of(a)
        elif a is None and b is not None:
            damage_to_a += pool.strength_of(b)
    return damage_to_a, damage_to_b


def apply_damage(side: "SideState", amount: int) -> None:
    # Health has no floor.
    side.health -= amount
