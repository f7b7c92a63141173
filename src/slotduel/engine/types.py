from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal

CardKind = Literal["basic"]
SideId = Literal["player", "computer"]
Phase = Literal["draw", "play"]

BOARD_SLOTS = 3


@dataclass(frozen=True)
class BasicUnit:
    id: str
    name: str
    strength: int
    kind: Literal["basic"] = "basic"

    def __post_init__(self) -> None:
        if self.strength < 0:
            raise ValueError(f"Card {self.id} has negative strength: {self.strength}")


# Closed set of card kinds. New kinds are added as further variants here
# and as a branch in card_strength().
CardDefinition = BasicUnit


def card_strength(card: CardDefinition) -> int:
    if isinstance(card, BasicUnit):
        return card.strength
    raise TypeError(f"Unsupported card kind: {card!r}")


@dataclass(frozen=True)
class CardDatabase:
    """Immutable card database used by the engine."""

    cards: dict[str, CardDefinition]

    def get(self, card_id: str) -> CardDefinition:
        return self.cards[card_id]

    def all_ids(self) -> Sequence[str]:
        return list(self.cards.keys())

    def __contains__(self, card_id: object) -> bool:
        return card_id in self.cards
