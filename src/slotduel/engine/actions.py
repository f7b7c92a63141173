from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from .cards import CardHandle


@dataclass(frozen=True)
class DrawCardAction:
    pass


@dataclass(frozen=True)
class SkipDrawAction:
    pass


@dataclass(frozen=True)
class PlaceCardAction:
    hand_index: int
    slot: int


@dataclass(frozen=True)
class EndRoundAction:
    pass


Action = DrawCardAction | SkipDrawAction | PlaceCardAction | EndRoundAction


# Outcomes. Every request returns one of these; none are raised.


@dataclass(frozen=True)
class Drawn:
    handle: CardHandle
    type: Literal["drawn"] = "drawn"


@dataclass(frozen=True)
class DeckEmpty:
    type: Literal["deck_empty"] = "deck_empty"


@dataclass(frozen=True)
class Skipped:
    type: Literal["skipped"] = "skipped"


@dataclass(frozen=True)
class DrawRequired:
    remaining: int
    type: Literal["draw_required"] = "draw_required"


@dataclass(frozen=True)
class Placed:
    handle: CardHandle
    slot: int
    type: Literal["placed"] = "placed"


@dataclass(frozen=True)
class InvalidHandIndex:
    hand_index: int
    type: Literal["invalid_hand_index"] = "invalid_hand_index"


@dataclass(frozen=True)
class InvalidSlot:
    slot: int
    type: Literal["invalid_slot"] = "invalid_slot"


@dataclass(frozen=True)
class SlotOccupied:
    slot: int
    type: Literal["slot_occupied"] = "slot_occupied"


@dataclass(frozen=True)
class Resolved:
    damage_to_player: int
    damage_to_computer: int
    type: Literal["resolved"] = "resolved"


@dataclass(frozen=True)
class NotInDrawPhase:
    type: Literal["not_in_draw_phase"] = "not_in_draw_phase"


@dataclass(frozen=True)
class NotInPlayPhase:
    type: Literal["not_in_play_phase"] = "not_in_play_phase"


DrawOutcome = Drawn | DeckEmpty | NotInDrawPhase
SkipOutcome = Skipped | DrawRequired | NotInDrawPhase
PlaceOutcome = Placed | NotInPlayPhase | InvalidHandIndex | InvalidSlot | SlotOccupied
EndRoundOutcome = Resolved | NotInPlayPhase
Outcome = DrawOutcome | SkipOutcome | PlaceOutcome | EndRoundOutcome

SUCCESS_TYPES = frozenset({"drawn", "skipped", "placed", "resolved"})

ERROR_MESSAGES: dict[str, str] = {
    "deck_empty": "Deck is empty.",
    "draw_required": "Draws remain this round.",
    "invalid_hand_index": "Invalid hand index.",
    "invalid_slot": "Invalid board slot.",
    "slot_occupied": "Board slot is occupied.",
    "not_in_draw_phase": "Not in draw phase.",
    "not_in_play_phase": "Not in play phase.",
}


def is_success(outcome: Outcome) -> bool:
    return outcome.type in SUCCESS_TYPES
