"""Deterministic, headless rules engine for SlotDuel.

IMPORTANT: This package must never import a rendering library.
"""

from .actions import (
    DeckEmpty,
    DrawCardAction,
    Drawn,
    DrawRequired,
    EndRoundAction,
    InvalidHandIndex,
    InvalidSlot,
    NotInDrawPhase,
    NotInPlayPhase,
    PlaceCardAction,
    Placed,
    Resolved,
    SkipDrawAction,
    Skipped,
    SlotOccupied,
)
from .cards import CardHandle, CardPool, UnknownHandleError, builtin_cards
from .combat import resolve
from .match import (
    MatchConfig,
    MatchSnapshot,
    MatchState,
    new_match,
    observe,
    replay,
    request_draw,
    request_end_round,
    request_place,
    request_skip_draw,
    step,
)
from .types import BasicUnit, CardDatabase, CardDefinition, Phase, SideId

__all__ = [
    "BasicUnit",
    "CardDatabase",
    "CardDefinition",
    "CardHandle",
    "CardPool",
    "DeckEmpty",
    "DrawCardAction",
    "DrawRequired",
    "Drawn",
    "EndRoundAction",
    "InvalidHandIndex",
    "InvalidSlot",
    "MatchConfig",
    "MatchSnapshot",
    "MatchState",
    "NotInDrawPhase",
    "NotInPlayPhase",
    "Phase",
    "PlaceCardAction",
    "Placed",
    "Resolved",
    "SideId",
    "SkipDrawAction",
    "Skipped",
    "SlotOccupied",
    "UnknownHandleError",
    "builtin_cards",
    "new_match",
    "observe",
    "replay",
    "request_draw",
    "request_end_round",
    "request_place",
    "request_skip_draw",
    "resolve",
    "step",
]
