from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

from .actions import (
    ERROR_MESSAGES,
    Action,
    DeckEmpty,
    DrawCardAction,
    Drawn,
    DrawOutcome,
    DrawRequired,
    EndRoundAction,
    EndRoundOutcome,
    InvalidHandIndex,
    InvalidSlot,
    NotInDrawPhase,
    NotInPlayPhase,
    Outcome,
    PlaceCardAction,
    Placed,
    PlaceOutcome,
    Resolved,
    SkipDrawAction,
    Skipped,
    SkipOutcome,
    SlotOccupied,
    is_success,
)
from .cards import CardHandle, CardPool, builtin_cards
from .combat import apply_damage, resolve
from .types import BOARD_SLOTS, CardDatabase, Phase, SideId

Event = dict[str, object]

Lineup = tuple[str | None, str | None, str | None]


@dataclass(frozen=True)
class MatchConfig:
    starting_health: int = 10
    deck_size: int = 60
    draws_per_round: int = 1
    starter_card_id: str = "rat"
    player_board: Lineup = (None, None, None)
    computer_board: Lineup = (None, None, None)


@dataclass
class Deck:
    draws_remaining: int
    cards: list[CardHandle] = field(default_factory=list)


@dataclass
class SideState:
    identity: SideId
    name: str
    health: int
    deck: Deck | None
    hand: list[CardHandle]
    board: list[CardHandle | None]


@dataclass
class StepResult:
    ok: bool
    outcome: Outcome
    events: list[Event]
    error: str | None = None


@dataclass
class MatchState:
    cards: CardDatabase
    config: MatchConfig
    pool: CardPool
    player: SideState
    computer: SideState
    round: int = 0
    phase: Phase = "draw"
    action_log: list[Action] = field(default_factory=list)
    event_log: list[Event] = field(default_factory=list)

    def side(self, identity: SideId) -> SideState:
        return self.player if identity == "player" else self.computer


@dataclass(frozen=True)
class MatchSnapshot:
    round: int
    phase: Phase
    player_health: int
    computer_health: int
    player_board: tuple[CardHandle | None, ...]
    computer_board: tuple[CardHandle | None, ...]
    draws_remaining: int
    deck_count: int
    hand: tuple[CardHandle, ...]


def draw(deck: Deck) -> CardHandle | None:
    """Pop the most recently added card, or None when the deck is empty.

    Does not touch draws_remaining; the draw-phase driver owns that.
    """
    if not deck.cards:
        return None
    return deck.cards.pop()


def _set_phase(state: MatchState, phase: Phase) -> None:
    state.phase = phase
    state.event_log.append({"type": "PHASE_CHANGED", "phase": phase, "round": state.round})


def _enter_play_phase(state: MatchState, deck: Deck) -> None:
    deck.draws_remaining = state.config.draws_per_round
    _set_phase(state, "play")


def request_draw(state: MatchState) -> DrawOutcome:
    if state.phase != "draw":
        return NotInDrawPhase()
    deck = state.player.deck
    if deck is None:
        return DeckEmpty()
    handle = draw(deck)
    if handle is None:
        return DeckEmpty()

    state.player.hand.append(handle)
    deck.draws_remaining -= 1
    state.event_log.append(
        {"type": "CARD_DRAWN", "side": "player", "handle": handle, "card_id": state.pool.card_id_of(handle)}
    )
    if deck.draws_remaining <= 0:
        _enter_play_phase(state, deck)
    return Drawn(handle=handle)


def request_skip_draw(state: MatchState) -> SkipOutcome:
    """Leave the draw phase once the deck has run out."""
    if state.phase != "draw":
        return NotInDrawPhase()
    deck = state.player.deck
    if deck is not None and deck.cards:
        return DrawRequired(remaining=deck.draws_remaining)

    state.event_log.append({"type": "DRAW_SKIPPED", "side": "player"})
    if deck is None:
        _set_phase(state, "play")
    else:
        _enter_play_phase(state, deck)
    return Skipped()


def request_place(state: MatchState, hand_index: int, slot: int) -> PlaceOutcome:
    if state.phase != "play":
        return NotInPlayPhase()
    ps = state.player
    if hand_index < 0 or hand_index >= len(ps.hand):
        return InvalidHandIndex(hand_index=hand_index)
    if slot < 0 or slot >= len(ps.board):
        return InvalidSlot(slot=slot)
    if ps.board[slot] is not None:
        return SlotOccupied(slot=slot)

    handle = ps.hand.pop(hand_index)
    ps.board[slot] = handle
    state.event_log.append(
        {"type": "CARD_PLACED", "side": "player", "slot": slot, "handle": handle, "card_id": state.pool.card_id_of(handle)}
    )
    return Placed(handle=handle, slot=slot)


def request_end_round(state: MatchState) -> EndRoundOutcome:
    if state.phase != "play":
        return NotInPlayPhase()

    # Resolve before mutating anything so a failed lookup leaves state intact.
    next_round = state.round + 1
    damage_to_player, damage_to_computer = resolve(
        next_round, state.player.board, state.computer.board, state.pool
    )

    state.round = next_round
    apply_damage(state.player, damage_to_player)
    apply_damage(state.computer, damage_to_computer)
    state.event_log.append({"type": "ROUND_ENDED", "round": state.round})
    for side, amount in (("player", damage_to_player), ("computer", damage_to_computer)):
        if amount > 0:
            state.event_log.append(
                {"type": "DAMAGE_SIDE", "side": side, "amount": amount, "health": state.side(side).health}
            )
    _set_phase(state, "draw")
    return Resolved(damage_to_player=damage_to_player, damage_to_computer=damage_to_computer)


def observe(state: MatchState) -> MatchSnapshot:
    deck = state.player.deck
    return MatchSnapshot(
        round=state.round,
        phase=state.phase,
        player_health=state.player.health,
        computer_health=state.computer.health,
        player_board=tuple(state.player.board),
        computer_board=tuple(state.computer.board),
        draws_remaining=deck.draws_remaining if deck is not None else 0,
        deck_count=len(deck.cards) if deck is not None else 0,
        hand=tuple(state.player.hand),
    )


def _dispatch(state: MatchState, action: Action) -> Outcome:
    if isinstance(action, DrawCardAction):
        return request_draw(state)
    if isinstance(action, SkipDrawAction):
        return request_skip_draw(state)
    if isinstance(action, PlaceCardAction):
        return request_place(state, action.hand_index, action.slot)
    if isinstance(action, EndRoundAction):
        return request_end_round(state)
    raise TypeError(f"Unknown action: {action!r}")


def step(state: MatchState, action: Action) -> StepResult:
    """Apply a single action to the match state.

    This mutates `state` in-place and is deterministic for a given
    (config, deck, action sequence).
    """
    # Log first so replay has a full record of attempted actions
    state.action_log.append(action)
    start = len(state.event_log)
    outcome = _dispatch(state, action)
    if is_success(outcome):
        return StepResult(ok=True, outcome=outcome, events=state.event_log[start:])
    return StepResult(ok=False, outcome=outcome, events=[], error=ERROR_MESSAGES[outcome.type])


def _build_board(pool: CardPool, lineup: Sequence[str | None]) -> list[CardHandle | None]:
    if len(lineup) != BOARD_SLOTS:
        raise ValueError(f"Opening lineups must have exactly {BOARD_SLOTS} slots.")
    return [None if card_id is None else pool.create(card_id) for card_id in lineup]


def new_match(
    cards: CardDatabase | None = None,
    deck: Sequence[str] | None = None,
    config: MatchConfig | None = None,
) -> MatchState:
    cfg = config or MatchConfig()
    db = cards or builtin_cards()
    if cfg.draws_per_round < 1:
        raise ValueError("draws_per_round must be at least 1.")
    if cfg.deck_size < 0:
        raise ValueError("deck_size must not be negative.")

    if deck is None:
        deck = [cfg.starter_card_id] * cfg.deck_size
    for card_id in [*deck, *cfg.player_board, *cfg.computer_board]:
        if card_id is not None and card_id not in db:
            raise ValueError(f"Unknown card id: {card_id}")

    pool = CardPool(cards=db)
    # Population order is kept; draws come off the end.
    deck_handles = [pool.create(card_id) for card_id in deck]

    player = SideState(
        identity="player",
        name="Player",
        health=cfg.starting_health,
        deck=Deck(draws_remaining=cfg.draws_per_round, cards=deck_handles),
        hand=[],
        board=_build_board(pool, cfg.player_board),
    )
    computer = SideState(
        identity="computer",
        name="Computer",
        health=cfg.starting_health,
        deck=None,
        hand=[],
        board=_build_board(pool, cfg.computer_board),
    )
    return MatchState(cards=db, config=cfg, pool=pool, player=player, computer=computer)


def replay(
    actions: Iterable[Action],
    cards: CardDatabase | None = None,
    deck: Sequence[str] | None = None,
    config: MatchConfig | None = None,
) -> MatchState:
    state = new_match(cards=cards, deck=deck, config=config)
    for a in actions:
        step(state, a)
    return state
