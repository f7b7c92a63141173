from __future__ import annotations


from .actions import Action, DrawCardAction, EndRoundAction, PlaceCardAction, SkipDrawAction
from .cards import CardHandle, CardPool
from .match import Deck, MatchSnapshot, MatchState, SideState


def action_to_dict(a: Action) -> dict[str, object]:
    if isinstance(a, DrawCardAction):
        return {"type": "draw"}
    if isinstance(a, SkipDrawAction):
        return {"type": "skip_draw"}
    if isinstance(a, PlaceCardAction):
        return {"type": "place", "hand_index": a.hand_index, "slot": a.slot}
    if isinstance(a, EndRoundAction):
        return {"type": "end_round"}
    # should be unreachable
    return {"type": "unknown"}


def _card_to_dict(pool: CardPool, handle: CardHandle | None) -> dict[str, object] | None:
    if handle is None:
        return None
    return {"handle": handle, "card_id": pool.card_id_of(handle), "strength": pool.strength_of(handle)}


def _deck_to_dict(pool: CardPool, deck: Deck | None) -> dict[str, object] | None:
    if deck is None:
        return None
    return {
        "draws_remaining": deck.draws_remaining,
        "cards": [pool.card_id_of(h) for h in deck.cards],
    }


def _side_to_dict(pool: CardPool, side: SideState) -> dict[str, object]:
    return {
        "identity": side.identity,
        "name": side.name,
        "health": side.health,
        "deck": _deck_to_dict(pool, side.deck),
        "hand": [_card_to_dict(pool, h) for h in side.hand],
        "board": [_card_to_dict(pool, h) for h in side.board],
    }


def snapshot(state: MatchState) -> dict[str, object]:
    """Return a JSON-serializable canonical snapshot of the current match state."""
    return {
        "round": state.round,
        "phase": state.phase,
        "player": _side_to_dict(state.pool, state.player),
        "computer": _side_to_dict(state.pool, state.computer),
        "action_log": [action_to_dict(a) for a in state.action_log],
    }


def observation_to_dict(obs: MatchSnapshot) -> dict[str, object]:
    return {
        "round": obs.round,
        "phase": obs.phase,
        "player_health": obs.player_health,
        "computer_health": obs.computer_health,
        "player_board": list(obs.player_board),
        "computer_board": list(obs.computer_board),
        "draws_remaining": obs.draws_remaining,
        "deck_count": obs.deck_count,
        "hand": list(obs.hand),
    }
