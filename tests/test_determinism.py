from __future__ import annotations

import json

from slotduel.engine.actions import DrawCardAction, EndRoundAction, PlaceCardAction, SkipDrawAction
from slotduel.engine.match import MatchConfig, new_match, observe, replay, step
from slotduel.engine.serialize import observation_to_dict, snapshot
from slotduel.paths import get_paths
from slotduel.services.content import ContentService


def _load_cards():
    paths = get_paths()
    content = ContentService(paths.data_dir, paths.schema_dir)
    return content.load_cards_db()


def _choose_action(state, turn: int) -> object:
    if state.phase == "draw":
        if state.player.deck is not None and state.player.deck.cards:
            return DrawCardAction()
        return SkipDrawAction()
    # place into the first empty slot, rotating the starting column
    if state.player.hand:
        for offset in range(3):
            slot = (turn + offset) % 3
            if state.player.board[slot] is None:
                return PlaceCardAction(hand_index=0, slot=slot)
    return EndRoundAction()


def test_engine_determinism_replay() -> None:
    cards = _load_cards()
    deck = ["rat"] * 6
    config = MatchConfig(computer_board=("rat", None, "rat"))

    state1 = new_match(cards, deck, config)
    actions = []
    for turn in range(25):
        a = _choose_action(state1, turn)
        actions.append(a)
        step(state1, a)

    snap1 = snapshot(state1)
    # also exercises rejected actions in the log
    state2 = replay(actions, cards=cards, deck=deck, config=config)
    snap2 = snapshot(state2)

    assert snap1 == snap2
    json.dumps(snap1)
    assert snap1["round"] == state1.round > 0


def test_observation_is_json_ready() -> None:
    state = new_match(_load_cards(), deck=["rat"] * 2)
    step(state, DrawCardAction())
    step(state, PlaceCardAction(hand_index=0, slot=2))
    obs = observation_to_dict(observe(state))
    assert json.loads(json.dumps(obs)) == obs
    assert obs["phase"] == "play"
    assert obs["player_board"] == [None, None, state.player.board[2]]
    assert obs["hand"] == []
