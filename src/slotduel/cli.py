from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterable, Sequence, TextIO

from slotduel.engine import (
    CardHandle,
    DrawCardAction,
    EndRoundAction,
    MatchConfig,
    MatchState,
    PlaceCardAction,
    SkipDrawAction,
    new_match,
    observe,
)
from slotduel.engine.actions import Action
from slotduel.engine.match import step
from slotduel.paths import get_paths
from slotduel.services.content import ContentError, ContentService
from slotduel.services.telemetry import TelemetryService

HELP = """commands:
  draw             draw a card (draw phase)
  skip             leave the draw phase once the deck is empty
  place HAND SLOT  move a card from hand to a board slot (play phase)
  end              end the round and resolve combat (play phase)
  show             print the board
  quit             exit"""


def _slot_label(state: MatchState, handle: CardHandle | None) -> str:
    if handle is None:
        return "--"
    return f"{state.pool.card_id_of(handle)}({state.pool.strength_of(handle)})"


def render(state: MatchState) -> str:
    obs = observe(state)
    lines = [
        f"round {obs.round} | phase {obs.phase} | deck {obs.deck_count} | draws left {obs.draws_remaining}",
        f"{state.player.name!r}: {obs.player_health}",
        f"{state.computer.name!r}: {obs.computer_health}",
        "computer: " + " ".join(_slot_label(state, h) for h in obs.computer_board),
        "player:   " + " ".join(_slot_label(state, h) for h in obs.player_board),
        "hand:     " + (" ".join(f"{i}:{_slot_label(state, h)}" for i, h in enumerate(obs.hand)) or "(empty)"),
    ]
    return "\n".join(lines)


def parse_command(line: str) -> Action | str | None:
    """Returns an engine action, a control word, or None for bad input."""
    parts = line.split()
    if not parts:
        return None
    cmd, args = parts[0].lower(), parts[1:]
    if cmd in ("draw", "d") and not args:
        return DrawCardAction()
    if cmd in ("skip", "s") and not args:
        return SkipDrawAction()
    if cmd in ("end", "e") and not args:
        return EndRoundAction()
    if cmd in ("place", "p") and len(args) == 2:
        try:
            return PlaceCardAction(hand_index=int(args[0]), slot=int(args[1]))
        except ValueError:
            return None
    if cmd in ("show", "help", "quit", "q") and not args:
        return "quit" if cmd == "q" else cmd
    return None


def run(
    state: MatchState,
    commands: Iterable[str],
    out: TextIO,
    telemetry: TelemetryService | None = None,
) -> int:
    print(render(state), file=out)
    for line in commands:
        parsed = parse_command(line)
        if parsed is None:
            if line.strip():
                print(f"unknown command: {line.strip()} (try 'help')", file=out)
            continue
        if parsed == "quit":
            break
        if parsed == "help":
            print(HELP, file=out)
            continue
        if parsed == "show":
            print(render(state), file=out)
            continue

        assert not isinstance(parsed, str)
        res = step(state, parsed)
        if telemetry is not None:
            telemetry.log_events(res.events)
        if not res.ok:
            print(f"rejected: {res.error}", file=out)
            continue
        print(render(state), file=out)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="slotduel")
    parser.add_argument("--health", type=int, default=10)
    deck_group = parser.add_mutually_exclusive_group()
    deck_group.add_argument("--deck", default=None, help="deck id from decks.json")
    deck_group.add_argument(
        "--deck-size", type=int, default=None, help="starter cards in the default deck (60)"
    )
    parser.add_argument("--telemetry", type=Path, default=None)
    parser.add_argument("--no-telemetry", action="store_true")
    args = parser.parse_args(argv)

    paths = get_paths()
    content = ContentService(data_dir=paths.data_dir, schema_dir=paths.schema_dir)
    try:
        cards = content.load_cards_db()
        deck: list[str] | None = None
        if args.deck is not None:
            decks = content.load_decks(cards)
            if args.deck not in decks:
                parser.error(f"unknown deck: {args.deck}")
            deck = decks[args.deck].card_ids()
    except ContentError as e:
        print(str(e), file=sys.stderr)
        return 1

    config = MatchConfig(starting_health=args.health)
    if args.deck_size is not None:
        config = MatchConfig(starting_health=args.health, deck_size=args.deck_size)
    try:
        state = new_match(cards=cards, deck=deck, config=config)
    except ValueError as e:
        parser.error(str(e))

    telemetry: TelemetryService | None = None
    if not args.no_telemetry:
        telemetry = TelemetryService(args.telemetry or paths.userdata_dir / "telemetry.jsonl")

    return run(state, sys.stdin, sys.stdout, telemetry)


if __name__ == "__main__":
    raise SystemExit(main())
