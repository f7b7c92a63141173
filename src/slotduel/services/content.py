from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from jsonschema import Draft202012Validator

from slotduel.engine.types import BasicUnit, CardDatabase, CardDefinition


class ContentError(RuntimeError):
    pass


def _load_json(path: Path) -> object:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ContentError(f"Missing content file: {path}") from e
    except json.JSONDecodeError as e:
        raise ContentError(f"Invalid JSON in {path}: {e}") from e


def validate_json(instance: object, schema: object, *, context: str) -> None:
    validator = Draft202012Validator(schema)
    errors = sorted(validator.iter_errors(instance), key=lambda e: [str(p) for p in e.path])
    if errors:
        lines = [f"Schema validation failed for {context}:"]
        for err in errors[:10]:
            loc = "/".join(str(p) for p in err.absolute_path)
            lines.append(f"- {loc}: {err.message}")
        raise ContentError("\n".join(lines))


def _require_str(obj: Mapping[str, object], key: str) -> str:
    v = obj.get(key)
    if not isinstance(v, str):
        raise ContentError(f"Expected string for {key}")
    return v


def _require_int(obj: Mapping[str, object], key: str) -> int:
    v = obj.get(key)
    if not isinstance(v, int) or isinstance(v, bool):
        raise ContentError(f"Expected int for {key}")
    return v


def _parse_card(raw: Mapping[str, object]) -> CardDefinition:
    kind = _require_str(raw, "kind")
    if kind == "basic":
        return BasicUnit(
            id=_require_str(raw, "id"),
            name=_require_str(raw, "name"),
            strength=_require_int(raw, "strength"),
        )
    raise ContentError(f"Unknown card kind: {kind}")


@dataclass(frozen=True)
class DeckList:
    id: str
    name: str
    entries: tuple[tuple[str, int], ...]

    def card_ids(self) -> list[str]:
        """Expand entries in file order; the last card listed is drawn first."""
        out: list[str] = []
        for card_id, count in self.entries:
            out.extend([card_id] * count)
        return out


class ContentService:
    def __init__(self, data_dir: Path, schema_dir: Path) -> None:
        self._data_dir = data_dir
        self._schema_dir = schema_dir

    def _load_validated(self, name: str) -> Mapping[str, object]:
        path = self._data_dir / f"{name}.json"
        raw = _load_json(path)
        schema = _load_json(self._schema_dir / f"{name}.schema.json")
        validate_json(raw, schema, context=str(path))
        if not isinstance(raw, dict):
            raise ContentError(f"{name}.json must be an object")
        return raw

    def load_cards_db(self) -> CardDatabase:
        raw = self._load_validated("cards")
        raw_cards = raw.get("cards")
        if not isinstance(raw_cards, list):
            raise ContentError("cards.json.cards must be a list")

        cards: dict[str, CardDefinition] = {}
        for item in raw_cards:
            if not isinstance(item, dict):
                continue
            card = _parse_card(item)
            if card.id in cards:
                raise ContentError(f"Duplicate card id: {card.id}")
            cards[card.id] = card
        return CardDatabase(cards=cards)

    def load_decks(self, cards: CardDatabase | None = None) -> dict[str, DeckList]:
        raw = self._load_validated("decks")
        raw_decks = raw.get("decks")
        if not isinstance(raw_decks, list):
            raise ContentError("decks.json.decks must be a list")

        db = cards or self.load_cards_db()
        decks: dict[str, DeckList] = {}
        for item in raw_decks:
            if not isinstance(item, dict):
                continue
            deck_id = _require_str(item, "id")
            entries: list[tuple[str, int]] = []
            for e in item.get("cards", []):
                if not isinstance(e, dict):
                    continue
                card_id = _require_str(e, "card_id")
                if card_id not in db:
                    raise ContentError(f"Deck {deck_id} references unknown card: {card_id}")
                entries.append((card_id, _require_int(e, "count")))
            decks[deck_id] = DeckList(id=deck_id, name=_require_str(item, "name"), entries=tuple(entries))
        return decks

    def validate_all(self) -> None:
        # Load is validation (schema + parse)
        cards = self.load_cards_db()
        _ = self.load_decks(cards)
