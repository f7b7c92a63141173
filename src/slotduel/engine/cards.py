from __future__ import annotations

from dataclasses import dataclass, field
from typing import NewType

from .types import BasicUnit, CardDatabase, CardDefinition, card_strength

CardHandle = NewType("CardHandle", int)


class UnknownHandleError(LookupError):
    """A handle was resolved that this pool never issued."""


@dataclass(frozen=True)
class CardInstance:
    handle: CardHandle
    card_id: str


@dataclass
class CardPool:
    """Arena of card instances for a single match.

    Decks, hands and boards store only the handles issued here. An instance
    lives for the whole match; it is relocated between containers but never
    copied or destroyed.
    """

    cards: CardDatabase
    instances: dict[int, CardInstance] = field(default_factory=dict)
    next_handle: int = 1

    def create(self, card_id: str) -> CardHandle:
        # Raises KeyError for ids missing from the database.
        self.cards.get(card_id)
        handle = CardHandle(self.next_handle)
        self.next_handle += 1
        self.instances[handle] = CardInstance(handle=handle, card_id=card_id)
        return handle

    def instance(self, handle: CardHandle) -> CardInstance:
        try:
            return self.instances[handle]
        except KeyError as e:
            raise UnknownHandleError(f"Unknown card handle: {handle}") from e

    def card_id_of(self, handle: CardHandle) -> str:
        return self.instance(handle).card_id

    def definition_of(self, handle: CardHandle) -> CardDefinition:
        return self.cards.get(self.card_id_of(handle))

    def strength_of(self, handle: CardHandle) -> int:
        return card_strength(self.definition_of(handle))

    def __len__(self) -> int:
        return len(self.instances)


RAT = BasicUnit(id="rat", name="Rat", strength=1)


def builtin_cards() -> CardDatabase:
    """Card database used when no content files are loaded."""
    return CardDatabase(cards={RAT.id: RAT})
