"""
Remembered / forgotten card collections.

Each collection holds at most one card per front text. Re-adding a front
evicts the older entry and places the new card last.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Mapping, Optional

from core.study.cards import Card


@dataclass(frozen=True, eq=False)
class CardCollection:
    """
    Immutable, insertion-ordered collection keyed by front text.
    """
    entries: Mapping[str, Card] = field(default_factory=dict)

    @classmethod
    def of(cls, *cards: Card) -> "CardCollection":
        collection = cls()
        for card in cards:
            collection = collection.appended(card)
        return collection

    def without(self, front: str) -> "CardCollection":
        """
        Return a collection with the entry for `front` removed.
        """
        if front not in self.entries:
            return self
        return CardCollection({k: c for k, c in self.entries.items() if k != front})

    def appended(self, card: Card) -> "CardCollection":
        """
        Return a collection with `card` last, replacing any entry sharing its front.
        """
        entries = {k: c for k, c in self.entries.items() if k != card.front}
        entries[card.front] = card
        return CardCollection(entries)

    def get(self, front: str) -> Optional[Card]:
        return self.entries.get(front)

    @property
    def cards(self) -> tuple[Card, ...]:
        return tuple(self.entries.values())

    def __contains__(self, front: object) -> bool:
        return front in self.entries

    def __iter__(self) -> Iterator[Card]:
        return iter(self.entries.values())

    def __len__(self) -> int:
        return len(self.entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CardCollection):
            return NotImplemented
        return list(self.entries.items()) == list(other.entries.items())
