"""Ordered card containers used for the deck, hands, refills and table."""

from __future__ import annotations

import random
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, Iterator

from .cards import Card

__all__ = ["InsufficientCards", "CardNotInPile", "Pile"]


class InsufficientCards(ValueError):
    """Raised when more cards are requested than a pile holds."""

    def __init__(self, requested: int, available: int) -> None:
        super().__init__(f"cannot draw {requested} card(s) from a pile of {available}")
        self.requested = requested
        self.available = available


class CardNotInPile(ValueError):
    """Raised when a card to remove is missing from the pile."""

    def __init__(self, card: Card) -> None:
        super().__init__(f"card {card} not present in pile")
        self.card = card


@dataclass(slots=True)
class Pile:
    """Mutable ordered sequence of cards; index ``0`` is the top."""

    cards: list[Card] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __contains__(self, card: object) -> bool:
        return card in self.cards

    def shuffle(self, rng: random.Random | None = None) -> None:
        """Shuffle the pile in place using ``rng`` or the module-level source."""

        (rng or random).shuffle(self.cards)

    def draw(self) -> Card:
        """Remove and return the top card."""

        if not self.cards:
            raise InsufficientCards(1, 0)
        return self.cards.pop(0)

    def draw_n(self, n: int) -> "Pile":
        """Remove exactly ``n`` cards from the top and return them as a new pile."""

        if n < 0:
            raise ValueError("cannot draw a negative number of cards")
        if n > len(self.cards):
            raise InsufficientCards(n, len(self.cards))
        drawn = self.cards[:n]
        del self.cards[:n]
        return Pile(drawn)

    def add(self, card: Card) -> None:
        self.cards.append(card)

    def extend(self, cards: Iterable[Card]) -> None:
        self.cards.extend(cards)

    def remove(self, cards: Iterable[Card]) -> None:
        """Remove one occurrence of each card in ``cards``.

        Nothing is removed unless every requested card is present.
        """

        wanted = list(cards)
        available = Counter(self.cards)
        for card in wanted:
            if available[card] <= 0:
                raise CardNotInPile(card)
            available[card] -= 1
        for card in wanted:
            self.cards.remove(card)

    def snapshot(self) -> tuple[Card, ...]:
        """Return the current contents as an immutable tuple."""

        return tuple(self.cards)
