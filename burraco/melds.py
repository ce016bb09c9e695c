"""Meld validation for Burraco runs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Iterable, Iterator, Sequence

from .cards import Card, Suit
from .order import Direction, OrderError, check_neighbour

__all__ = [
    "MIN_MELD_SIZE",
    "MeldError",
    "MeldSizeError",
    "MeldOrderError",
    "Meld",
    "validate_meld",
    "is_meld",
]

MIN_MELD_SIZE: Final[int] = 3


class MeldError(ValueError):
    """Base class for failures while building a meld."""


class MeldSizeError(MeldError):
    """Raised when fewer than ``MIN_MELD_SIZE`` cards are offered."""

    def __init__(self, size: int) -> None:
        super().__init__(f"a meld needs at least {MIN_MELD_SIZE} cards, got {size}")
        self.size = size


class MeldOrderError(MeldError):
    """Raised when a neighbouring pair breaks the run."""

    def __init__(self, cause: OrderError, position: int) -> None:
        super().__init__(f"card {position}: {cause}")
        self.cause = cause
        self.position = position


def _walk(cards: Sequence[Card], pivot: int, positions: Iterable[int], direction: Direction) -> None:
    current = cards[pivot]
    for position in positions:
        candidate = cards[position]
        try:
            check_neighbour(current, candidate, direction)
        except OrderError as exc:
            raise MeldOrderError(exc, position) from exc
        current = candidate


def validate_meld(cards: Sequence[Card]) -> None:
    """Validate ``cards`` as a run, walking outward from the middle card.

    The card at ``len // 2`` is the pivot. Cards before it are checked towards
    the start with ``DECREASING`` ranks, cards after it towards the end with
    ``INCREASING`` ranks. Only positional neighbours are compared, so a run may
    pass through King to Ace once but never wrap a second time.
    """

    size = len(cards)
    if size < MIN_MELD_SIZE:
        raise MeldSizeError(size)

    pivot = size // 2
    _walk(cards, pivot, range(pivot - 1, -1, -1), Direction.DECREASING)
    _walk(cards, pivot, range(pivot + 1, size), Direction.INCREASING)


def is_meld(cards: Sequence[Card]) -> bool:
    """Return ``True`` when ``cards`` form a legal meld."""

    try:
        validate_meld(cards)
    except MeldError:
        return False
    return True


@dataclass(frozen=True, slots=True)
class Meld:
    """Validated, immutable run of cards kept in the order they were laid."""

    cards: tuple[Card, ...]

    def __post_init__(self) -> None:
        cards = tuple(self.cards)
        validate_meld(cards)
        object.__setattr__(self, "cards", cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    @property
    def has_joker(self) -> bool:
        return any(card.is_joker for card in self.cards)

    @property
    def suit(self) -> Suit | None:
        """Return the suit of the first standard card in the run."""

        for card in self.cards:
            if card.suit is not None:
                return card.suit
        return None

    @property
    def code(self) -> str:
        return " ".join(card.code for card in self.cards)
