"""Suit and rank adjacency checks between neighbouring cards."""

from __future__ import annotations

from enum import Enum
from typing import Final

from .cards import Card

__all__ = [
    "Direction",
    "OrderError",
    "SuitMismatch",
    "RankMismatch",
    "check_suit",
    "check_rank_adjacency",
    "check_neighbour",
    "is_neighbour",
]


class Direction(str, Enum):
    """Direction of travel when walking a meld away from its pivot."""

    INCREASING = "increasing"
    DECREASING = "decreasing"


# Accepted values of ``rank(a) - rank(b)``; the 12s close the King/Ace cycle.
_RANK_STEPS: Final[dict[Direction, frozenset[int]]] = {
    Direction.DECREASING: frozenset({1, -12}),
    Direction.INCREASING: frozenset({-1, 12}),
}


class OrderError(ValueError):
    """Raised when two cards cannot sit next to each other in a meld."""

    def __init__(self, first: Card, second: Card, message: str) -> None:
        super().__init__(message)
        self.first = first
        self.second = second


class SuitMismatch(OrderError):
    """Raised when two cards fail the suit compatibility rule."""

    def __init__(self, first: Card, second: Card) -> None:
        super().__init__(first, second, f"{first} and {second} do not share a suit")


class RankMismatch(OrderError):
    """Raised when two cards are not rank-adjacent in the given direction."""

    def __init__(self, first: Card, second: Card, direction: Direction) -> None:
        super().__init__(
            first,
            second,
            f"{second} does not follow {first} when {direction.value}",
        )
        self.direction = direction


def check_suit(first: Card, second: Card) -> None:
    """Ensure ``first`` and ``second`` may share a meld suit.

    A Joker matches any standard card, but two Jokers cannot vouch for each
    other.
    """

    if first.is_joker and second.is_joker:
        raise SuitMismatch(first, second)
    if first.is_joker or second.is_joker:
        return
    if first.suit != second.suit:
        raise SuitMismatch(first, second)


def check_rank_adjacency(first: Card, second: Card, direction: Direction) -> None:
    """Ensure ``second`` is one step from ``first`` in ``direction``.

    Walking ``DECREASING`` expects ``first`` to sit one rank above ``second``
    (or ``first`` to be an Ace reached from a King); ``INCREASING`` mirrors it.
    """

    if first.is_joker and second.is_joker:
        raise RankMismatch(first, second, direction)
    if first.rank is None or second.rank is None:
        return
    diff = int(first.rank) - int(second.rank)
    if diff not in _RANK_STEPS[direction]:
        raise RankMismatch(first, second, direction)


def check_neighbour(first: Card, second: Card, direction: Direction) -> None:
    """Run the suit check followed by the rank check."""

    check_suit(first, second)
    check_rank_adjacency(first, second, direction)


def is_neighbour(first: Card, second: Card, direction: Direction) -> bool:
    """Return ``True`` when ``check_neighbour`` accepts the pair."""

    try:
        check_neighbour(first, second, direction)
    except OrderError:
        return False
    return True
