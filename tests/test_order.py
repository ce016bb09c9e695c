"""Tests covering suit and rank adjacency between neighbouring cards."""

from __future__ import annotations

import pytest

from burraco.cards import Card, Suit, iter_standard_deck
from burraco.order import (
    Direction,
    RankMismatch,
    SuitMismatch,
    check_neighbour,
    check_rank_adjacency,
    check_suit,
    is_neighbour,
)

JOKER = Card.joker()


def _card(suit: Suit, rank: int) -> Card:
    return Card.standard(suit, rank)


@pytest.mark.parametrize("card", list(iter_standard_deck()))
def test_joker_matches_any_suit(card: Card) -> None:
    check_suit(JOKER, card)
    check_suit(card, JOKER)


def test_two_jokers_fail_suit_check() -> None:
    with pytest.raises(SuitMismatch):
        check_suit(JOKER, JOKER)


def test_suit_check_compares_standard_suits() -> None:
    check_suit(_card(Suit.HEARTS, 1), _card(Suit.HEARTS, 2))
    with pytest.raises(SuitMismatch) as excinfo:
        check_suit(_card(Suit.HEARTS, 1), _card(Suit.SPADES, 2))
    assert excinfo.value.first == _card(Suit.HEARTS, 1)
    assert excinfo.value.second == _card(Suit.SPADES, 2)


@pytest.mark.parametrize("lower", range(1, 13))
def test_consecutive_ranks_are_adjacent(lower: int) -> None:
    low = _card(Suit.DIAMONDS, lower)
    high = _card(Suit.DIAMONDS, lower + 1)
    check_rank_adjacency(high, low, Direction.DECREASING)
    check_rank_adjacency(low, high, Direction.INCREASING)
    with pytest.raises(RankMismatch):
        check_rank_adjacency(low, high, Direction.DECREASING)
    with pytest.raises(RankMismatch):
        check_rank_adjacency(high, low, Direction.INCREASING)


def test_king_and_ace_wrap_in_both_directions() -> None:
    king = _card(Suit.SPADES, 13)
    ace = _card(Suit.SPADES, 1)
    check_rank_adjacency(king, ace, Direction.INCREASING)
    check_rank_adjacency(ace, king, Direction.DECREASING)


@pytest.mark.parametrize(
    ("first", "second", "direction"),
    [
        (1, 1, Direction.INCREASING),
        (2, 2, Direction.DECREASING),
        (1, 3, Direction.INCREASING),
        (13, 1, Direction.DECREASING),
        (1, 13, Direction.INCREASING),
        (12, 1, Direction.INCREASING),
    ],
)
def test_non_adjacent_ranks_fail(first: int, second: int, direction: Direction) -> None:
    with pytest.raises(RankMismatch) as excinfo:
        check_rank_adjacency(_card(Suit.CLUBS, first), _card(Suit.CLUBS, second), direction)
    assert excinfo.value.direction is direction


@pytest.mark.parametrize("direction", list(Direction))
def test_joker_stands_in_for_any_rank(direction: Direction) -> None:
    seven = _card(Suit.HEARTS, 7)
    check_rank_adjacency(seven, JOKER, direction)
    check_rank_adjacency(JOKER, seven, direction)
    with pytest.raises(RankMismatch):
        check_rank_adjacency(JOKER, JOKER, direction)


def test_rank_check_ignores_suit() -> None:
    check_rank_adjacency(_card(Suit.HEARTS, 1), _card(Suit.SPADES, 2), Direction.INCREASING)


def test_neighbour_check_reports_suit_before_rank() -> None:
    with pytest.raises(SuitMismatch):
        check_neighbour(_card(Suit.HEARTS, 1), _card(Suit.SPADES, 9), Direction.INCREASING)
    with pytest.raises(RankMismatch):
        check_neighbour(_card(Suit.HEARTS, 1), _card(Suit.HEARTS, 9), Direction.INCREASING)
    check_neighbour(_card(Suit.HEARTS, 9), _card(Suit.HEARTS, 10), Direction.INCREASING)


def test_is_neighbour_wraps_check() -> None:
    assert is_neighbour(_card(Suit.SPADES, 4), JOKER, Direction.DECREASING)
    assert not is_neighbour(JOKER, JOKER, Direction.DECREASING)
