"""Card abstractions and helpers for Burraco."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Final, Iterable

RANK_MIN: Final[int] = 1
RANK_MAX: Final[int] = 13
RANK_LABELS: Final[tuple[str, ...]] = (
    "A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K",
)
JOKER_CODE: Final[str] = "JOKER"


class RankOutOfRange(ValueError):
    """Raised when a rank is built from a value outside ``1..13``."""

    def __init__(self, value: int) -> None:
        super().__init__(f"rank must be between {RANK_MIN} and {RANK_MAX}, got {value}")
        self.value = value


class Suit(str, Enum):
    """Enumeration of the four suits in a Burraco deck."""

    HEARTS = "H"
    SPADES = "S"
    CLUBS = "C"
    DIAMONDS = "D"


class Face(IntEnum):
    """Court cards mapped onto their numeric rank."""

    JACK = 11
    QUEEN = 12
    KING = 13


@dataclass(frozen=True, slots=True)
class Rank:
    """Numeric rank of a standard card, Ace low at ``1`` and King at ``13``."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"rank must be an integer, got {self.value!r}")
        if not RANK_MIN <= self.value <= RANK_MAX:
            raise RankOutOfRange(self.value)
        object.__setattr__(self, "value", int(self.value))

    def __int__(self) -> int:
        return self.value

    @property
    def label(self) -> str:
        return RANK_LABELS[self.value - 1]

    @classmethod
    def from_label(cls, label: str) -> "Rank":
        """Parse a display label such as ``"A"``, ``"10"`` or ``"q"``."""

        try:
            index = RANK_LABELS.index(label.upper())
        except ValueError:
            raise ValueError(f"unknown rank label '{label}'") from None
        return cls(index + 1)


@dataclass(frozen=True, slots=True)
class Card:
    """Value object describing a physical Burraco card.

    A card is either standard (both ``suit`` and ``rank`` set) or a Joker
    (neither set). Jokers carry no suit or rank and act as wildcards in melds.
    """

    suit: Suit | None = None
    rank: Rank | None = None

    def __post_init__(self) -> None:
        if (self.suit is None) != (self.rank is None):
            raise ValueError("a card needs both suit and rank, or neither for a Joker")
        if self.suit is not None and not isinstance(self.suit, Suit):
            raise TypeError(f"suit must be a Suit, got {self.suit!r}")
        if self.rank is not None and not isinstance(self.rank, Rank):
            object.__setattr__(self, "rank", Rank(self.rank))

    @classmethod
    def standard(cls, suit: Suit, rank: Rank | int) -> "Card":
        return cls(suit=suit, rank=rank)

    @classmethod
    def joker(cls) -> "Card":
        return cls()

    @classmethod
    def ace(cls, suit: Suit) -> "Card":
        return cls.standard(suit, RANK_MIN)

    @classmethod
    def face(cls, suit: Suit, face: Face) -> "Card":
        return cls.standard(suit, int(face))

    @classmethod
    def parse(cls, code: str) -> "Card":
        """Parse a compact code like ``"AS"``, ``"10h"`` or ``"joker"``."""

        text = code.strip().upper()
        if text == JOKER_CODE:
            return cls.joker()
        if len(text) < 2:
            raise ValueError(f"invalid card code '{code}'")
        try:
            suit = Suit(text[-1])
        except ValueError:
            raise ValueError(f"invalid suit in card code '{code}'") from None
        return cls(suit=suit, rank=Rank.from_label(text[:-1]))

    @property
    def is_joker(self) -> bool:
        """Return ``True`` when the card represents a Joker."""

        return self.rank is None

    @property
    def code(self) -> str:
        if self.rank is None or self.suit is None:
            return JOKER_CODE
        return f"{self.rank.label}{self.suit.value}"

    def __str__(self) -> str:
        return self.code


def iter_suit(suit: Suit) -> Iterable[Card]:
    """Yield the thirteen cards of ``suit`` from Ace to King."""

    for value in range(RANK_MIN, RANK_MAX + 1):
        yield Card.standard(suit, value)


def iter_standard_deck() -> Iterable[Card]:
    """Yield a single 52-card deck without Jokers."""

    for suit in (Suit.SPADES, Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS):
        yield from iter_suit(suit)


def iter_full_deck(copies: int = 2, jokers_per_deck: int = 2) -> Iterable[Card]:
    """Yield all physical cards of ``copies`` combined decks plus their Jokers."""

    if copies < 0 or jokers_per_deck < 0:
        raise ValueError("deck copies and joker count must be non-negative")
    for _ in range(copies):
        yield from iter_standard_deck()
        for _ in range(jokers_per_deck):
            yield Card.joker()
