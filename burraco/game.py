"""Game setup: deck composition, teams, dealing and refills."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Final, Iterable, Iterator, Sequence

from .cards import Card, iter_full_deck
from .melds import Meld
from .piles import Pile

__all__ = [
    "HAND_SIZE",
    "REFILL_COUNT",
    "DECK_COPIES",
    "JOKERS_PER_DECK",
    "PlayerCount",
    "TEAM_SHAPES",
    "UnsupportedConfiguration",
    "RefillUnavailable",
    "GameConfig",
    "Player",
    "Team",
    "Game",
    "resolve_player_count",
    "build_deck",
    "deal_teams",
]

logger = logging.getLogger(__name__)

HAND_SIZE: Final[int] = 11
REFILL_COUNT: Final[int] = 2
DECK_COPIES: Final[int] = 2
JOKERS_PER_DECK: Final[int] = 2


class PlayerCount(IntEnum):
    """Table sizes the game knows about."""

    TWO = 2
    THREE = 3
    FOUR = 4
    SIX = 6


# Players per team for each supported table size.
TEAM_SHAPES: Final[dict[PlayerCount, tuple[int, ...]]] = {
    PlayerCount.TWO: (1, 1),
    PlayerCount.THREE: (1, 1, 1),
    PlayerCount.FOUR: (2, 2),
}


class UnsupportedConfiguration(ValueError):
    """Raised when a table size has no defined team shape."""


class RefillUnavailable(RuntimeError):
    """Raised when a player attempts to take a refill illegally."""


def resolve_player_count(count: int) -> PlayerCount:
    """Return the ``PlayerCount`` for ``count`` if it can be dealt."""

    try:
        player_count = PlayerCount(count)
    except ValueError:
        raise UnsupportedConfiguration(f"{count} players is not a known table size") from None
    if player_count not in TEAM_SHAPES:
        raise UnsupportedConfiguration(f"{count}-player games are not supported yet")
    return player_count


@dataclass(frozen=True, slots=True)
class GameConfig:
    """Runtime configuration for setting up a single game."""

    player_count: PlayerCount = PlayerCount.FOUR
    hand_size: int = HAND_SIZE
    refill_count: int = REFILL_COUNT
    deck_copies: int = DECK_COPIES
    jokers_per_deck: int = JOKERS_PER_DECK
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.hand_size <= 0:
            raise ValueError("hand_size must be positive")
        if self.refill_count < 0:
            raise ValueError("refill_count must be non-negative")
        if self.deck_copies < 0:
            raise ValueError("deck_copies must be non-negative")
        if self.jokers_per_deck < 0:
            raise ValueError("jokers_per_deck must be non-negative")

    def team_shape(self) -> tuple[int, ...]:
        """Return the number of players in each team."""

        return TEAM_SHAPES[resolve_player_count(self.player_count)]

    @property
    def deck_size(self) -> int:
        return self.deck_copies * (52 + self.jokers_per_deck)


@dataclass(slots=True)
class Player:
    """A seated player with a private hand."""

    hand: Pile
    refill_used: bool = False


@dataclass(slots=True)
class Team:
    """Players sharing the melds they have laid on the table."""

    players: list[Player]
    melds: list[Meld] = field(default_factory=list)

    @property
    def size(self) -> int:
        return len(self.players)

    def lay_down(self, player_index: int, cards: Sequence[Card]) -> Meld:
        """Validate ``cards`` as a meld and move them from the player's hand.

        Meld errors propagate unchanged and leave the hand untouched.
        """

        player = self.players[player_index]
        meld = Meld(tuple(cards))
        player.hand.remove(meld.cards)
        self.melds.append(meld)
        logger.info(f"Player {player_index} laid down {meld.code}")
        return meld


def build_deck(copies: int = DECK_COPIES, jokers_per_deck: int = JOKERS_PER_DECK) -> Pile:
    """Return an unshuffled pile of ``copies`` standard decks plus Jokers."""

    return Pile(list(iter_full_deck(copies, jokers_per_deck)))


def deal_teams(deck: Pile, shape: Iterable[int], hand_size: int = HAND_SIZE) -> list[Team]:
    """Deal ``hand_size`` cards to every player of every team in ``shape``."""

    teams: list[Team] = []
    for size in shape:
        players = [Player(hand=deck.draw_n(hand_size)) for _ in range(size)]
        teams.append(Team(players=players))
    logger.debug(f"Dealt {len(teams)} team(s), {len(deck)} card(s) remain")
    return teams


@dataclass(slots=True)
class Game:
    """Table state after setup: teams, refills, the deck and the discard pile."""

    config: GameConfig
    teams: list[Team]
    refills: list[Pile]
    deck: Pile
    table: Pile = field(default_factory=Pile)

    @classmethod
    def new(cls, config: GameConfig | None = None, rng: random.Random | None = None) -> "Game":
        """Build, shuffle and deal a fresh game."""

        config = config or GameConfig()
        shape = config.team_shape()
        if rng is None and config.seed is not None:
            rng = random.Random(config.seed)

        deck = build_deck(config.deck_copies, config.jokers_per_deck)
        deck.shuffle(rng)
        logger.debug(f"Shuffled a deck of {len(deck)} card(s)")

        teams = deal_teams(deck, shape, config.hand_size)
        refills = [deck.draw_n(config.hand_size) for _ in range(config.refill_count)]
        return cls(config=config, teams=teams, refills=refills, deck=deck)

    @property
    def players(self) -> Iterator[Player]:
        for team in self.teams:
            yield from team.players

    @property
    def player_count(self) -> int:
        return sum(team.size for team in self.teams)

    @property
    def remaining(self) -> int:
        """Number of cards left in the draw deck."""

        return len(self.deck)

    def take_refill(self, team_index: int, player_index: int) -> Pile:
        """Move the next refill into the player's hand and return that hand."""

        player = self.teams[team_index].players[player_index]
        if player.refill_used:
            raise RefillUnavailable("player has already taken a refill")
        if not self.refills:
            raise RefillUnavailable("no refills remain")
        refill = self.refills.pop(0)
        player.hand.extend(refill)
        player.refill_used = True
        logger.info(
            f"Team {team_index} player {player_index} took a refill, {len(self.refills)} left"
        )
        return player.hand
