"""Top-level package for the Burraco rules engine."""

from . import cards, game, melds, order, piles

__all__ = [
    "cards",
    "game",
    "melds",
    "order",
    "piles",
]
