"""Rendering helpers dedicated to the CLI experience."""

from __future__ import annotations

from typing import Iterable

from rich import box
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table

from ..cards import Card, Suit
from ..game import Game
from ..melds import Meld

_SUIT_SYMBOLS = {
    Suit.SPADES: ("♠", "cyan"),
    Suit.HEARTS: ("♥", "red"),
    Suit.DIAMONDS: ("♦", "magenta"),
    Suit.CLUBS: ("♣", "green"),
}


def format_card(card: Card) -> str:
    """Return a Rich-rendered label for ``card``."""

    if card.rank is None or card.suit is None:
        return "[bold magenta]🃏[/bold magenta]"
    symbol, color = _SUIT_SYMBOLS[card.suit]
    return f"[{color}]{card.rank.label}{symbol}[/{color}]"


def format_cards(cards: Iterable[Card]) -> str:
    rendered = " ".join(format_card(card) for card in cards)
    return rendered or "—"


def render_meld(meld: Meld, *, title: str = "Meld") -> RenderableType:
    return Panel(format_cards(meld), title=title, border_style="green", box=box.ROUNDED)


def render_game(game: Game, *, reveal: bool = False, title: str = "Burraco") -> RenderableType:
    """Return a Rich panel describing the dealt table."""

    table = Table(box=box.ROUNDED, expand=True)
    table.add_column("Team", justify="left", style="bold")
    table.add_column("Player", justify="left")
    table.add_column("Hand", justify="left")
    table.add_column("Refill", justify="left")

    for team_index, team in enumerate(game.teams):
        for player_index, player in enumerate(team.players):
            hand = format_cards(player.hand) if reveal else f"{len(player.hand)} cards"
            refill = "Used" if player.refill_used else "—"
            table.add_row(f"T{team_index}", f"P{player_index}", hand, refill)

    meta = Table.grid(expand=True)
    meta.add_column(justify="left")
    meta.add_row(f"[cyan]Deck[/cyan]: {game.remaining} card(s)")
    meta.add_row(f"[cyan]Refills[/cyan]: {', '.join(str(len(r)) for r in game.refills) or '—'}")
    meta.add_row(f"[cyan]Table[/cyan]: {len(game.table)} card(s)")

    components: list[RenderableType] = [
        table,
        Panel(meta, title="Table State", box=box.SQUARE, border_style="blue"),
    ]
    return Panel(Group(*components), title=title, padding=(0, 1), border_style="cyan")
