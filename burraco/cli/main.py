"""Typer entry-point wiring for the Burraco CLI."""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from ..cards import Card
from ..game import JOKERS_PER_DECK, Game, GameConfig, UnsupportedConfiguration, resolve_player_count
from ..melds import MIN_MELD_SIZE, Meld, MeldError, MeldOrderError, MeldSizeError
from ..order import RankMismatch, SuitMismatch
from .render import format_card, render_game, render_meld

app = typer.Typer(add_completion=False, rich_markup_mode="rich")
console = Console()
logger = logging.getLogger(__name__)


@app.callback()
def configure(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log setup details to stderr."),
) -> None:
    """Inspect Burraco deals and check melds."""

    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )


def _parse_cards(codes: list[str]) -> list[Card]:
    try:
        return [Card.parse(code) for code in codes]
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="CARDS") from exc


def _describe_meld_error(error: MeldError) -> str:
    if isinstance(error, MeldSizeError):
        return f"Too few cards: {error.size} given, at least {MIN_MELD_SIZE} needed."
    if isinstance(error, MeldOrderError):
        cause = error.cause
        pair = f"{format_card(cause.first)} → {format_card(cause.second)}"
        if isinstance(cause, SuitMismatch):
            reason = "suit mismatch"
        elif isinstance(cause, RankMismatch):
            reason = f"rank mismatch ({cause.direction.value})"
        else:  # pragma: no cover - no other order errors exist
            reason = str(cause)
        return f"Card {error.position}: {reason} between {pair}."
    return str(error)  # pragma: no cover - MeldError has two concrete subclasses


@app.command()
def deal(
    players: int = typer.Option(4, help="Number of seated players (2, 3 or 4)."),
    seed: int | None = typer.Option(None, help="Random seed for reproducible deals (omit for randomness)."),
    jokers: int = typer.Option(JOKERS_PER_DECK, min=0, help="Jokers added per deck."),
    reveal: bool = typer.Option(False, "--reveal/--hidden", help="Show every player's cards."),
) -> None:
    """Shuffle a fresh double deck and deal hands and refills."""

    try:
        config = GameConfig(player_count=resolve_player_count(players), jokers_per_deck=jokers, seed=seed)
    except UnsupportedConfiguration as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=2) from exc

    game = Game.new(config)
    logger.debug(f"Game ready with {game.player_count} player(s)")
    console.print(render_game(game, reveal=reveal))


@app.command()
def meld(
    cards: list[str] = typer.Argument(..., help="Card codes in play order, e.g. AS 2S 3S or JOKER."),
) -> None:
    """Check whether the given cards form a legal meld."""

    parsed = _parse_cards(cards)
    try:
        result = Meld(tuple(parsed))
    except MeldError as exc:
        console.print(f"[red]Invalid meld[/red]: {_describe_meld_error(exc)}")
        raise typer.Exit(code=1) from exc

    console.print(render_meld(result, title="Valid meld"))


def main() -> None:
    """Entry-point for the ``burraco`` console script."""

    app()


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    main()
