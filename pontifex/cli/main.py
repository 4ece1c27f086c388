"""Typer entry-point wiring for the Pontifex CLI."""

from __future__ import annotations

import logging
import random
from pathlib import Path

import typer
from rich.console import Console

from .. import deckfile, encoding
from ..cipher import decrypt, encrypt
from ..deck import Deck
from ..errors import DeckError
from ..keystream import Keystream, KeystreamConfig
from ..logging_utils import LOG_LEVEL, setup_logging
from ..steps import run_round
from .render import render_deck, render_keystream

app = typer.Typer(add_completion=False, rich_markup_mode="rich")
console = Console()
logger = logging.getLogger(__name__)

DeckOption = typer.Option(None, "--deck", "-d", help="File holding the starting deck, top card first.")
SeedOption = typer.Option(None, "--seed", "-s", help="Shuffle the starting deck from this seed instead.")
SizeOption = typer.Option(encoding.DECK_SIZE, "--size", min=encoding.MIN_DECK_SIZE, help="Number of cards in the deck.")


def _fail(message: str) -> typer.Exit:
    console.print(f"[bold red]Error:[/bold red] {message}")
    return typer.Exit(code=1)


def _load_deck(deck_path: Path | None, seed: int | None, size: int) -> Deck:
    if deck_path is not None and seed is not None:
        raise typer.BadParameter("Use either --deck or --seed, not both.")
    if deck_path is None and seed is None:
        raise typer.BadParameter("A starting deck is required: pass --deck or --seed.")
    try:
        if deck_path is not None:
            return deckfile.load_deck(deck_path, size)
        return Deck.shuffled(random.Random(seed), size)
    except (DeckError, OSError) as exc:
        raise _fail(str(exc)) from exc


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Solitaire keystream cipher tools."""

    setup_logging("DEBUG" if verbose else LOG_LEVEL)


@app.command("encrypt")
def encrypt_cli(
    message: str = typer.Argument(..., help="Plain text; only letters are kept."),
    deck: Path | None = DeckOption,
    seed: int | None = SeedOption,
    size: int = SizeOption,
) -> None:
    """Encrypt MESSAGE with the starting deck."""

    starting = _load_deck(deck, seed, size)
    try:
        console.print(encrypt(message, starting))
    except DeckError as exc:
        raise _fail(str(exc)) from exc


@app.command("decrypt")
def decrypt_cli(
    message: str = typer.Argument(..., help="Cipher text; only letters are kept."),
    deck: Path | None = DeckOption,
    seed: int | None = SeedOption,
    size: int = SizeOption,
) -> None:
    """Decrypt MESSAGE with the starting deck."""

    starting = _load_deck(deck, seed, size)
    try:
        console.print(decrypt(message, starting))
    except DeckError as exc:
        raise _fail(str(exc)) from exc


@app.command("keystream")
def keystream_cli(
    count: int = typer.Argument(10, min=0, help="Number of key values to draw."),
    deck: Path | None = DeckOption,
    seed: int | None = SeedOption,
    size: int = SizeOption,
    max_rejections: int = typer.Option(1000, min=1, help="Consecutive joker candidates tolerated."),
) -> None:
    """Print the first COUNT key values produced by the starting deck."""

    starting = _load_deck(deck, seed, size)
    stream = Keystream(starting, KeystreamConfig(deck_size=size, max_rejections=max_rejections))
    try:
        keys = stream.take(count)
    except DeckError as exc:
        raise _fail(str(exc)) from exc
    logger.debug("drew %d keys in %d rounds", len(keys), stream.rounds_run)
    console.print(render_keystream(keys, stream))


@app.command("shuffle")
def shuffle_cli(
    seed: int | None = typer.Option(None, "--seed", "-s", help="Random seed (omit for randomness)."),
    size: int = SizeOption,
    output: Path | None = typer.Option(None, "--output", "-o", help="Write the deck here instead of stdout."),
) -> None:
    """Generate a shuffled deck file."""

    shuffled = Deck.shuffled(random.Random(seed), size)
    if output is None:
        typer.echo(deckfile.dump_deck(shuffled), nl=False)
        return
    try:
        deckfile.save_deck(shuffled, output)
    except OSError as exc:
        raise _fail(str(exc)) from exc
    console.print(f"[green]Wrote {size} cards to {output}[/green]")


@app.command("show")
def show_cli(
    deck: Path | None = DeckOption,
    seed: int | None = SeedOption,
    size: int = SizeOption,
    rounds: int = typer.Option(0, min=0, help="Apply this many full rounds before showing."),
) -> None:
    """Render a deck, optionally after running some rounds."""

    starting = _load_deck(deck, seed, size)
    try:
        for _ in range(rounds):
            run_round(starting)
    except DeckError as exc:
        raise _fail(str(exc)) from exc
    title = "Deck" if rounds == 0 else f"Deck after {rounds} round(s)"
    console.print(render_deck(starting, title=title))


def main() -> None:
    """Entry-point for ``python -m pontifex.cli.main``."""

    app()


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    main()
