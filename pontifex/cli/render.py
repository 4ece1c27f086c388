"""Rendering helpers dedicated to the CLI experience."""

from __future__ import annotations

from typing import Sequence

from rich import box
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table

from .. import encoding
from ..deck import Deck
from ..keystream import Keystream


def format_card(value: int, deck_size: int = encoding.DECK_SIZE) -> str:
    """Return a Rich-rendered label for a card value."""

    if value == encoding.joker_a(deck_size):
        return "[magenta]JA[/magenta]"
    if value == encoding.joker_b(deck_size):
        return "[magenta]JB[/magenta]"
    return f"[cyan]{value}[/cyan]"


def render_deck(deck: Deck, *, title: str = "Deck") -> RenderableType:
    """Return a panel listing the deck from top to bottom."""

    labels = " ".join(format_card(value, deck.size) for value in deck.values())
    grid = Table.grid(expand=True)
    grid.add_column(justify="left")
    grid.add_row(labels)
    top = format_card(deck.top, deck.size)
    bottom = format_card(deck.bottom, deck.size)
    grid.add_row(f"[dim]top[/dim] {top}  [dim]bottom[/dim] {bottom}")
    grid.add_row(f"[dim]checksum[/dim] {deck.checksum()}")
    return Panel(grid, title=title, border_style="cyan", box=box.ROUNDED)


def render_keystream(keys: Sequence[int], stream: Keystream) -> RenderableType:
    """Return a table of drawn keys followed by session statistics."""

    table = Table(title="Keystream", box=box.SIMPLE_HEAVY)
    table.add_column("#", justify="right")
    table.add_column("Key", justify="right")
    table.add_column("Letter", justify="center")
    for idx, key in enumerate(keys, start=1):
        letter = encoding.position_letter(key) if key <= encoding.ALPHABET_SIZE else "-"
        table.add_row(str(idx), str(key), letter)

    summary = Table.grid(expand=True)
    summary.add_column(justify="left")
    summary.add_row(f"[cyan]Keys[/cyan]: {stream.keys_emitted}")
    summary.add_row(f"[cyan]Rounds[/cyan]: {stream.rounds_run}")
    summary.add_row(f"[cyan]Rejected jokers[/cyan]: {stream.rejections}")
    return Group(table, Panel(summary, title="Session", border_style="blue", box=box.SQUARE))
