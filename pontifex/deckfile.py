"""Reading and writing deck orderings as plain text."""

from __future__ import annotations

import logging
from pathlib import Path

from . import encoding
from .deck import Deck
from .errors import InvalidDeckError

__all__ = ["parse_deck", "load_deck", "dump_deck", "save_deck"]

logger = logging.getLogger(__name__)


def parse_deck(text: str, deck_size: int = encoding.DECK_SIZE) -> Deck:
    """Parse whitespace-separated card values, top card first.

    Anything after ``#`` on a line is ignored.
    """

    values: list[int] = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        content = line.split("#", maxsplit=1)[0]
        for token in content.split():
            try:
                values.append(int(token))
            except ValueError:
                raise InvalidDeckError(f"line {line_number}: '{token}' is not an integer") from None
    return Deck.from_values(values, deck_size)


def load_deck(path: str | Path, deck_size: int = encoding.DECK_SIZE) -> Deck:
    """Read a deck from ``path``."""

    deck_path = Path(path)
    logger.debug("loading deck from %s", deck_path)
    return parse_deck(deck_path.read_text(encoding="utf-8"), deck_size)


def dump_deck(deck: Deck) -> str:
    """Return ``deck`` as text with one card value per line."""

    return "".join(f"{value}\n" for value in deck.values())


def save_deck(deck: Deck, path: str | Path) -> None:
    deck_path = Path(path)
    deck_path.write_text(dump_deck(deck), encoding="utf-8")
    logger.debug("saved deck to %s", deck_path)
