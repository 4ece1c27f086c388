"""Card value and letter encoding utilities for Pontifex."""

from __future__ import annotations

import string
from typing import Final, Iterable

DECK_SIZE: Final[int] = 28
ALPHABET: Final[str] = string.ascii_uppercase
ALPHABET_SIZE: Final[int] = len(ALPHABET)
LETTER_TO_POS: Final[dict[str, int]] = {letter: idx + 1 for idx, letter in enumerate(ALPHABET)}
POS_TO_LETTER: Final[dict[int, str]] = {pos: letter for letter, pos in LETTER_TO_POS.items()}
MIN_DECK_SIZE: Final[int] = 3


def joker_a(deck_size: int = DECK_SIZE) -> int:
    """Return the value carried by joker A for a deck of ``deck_size`` cards."""

    return deck_size - 1


def joker_b(deck_size: int = DECK_SIZE) -> int:
    """Return the value carried by joker B for a deck of ``deck_size`` cards."""

    return deck_size


def joker_ids(deck_size: int = DECK_SIZE) -> tuple[int, int]:
    return joker_a(deck_size), joker_b(deck_size)


def is_joker(value: int, deck_size: int = DECK_SIZE) -> bool:
    """Return ``True`` if ``value`` is one of the two jokers."""

    return value in (deck_size - 1, deck_size)


def count_value(value: int, deck_size: int = DECK_SIZE) -> int:
    """Return the count a card contributes to cuts and key lookup.

    Joker B counts as joker A; every other card counts as its face value.
    """

    if value == joker_b(deck_size):
        return joker_a(deck_size)
    return value


def filter_letters(message: str) -> str:
    """Return the ASCII letters of ``message`` in upper case, dropping the rest."""

    return "".join(ch for ch in message.upper() if ch in LETTER_TO_POS)


def letter_position(letter: str) -> int:
    """Return the 1-based alphabet position of ``letter`` (A=1 ... Z=26)."""

    try:
        return LETTER_TO_POS[letter.upper()]
    except KeyError:
        raise ValueError(f"'{letter}' is not an ASCII letter") from None


def position_letter(position: int) -> str:
    """Return the letter at 1-based ``position``."""

    try:
        return POS_TO_LETTER[position]
    except KeyError:
        raise ValueError(f"alphabet position {position} out of range") from None


def shift_forward(position: int, key: int) -> int:
    """Add ``key`` to ``position`` wrapping into ``[1, 26]``."""

    shifted = position + key
    while shifted > ALPHABET_SIZE:
        shifted -= ALPHABET_SIZE
    return shifted


def shift_backward(position: int, key: int) -> int:
    """Subtract ``key`` from ``position`` wrapping into ``[1, 26]``."""

    shifted = position - key
    while shifted <= 0:
        shifted += ALPHABET_SIZE
    return shifted


def format_values(values: Iterable[int]) -> str:
    return ",".join(str(value) for value in values)
