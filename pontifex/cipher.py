"""Solitaire stream cipher over the letters A-Z."""

from __future__ import annotations

from typing import Callable

from . import encoding
from .deck import Deck
from .keystream import Keystream

__all__ = ["encrypt", "decrypt"]


def _session(source: Deck | Keystream) -> Keystream:
    if isinstance(source, Keystream):
        return source
    return Keystream(source)


def _transform(message: str, source: Deck | Keystream, shift: Callable[[int, int], int]) -> str:
    stream = _session(source)
    letters = encoding.filter_letters(message)
    return "".join(
        encoding.position_letter(shift(encoding.letter_position(letter), stream.next_key()))
        for letter in letters
    )


def encrypt(message: str, source: Deck | Keystream) -> str:
    """Encrypt the letters of ``message`` with keys drawn from ``source``.

    Everything that is not an ASCII letter is dropped and the result is upper
    case. Passing a :class:`Deck` advances that deck in place, so decrypting
    requires a copy taken before encryption.
    """

    return _transform(message, source, encoding.shift_forward)


def decrypt(message: str, source: Deck | Keystream) -> str:
    """Invert :func:`encrypt` given a deck in the same starting order."""

    return _transform(message, source, encoding.shift_backward)
