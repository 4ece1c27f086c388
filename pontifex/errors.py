"""Exception hierarchy raised by the Pontifex core."""

from __future__ import annotations

__all__ = ["DeckError", "InvalidDeckError", "EmptyDeckError", "RejectionLimitError"]


class DeckError(Exception):
    """Base class for every deck related failure."""


class InvalidDeckError(DeckError, ValueError):
    """Raised when an ordering is not a permutation of ``1..N``."""


class EmptyDeckError(DeckError, RuntimeError):
    """Raised when an operation finds the deck in a state it can never reach
    through validated construction (missing storage, absent joker, bad anchor)."""


class RejectionLimitError(EmptyDeckError):
    """Raised when the keystream rejects joker candidates an implausible
    number of times in a row."""

    def __init__(self, rejections: int) -> None:
        super().__init__(f"keystream rejected {rejections} consecutive joker candidates")
        self.rejections = rejections
