"""Circular deck storage for the Pontifex keystream."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Iterable, Iterator, List

import numpy as np
from numpy.typing import NDArray

from . import encoding
from .errors import EmptyDeckError, InvalidDeckError

__all__ = ["Deck", "validate_ordering"]

logger = logging.getLogger(__name__)

UInt16Array = NDArray[np.uint16]


def validate_ordering(values: Iterable[int], deck_size: int = encoding.DECK_SIZE) -> List[int]:
    """Return ``values`` as a list after checking it is a permutation of ``1..deck_size``.

    Raises :class:`InvalidDeckError` naming the first problem found.
    """

    if deck_size < encoding.MIN_DECK_SIZE:
        raise InvalidDeckError(f"deck size must be at least {encoding.MIN_DECK_SIZE}, got {deck_size}")

    ordering: List[int] = []
    for value in values:
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise InvalidDeckError(f"card value {value!r} is not an integer")
        ordering.append(int(value))

    seen: set[int] = set()
    for value in ordering:
        if not 1 <= value <= deck_size:
            raise InvalidDeckError(f"card value {value} out of range 1..{deck_size}")
        if value in seen:
            raise InvalidDeckError(f"duplicate card value {value}")
        seen.add(value)

    missing = sorted(set(range(1, deck_size + 1)) - seen)
    if missing:
        for joker in encoding.joker_ids(deck_size):
            if joker in missing:
                raise InvalidDeckError(f"deck is missing joker {joker}")
        raise InvalidDeckError(
            f"expected {deck_size} cards, got {len(ordering)} (missing {encoding.format_values(missing)})"
        )
    return ordering


@dataclass(slots=True, eq=False)
class Deck:
    """Cards stored in circular order with a designated ``rear`` anchor.

    ``cards`` holds the card values; the card after index ``rear`` (wrapping
    around the end of the array) is the top of the deck and ``cards[rear]``
    is the bottom. Positions are plain array indices, so every lookup in
    either direction is a modular step.
    """

    cards: UInt16Array
    rear: int

    def __post_init__(self) -> None:
        ordering = validate_ordering(np.asarray(self.cards).tolist(), len(self.cards))
        self.cards = np.array(ordering, dtype=np.uint16)
        if not 0 <= self.rear < len(self.cards):
            raise InvalidDeckError(f"rear index {self.rear} out of range")

    @classmethod
    def from_values(cls, values: Iterable[int], deck_size: int = encoding.DECK_SIZE) -> "Deck":
        """Build a deck whose top card is the first of ``values``."""

        ordering = validate_ordering(values, deck_size)
        logger.debug("deck loaded from explicit ordering of %d cards", deck_size)
        return cls(np.array(ordering, dtype=np.uint16), deck_size - 1)

    @classmethod
    def identity(cls, deck_size: int = encoding.DECK_SIZE) -> "Deck":
        """Return the unshuffled deck ``1..deck_size`` with card 1 on top."""

        return cls.from_values(range(1, deck_size + 1), deck_size)

    @classmethod
    def shuffled(cls, rng: random.Random | None = None, deck_size: int = encoding.DECK_SIZE) -> "Deck":
        """Return a uniformly shuffled deck drawn from ``rng``."""

        if deck_size < encoding.MIN_DECK_SIZE:
            raise InvalidDeckError(f"deck size must be at least {encoding.MIN_DECK_SIZE}, got {deck_size}")
        source = rng if rng is not None else random.Random()
        values = list(range(1, deck_size + 1))
        source.shuffle(values)
        logger.debug("deck shuffled (%d cards)", deck_size)
        return cls(np.array(values, dtype=np.uint16), deck_size - 1)

    @property
    def size(self) -> int:
        return len(self.cards)

    @property
    def joker_a(self) -> int:
        return encoding.joker_a(self.size)

    @property
    def joker_b(self) -> int:
        return encoding.joker_b(self.size)

    @property
    def top_index(self) -> int:
        self.ensure_ready()
        return self.successor(self.rear)

    @property
    def top(self) -> int:
        """Value of the card after the anchor."""

        return self.value_at(self.top_index)

    @property
    def bottom(self) -> int:
        """Value of the anchor card."""

        self.ensure_ready()
        return self.value_at(self.rear)

    def ensure_ready(self) -> None:
        """Raise :class:`EmptyDeckError` if the storage cannot be traversed."""

        if len(self.cards) == 0:
            raise EmptyDeckError("deck holds no cards")
        if not 0 <= self.rear < len(self.cards):
            raise EmptyDeckError(f"rear index {self.rear} outside deck of {len(self.cards)} cards")

    def successor(self, index: int) -> int:
        return (index + 1) % len(self.cards)

    def predecessor(self, index: int) -> int:
        return (index - 1) % len(self.cards)

    def advance(self, index: int, steps: int) -> int:
        """Return the index reached after ``steps`` successor moves."""

        return (index + steps) % len(self.cards)

    def value_at(self, index: int) -> int:
        return int(self.cards[index])

    def swap(self, first: int, second: int) -> None:
        """Exchange the values stored at two indices; the anchor stays put."""

        self.cards[first], self.cards[second] = self.cards[second], self.cards[first]

    def index_of(self, value: int) -> int:
        """Return the index carrying ``value``."""

        self.ensure_ready()
        matches = np.flatnonzero(self.cards == value)
        if len(matches) != 1:
            raise EmptyDeckError(f"card {value} appears {len(matches)} times in deck")
        return int(matches[0])

    def require_jokers(self) -> None:
        """Raise :class:`EmptyDeckError` unless both jokers appear exactly once."""

        for joker in encoding.joker_ids(self.size):
            self.index_of(joker)

    def move_anchor(self, index: int) -> None:
        """Redefine the bottom card without moving any card."""

        self.rear = index % len(self.cards)

    def relink(self, ordering: List[int]) -> None:
        """Replace the deck with ``ordering`` read from the top; the last value becomes the bottom."""

        if len(ordering) != len(self.cards):
            raise EmptyDeckError(f"relink expected {len(self.cards)} cards, got {len(ordering)}")
        self.cards = np.array(ordering, dtype=np.uint16)
        self.rear = len(ordering) - 1

    def values(self) -> List[int]:
        """Return card values in traversal order, top card first."""

        self.ensure_ready()
        return np.roll(self.cards, -(self.rear + 1)).tolist()

    def checksum(self) -> str:
        """Return a rotation-independent fingerprint starting from card 1."""

        ordering = self.values()
        start = ordering.index(1)
        return encoding.format_values(ordering[start:] + ordering[:start])

    def copy(self) -> "Deck":
        """Return an independent deck with the same ordering and anchor."""

        return Deck(self.cards.copy(), self.rear)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[int]:
        return iter(self.values())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Deck):
            return NotImplemented
        return self.values() == other.values()

    def __str__(self) -> str:
        return encoding.format_values(self.values())
