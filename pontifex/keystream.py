"""Keystream generation on top of the deck operations."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List

from . import encoding
from .deck import Deck
from .errors import EmptyDeckError, InvalidDeckError, RejectionLimitError
from .steps import run_round

__all__ = ["KeystreamConfig", "Keystream", "candidate_key"]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class KeystreamConfig:
    """Configuration values for a keystream session."""

    deck_size: int = encoding.DECK_SIZE
    max_rejections: int = 1000


def candidate_key(deck: Deck) -> int:
    """Return the card found by counting down the top card's value.

    Joker B on top counts as joker A. The result may itself be a joker.
    """

    deck.require_jokers()
    count = encoding.count_value(deck.top, deck.size)
    if not 1 <= count < len(deck):
        raise EmptyDeckError(f"top card {count} cannot drive key extraction")
    return deck.value_at(deck.successor(deck.advance(deck.rear, count)))


@dataclass(slots=True)
class Keystream:
    """A live deck paired with bookkeeping on the values drawn from it.

    The deck is advanced in place and never reset, so two sessions only agree
    when they start from identical orderings.
    """

    deck: Deck
    config: KeystreamConfig | None = None
    keys_emitted: int = 0
    rounds_run: int = 0
    rejections: int = 0

    def __post_init__(self) -> None:
        if self.config is None:
            self.config = KeystreamConfig(deck_size=self.deck.size)
        if self.config.max_rejections < 1:
            raise ValueError("max_rejections must be positive")
        if self.deck.size != self.config.deck_size:
            raise InvalidDeckError(
                f"deck holds {self.deck.size} cards but keystream expects {self.config.deck_size}"
            )

    def next_key(self) -> int:
        """Run rounds until a non-joker candidate appears and return it."""

        consecutive = 0
        while True:
            run_round(self.deck)
            self.rounds_run += 1
            candidate = candidate_key(self.deck)
            if not encoding.is_joker(candidate, self.deck.size):
                self.keys_emitted += 1
                return candidate
            self.rejections += 1
            consecutive += 1
            logger.debug("rejected joker candidate %d (round %d)", candidate, self.rounds_run)
            if consecutive >= self.config.max_rejections:
                raise RejectionLimitError(consecutive)

    def take(self, count: int) -> List[int]:
        """Return the next ``count`` key values."""

        if count < 0:
            raise ValueError("count must be non-negative")
        return [self.next_key() for _ in range(count)]

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        return self.next_key()
