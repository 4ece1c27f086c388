"""The four deck operations that make up one keystream round.

Every step mutates the deck in place and locates jokers by value, since their
positions are a product of all previous rounds.
"""

from __future__ import annotations

import logging

from . import encoding
from .deck import Deck
from .errors import EmptyDeckError

__all__ = ["joker_a", "joker_b", "triple_cut", "count_cut", "run_round"]

logger = logging.getLogger(__name__)


def _step_joker(deck: Deck, value: int, moves: int) -> None:
    deck.ensure_ready()
    if len(deck) < 2:  # pragma: no cover - unreachable for validated decks
        return
    index = deck.index_of(value)
    for _ in range(moves):
        following = deck.successor(index)
        deck.swap(index, following)
        index = following


def joker_a(deck: Deck) -> None:
    """Swap joker A with the card immediately after it."""

    _step_joker(deck, deck.joker_a, 1)


def joker_b(deck: Deck) -> None:
    """Move joker B two cards down, swapping through each card in turn."""

    _step_joker(deck, deck.joker_b, 2)


def triple_cut(deck: Deck) -> None:
    """Exchange the cards above the first joker with the cards below the second.

    The jokers and everything between them keep their internal order. When a
    joker is already the top or the bottom card one of the outer segments is
    empty and only the anchor needs to move.
    """

    deck.require_jokers()
    jokers = encoding.joker_ids(deck.size)

    if deck.top in jokers:
        # Nothing above the first joker: the second joker becomes the bottom.
        index = deck.successor(deck.top_index)
        while deck.value_at(index) not in jokers:
            index = deck.successor(index)
        deck.move_anchor(index)
        logger.debug("triple cut: joker on top, anchor moved to second joker")
        return

    if deck.bottom in jokers:
        # Nothing below the second joker: the card above the first joker becomes the bottom.
        index = deck.top_index
        while deck.value_at(index) not in jokers:
            index = deck.successor(index)
        deck.move_anchor(deck.predecessor(index))
        logger.debug("triple cut: joker on bottom, anchor moved above first joker")
        return

    ordering = deck.values()
    first = next(idx for idx, value in enumerate(ordering) if value in jokers)
    second = next(idx for idx in range(first + 1, len(ordering)) if ordering[idx] in jokers)
    above = ordering[:first]
    between = ordering[first : second + 1]
    below = ordering[second + 1 :]
    deck.relink(below + between + above)
    logger.debug("triple cut: moved %d cards above and %d cards below", len(above), len(below))


def count_cut(deck: Deck) -> None:
    """Move as many top cards as the bottom card's value to just above the bottom card.

    A joker on the bottom leaves the deck untouched.
    """

    deck.require_jokers()
    count = encoding.count_value(deck.bottom, deck.size)
    if count == deck.joker_a:
        logger.debug("count cut skipped: joker on bottom")
        return
    if not 1 <= count < len(deck) - 1:
        raise EmptyDeckError(f"bottom card {count} cannot drive a count cut")

    ordering = deck.values()
    bottom = ordering.pop()
    deck.relink(ordering[count:] + ordering[:count] + [bottom])


def run_round(deck: Deck) -> None:
    """Apply joker A, joker B, triple cut and count cut in that order."""

    joker_a(deck)
    joker_b(deck)
    triple_cut(deck)
    count_cut(deck)
