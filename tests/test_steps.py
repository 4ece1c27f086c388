"""Tests covering the joker moves, triple cut and count cut."""

from __future__ import annotations

import numpy as np
import pytest

from pontifex import steps
from pontifex.deck import Deck
from pontifex.errors import EmptyDeckError


def small_deck(values: list[int]) -> Deck:
    return Deck.from_values(values, deck_size=len(values))


def test_joker_a_swaps_with_following_card(identity_deck: Deck) -> None:
    steps.joker_a(identity_deck)
    assert identity_deck.values() == list(range(1, 27)) + [28, 27]
    assert identity_deck.rear == 27


def test_joker_a_wraps_from_bottom_to_top() -> None:
    deck = Deck.from_values(list(range(1, 27)) + [28, 27])
    steps.joker_a(deck)
    assert deck.values() == [27] + list(range(2, 27)) + [28, 1]
    assert deck.top == 27
    assert deck.bottom == 1


def test_joker_b_moves_two_cards_down() -> None:
    deck = Deck.from_values([1, 28] + list(range(2, 28)))
    steps.joker_b(deck)
    assert deck.values() == [1, 2, 3, 28] + list(range(4, 28))


def test_joker_b_wraps_past_the_anchor(identity_deck: Deck) -> None:
    steps.joker_b(identity_deck)
    assert identity_deck.values() == [2, 28] + list(range(3, 28)) + [1]


def test_joker_b_matches_two_single_swaps(identity_deck: Deck) -> None:
    expected = identity_deck.copy()
    index = expected.index_of(28)
    for _ in range(2):
        following = expected.successor(index)
        expected.swap(index, following)
        index = following

    steps.joker_b(identity_deck)
    assert identity_deck == expected


@pytest.mark.parametrize(
    ("values", "expected"),
    [
        ([1, 2, 7, 3, 8, 4, 5, 6], [4, 5, 6, 7, 3, 8, 1, 2]),
        ([1, 8, 2, 7, 3, 4, 5, 6], [3, 4, 5, 6, 8, 2, 7, 1]),
        ([1, 2, 3, 7, 8, 4, 5, 6], [4, 5, 6, 7, 8, 1, 2, 3]),
    ],
)
def test_triple_cut_general_case(values: list[int], expected: list[int]) -> None:
    deck = small_deck(values)
    steps.triple_cut(deck)
    assert deck.values() == expected


@pytest.mark.parametrize(
    ("values", "expected", "rear"),
    [
        ([7, 1, 2, 8, 3, 4, 5, 6], [3, 4, 5, 6, 7, 1, 2, 8], 3),
        ([7, 8, 1, 2, 3, 4, 5, 6], [1, 2, 3, 4, 5, 6, 7, 8], 1),
        ([7, 1, 2, 3, 4, 5, 6, 8], [7, 1, 2, 3, 4, 5, 6, 8], 7),
    ],
)
def test_triple_cut_with_joker_on_top_only_moves_anchor(
    values: list[int], expected: list[int], rear: int
) -> None:
    deck = small_deck(values)
    before = deck.cards.copy()
    steps.triple_cut(deck)
    assert deck.values() == expected
    assert deck.rear == rear
    assert np.array_equal(deck.cards, before)


@pytest.mark.parametrize(
    ("values", "expected", "rear"),
    [
        ([1, 2, 8, 3, 4, 5, 6, 7], [8, 3, 4, 5, 6, 7, 1, 2], 1),
        ([1, 2, 3, 4, 5, 6, 8, 7], [8, 7, 1, 2, 3, 4, 5, 6], 5),
    ],
)
def test_triple_cut_with_joker_on_bottom_only_moves_anchor(
    values: list[int], expected: list[int], rear: int
) -> None:
    deck = small_deck(values)
    before = deck.cards.copy()
    steps.triple_cut(deck)
    assert deck.values() == expected
    assert deck.rear == rear
    assert np.array_equal(deck.cards, before)


def test_triple_cut_full_deck() -> None:
    deck = Deck.from_values([28] + list(range(2, 28)) + [1])
    steps.triple_cut(deck)
    assert deck.values() == [1, 28] + list(range(2, 28))


def test_count_cut_moves_top_cards_above_bottom() -> None:
    deck = small_deck([7, 8, 1, 2, 4, 5, 6, 3])
    steps.count_cut(deck)
    assert deck.values() == [2, 4, 5, 6, 7, 8, 1, 3]
    assert deck.bottom == 3


def test_count_cut_by_one() -> None:
    deck = small_deck([2, 3, 4, 5, 6, 7, 8, 1])
    steps.count_cut(deck)
    assert deck.values() == [3, 4, 5, 6, 7, 8, 2, 1]


@pytest.mark.parametrize("bottom", [27, 28])
def test_count_cut_skips_when_joker_on_bottom(bottom: int) -> None:
    values = [value for value in range(1, 29) if value != bottom] + [bottom]
    deck = Deck.from_values(values)
    before = deck.copy()
    steps.count_cut(deck)
    assert deck == before
    assert deck.bottom == bottom


def test_run_round_on_identity_deck(identity_deck: Deck) -> None:
    steps.run_round(identity_deck)
    assert identity_deck.values() == [1, 28] + list(range(2, 28))

    steps.run_round(identity_deck)
    assert identity_deck.values() == list(range(4, 27)) + [1, 27, 2, 3, 28]

    steps.run_round(identity_deck)
    assert identity_deck.values() == list(range(8, 27)) + [1, 2, 27, 3, 4, 28, 6, 7, 5]


def test_run_round_is_reproducible() -> None:
    first = Deck.from_values([5, 12, 27, 1, 19, 28, 3] + [v for v in range(1, 29) if v not in (5, 12, 27, 1, 19, 28, 3)])
    second = first.copy()
    for _ in range(10):
        steps.run_round(first)
        steps.run_round(second)
    assert first.checksum() == second.checksum()


@pytest.mark.parametrize(
    "operation",
    [steps.joker_a, steps.joker_b, steps.triple_cut, steps.count_cut, steps.run_round],
)
def test_steps_fail_loudly_on_corrupted_deck(identity_deck: Deck, operation) -> None:
    identity_deck.cards = np.zeros(0, dtype=np.uint16)
    with pytest.raises(EmptyDeckError):
        operation(identity_deck)


@pytest.mark.parametrize("operation", [steps.joker_a, steps.joker_b, steps.triple_cut, steps.count_cut])
def test_steps_fail_loudly_on_missing_joker(identity_deck: Deck, operation) -> None:
    identity_deck.cards[identity_deck.index_of(28)] = 1
    identity_deck.cards[identity_deck.index_of(27)] = 2
    with pytest.raises(EmptyDeckError):
        operation(identity_deck)


def test_count_cut_rejects_deck_without_jokers(identity_deck: Deck) -> None:
    identity_deck.cards[identity_deck.index_of(27)] = 1
    identity_deck.cards[identity_deck.index_of(28)] = 2
    identity_deck.cards[identity_deck.rear] = 3
    before = identity_deck.cards.copy()

    with pytest.raises(EmptyDeckError):
        steps.count_cut(identity_deck)
    assert np.array_equal(identity_deck.cards, before)


def test_count_cut_rejects_out_of_range_bottom_card() -> None:
    deck = Deck.from_values(list(range(28, 0, -1)))
    deck.cards[deck.rear] = 500
    before = deck.cards.copy()

    with pytest.raises(EmptyDeckError):
        steps.count_cut(deck)
    assert np.array_equal(deck.cards, before)
