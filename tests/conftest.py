from __future__ import annotations

import pytest

from pontifex.deck import Deck


@pytest.fixture
def identity_deck() -> Deck:
    return Deck.identity()
