"""Top-level package for the Pontifex (Solitaire) keystream cipher."""

from . import cipher, deck, deckfile, encoding, errors, keystream, steps
from .cipher import decrypt, encrypt
from .deck import Deck
from .errors import DeckError, EmptyDeckError, InvalidDeckError, RejectionLimitError
from .keystream import Keystream, KeystreamConfig

__all__ = [
    "cipher",
    "deck",
    "deckfile",
    "encoding",
    "errors",
    "keystream",
    "steps",
    "Deck",
    "DeckError",
    "EmptyDeckError",
    "InvalidDeckError",
    "Keystream",
    "KeystreamConfig",
    "RejectionLimitError",
    "decrypt",
    "encrypt",
]
