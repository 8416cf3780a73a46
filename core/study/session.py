"""
Study session state and lifecycle transitions.

SessionState replaces a mutable page-wide state bag: every transition takes
the current state and returns a new one, so the Streamlit layer only stores
the latest committed value.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
import logging
import random
from typing import Optional, Sequence

from core import deck_catalog
from core.schemas import DeckTheme
from core.study.cards import Card
from core.study.collections import CardCollection
from core.study.constants import PAGES, Page
from core.study.progression import visible_window


logger = logging.getLogger(__name__)

INVALID_CODE_MESSAGE = "Invalid code. Please try again."


class InvalidAccessCode(ValueError):
    """Raised when an access code does not match any deck."""

    def __init__(self, code: str, message: str = INVALID_CODE_MESSAGE):
        super().__init__(message)
        self.code = code


@dataclass(frozen=True)
class SessionState:
    """
    Everything one browser session knows about its study progress.
    """
    page: Page = "landing"
    deck: tuple[Card, ...] = ()
    remembered: CardCollection = field(default_factory=CardCollection)
    forgotten: CardCollection = field(default_factory=CardCollection)
    deck_code: Optional[str] = None
    deck_title: Optional[str] = None
    theme: Optional[DeckTheme] = None
    selected_deck_code: Optional[str] = None

    @property
    def visible_cards(self) -> tuple[Card, ...]:
        return visible_window(self.deck)

    @property
    def is_started(self) -> bool:
        return self.deck_code is not None

    @property
    def is_complete(self) -> bool:
        """A started session with nothing left to show."""
        return self.is_started and not self.visible_cards


def shuffle_cards(cards: Sequence[Card], rng: Optional[random.Random] = None) -> tuple[Card, ...]:
    """
    Uniform random permutation of `cards` (input is left untouched).
    """
    shuffled = list(cards)
    (rng or random).shuffle(shuffled)
    return tuple(shuffled)


def unlock(state: SessionState, code: str, rng: Optional[random.Random] = None) -> SessionState:
    """
    Start a fresh session for the deck an access code unlocks.

    Raises:
        InvalidAccessCode: the code matches no deck; `state` stays valid as-is
    """
    definition = deck_catalog.get_deck(code)
    if definition is None:
        logger.info("Rejected access code %r", code)
        raise InvalidAccessCode(code)

    cards = [Card.from_definition(card) for card in definition.cards]
    deck = shuffle_cards(cards, rng)
    logger.info("Unlocked %r with %d cards", definition.title, len(deck))

    return replace(
        state,
        page="flashcards",
        deck=deck,
        remembered=CardCollection(),
        forgotten=CardCollection(),
        deck_code=deck_catalog.normalize_code(code),
        deck_title=definition.title,
        theme=definition.theme,
    )


def reset(state: SessionState) -> SessionState:
    """
    Discard the session and return to the landing page.
    """
    if state.is_started:
        logger.info("Reset session for %r", state.deck_title)
    return SessionState()


def study_card(state: SessionState, card: Card) -> SessionState:
    """
    Bring a card to the head of the deck and resume studying.

    The deck entry sharing the card's key is replaced; a card that already
    left the deck is put back at the head.
    """
    deck = (card,) + tuple(c for c in state.deck if c.key != card.key)
    return replace(state, page="flashcards", deck=deck)


def navigate(state: SessionState, page: str) -> SessionState:
    if page not in PAGES:
        raise ValueError(f"Unknown page: {page}")
    return replace(state, page=page)


def select_deck(state: SessionState, code: str) -> SessionState:
    """
    Open the detail page of a catalog deck.
    """
    if deck_catalog.get_deck(code) is None:
        raise InvalidAccessCode(code)
    return replace(state, page="deck_detail", selected_deck_code=deck_catalog.normalize_code(code))
