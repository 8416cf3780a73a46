import random

import pytest

from core.pronunciation import reset_default_client
from core.study import Card, SessionState


def make_card(front: str, level: int = 0, back: str = "") -> Card:
    return Card(front=front, back=back or f"{front} back", level=level)


def make_state(*cards: Card) -> SessionState:
    return SessionState(page="flashcards", deck=tuple(cards), deck_code="test", deck_title="Test Deck")


@pytest.fixture
def cards():
    return [make_card(f"card{i}") for i in range(10)]


@pytest.fixture
def rng():
    return random.Random(1295)


@pytest.fixture(autouse=True)
def fresh_tts_client():
    """Each test builds the shared TTS client from its own environment."""
    reset_default_client()
    yield
    reset_default_client()
