"""
Study - Deck progression for swipe flashcards

Main API for a study session.

Each session is an immutable SessionState; every transition returns a new
state:
- unlock: load and shuffle the deck behind an access code
- apply_swipe: judge the head card as remembered or forgotten
- study_card / navigate / select_deck / reset: session navigation

Quick start:
    from core import study

    state = study.unlock(study.SessionState(), "PinyinPractice")
    state = study.apply_swipe(state, study.SwipeDirection.RIGHT)
    state.visible_cards
"""

# Progression engine
from core.study.progression import apply_swipe, reinsert_index, visible_window

# Session lifecycle
from core.study.session import (
    INVALID_CODE_MESSAGE,
    InvalidAccessCode,
    SessionState,
    navigate,
    reset,
    select_deck,
    shuffle_cards,
    study_card,
    unlock,
)

# Value types
from core.study.cards import Card, split_card_text
from core.study.collections import CardCollection

# Constants and parameters
from core.study.constants import (
    FORGOTTEN_REINSERT_DEPTH,
    GRADUATION_LEVEL,
    MIN_LEVEL,
    PAGES,
    VISIBLE_WINDOW,
    Page,
    SwipeDirection,
)

__all__ = [
    "apply_swipe",
    "reinsert_index",
    "visible_window",
    "INVALID_CODE_MESSAGE",
    "InvalidAccessCode",
    "SessionState",
    "navigate",
    "reset",
    "select_deck",
    "shuffle_cards",
    "study_card",
    "unlock",
    "Card",
    "split_card_text",
    "CardCollection",
    "FORGOTTEN_REINSERT_DEPTH",
    "GRADUATION_LEVEL",
    "MIN_LEVEL",
    "PAGES",
    "VISIBLE_WINDOW",
    "Page",
    "SwipeDirection",
]
