"""
Study Constants and Parameters

Deck progression policy values in one place. The numbers are tunable:
changing them changes how quickly cards resurface and graduate.
"""

from enum import Enum
from typing import Literal, get_args


# ---- Swipe Directions ----

class SwipeDirection(str, Enum):
    """User judgement on the head card."""
    LEFT = "left"     # Forgotten
    RIGHT = "right"   # Remembered


# ---- Deck Window ----

VISIBLE_WINDOW = 3  # Cards eligible for display; only the first is swipeable


# ---- Progression Policy ----

MIN_LEVEL = 0                  # Level floor on a forgotten swipe
FORGOTTEN_REINSERT_DEPTH = 5   # Forgotten cards go back this many slots deep
GRADUATION_LEVEL = 2           # Remembered cards at this level leave the deck


# ---- Card Lifecycle ----

NEW_STATUS = "new"


# ---- Pages ----

Page = Literal[
    "landing",
    "flashcards",
    "remembered",
    "forgotten",
    "all_decks",
    "deck_detail",
]

PAGES: tuple[str, ...] = get_args(Page)
