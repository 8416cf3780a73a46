"""
Flashcard style presets and constants.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from core.schemas import DeckTheme


# ---- Shared Card Layout ----

CARD_PADDING = "35px 24px"
CARD_MIN_HEIGHT = "260px"
SMALL_CARD_PADDING = "14px 10px"
SMALL_CARD_MIN_HEIGHT = "150px"
FRONT_BG_COLOR = "#f0f2f6"
BACK_BG_COLOR = "#e8f4f8"


# ---- Shared Typography Defaults ----

DEFAULT_MAIN_FONT_SIZE = "3.2em"
DEFAULT_MAIN_COLOR = "#1f1f1f"
DEFAULT_SUBTITLE_FONT_SIZE = "1.4em"
DEFAULT_SUBTITLE_COLOR = "#555"
DEFAULT_NOTE_FONT_SIZE = "0.95em"
DEFAULT_NOTE_COLOR = "#666"
DEFAULT_EMOJI_FONT_SIZE = "2.2em"


@dataclass(frozen=True)
class FlashcardStyle:
    """
    Visual style preset for flashcards.
    """
    main_font_size: str = DEFAULT_MAIN_FONT_SIZE
    main_color: str = DEFAULT_MAIN_COLOR
    subtitle_font_size: str = DEFAULT_SUBTITLE_FONT_SIZE
    subtitle_color: str = DEFAULT_SUBTITLE_COLOR
    note_font_size: str = DEFAULT_NOTE_FONT_SIZE
    note_color: str = DEFAULT_NOTE_COLOR
    emoji_font_size: str = DEFAULT_EMOJI_FONT_SIZE
    padding: str = CARD_PADDING
    min_height: str = CARD_MIN_HEIGHT
    bg_color: str = FRONT_BG_COLOR


DEFAULT_FLASHCARD_STYLE = FlashcardStyle()


# ---- Presets ----

CARD_FRONT_STYLE = FlashcardStyle(bg_color=FRONT_BG_COLOR)

CARD_BACK_STYLE = FlashcardStyle(
    main_font_size="2.4em",
    subtitle_font_size="1.5em",
    bg_color=BACK_BG_COLOR,
)

PREVIEW_STYLE = FlashcardStyle(
    main_font_size="1.6em",
    subtitle_font_size="0.9em",
    emoji_font_size="1.2em",
    padding=SMALL_CARD_PADDING,
    min_height="90px",
    bg_color=FRONT_BG_COLOR,
)

SMALL_CARD_STYLE = FlashcardStyle(
    main_font_size="1.8em",
    subtitle_font_size="0.95em",
    note_font_size="0.85em",
    emoji_font_size="1.4em",
    padding=SMALL_CARD_PADDING,
    min_height=SMALL_CARD_MIN_HEIGHT,
    bg_color=FRONT_BG_COLOR,
)


def themed(style: FlashcardStyle, theme: Optional[DeckTheme], back: bool = False) -> FlashcardStyle:
    """
    Apply a deck's card colours to a style preset.
    """
    if theme is None:
        return style
    return replace(style, bg_color=theme.back_color if back else theme.card_color)
