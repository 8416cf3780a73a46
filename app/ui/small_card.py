"""
Small card UI for collection and deck pages.
"""

from __future__ import annotations

from typing import Optional

from app.ui.flashcard import render_flashcard
from app.ui.flashcard_style import SMALL_CARD_STYLE, themed
from core.schemas import DeckTheme
from core.study import Card


def render_small_card(card: Card, theme: Optional[DeckTheme] = None, show_back: bool = True) -> None:
    """
    Render both faces of a card in one compact block.
    """
    primary, phonetic = card.front_parts()
    translation, secondary, _ = card.back_parts()

    subtitle = phonetic
    note = ""
    if show_back:
        note = " · ".join(part for part in (translation, secondary) if part)

    render_flashcard(
        main_text=primary,
        subtitle=subtitle,
        note=note,
        emoji=card.emoji,
        style=themed(SMALL_CARD_STYLE, theme),
    )
