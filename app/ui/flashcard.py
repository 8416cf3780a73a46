"""
Flashcard UI Component

Renders a card face as a styled HTML block.
"""

from __future__ import annotations

from html import escape

import streamlit as st
from app.ui.flashcard_style import DEFAULT_FLASHCARD_STYLE, FlashcardStyle


def render_flashcard(
    main_text: str,
    subtitle: str = "",
    note: str = "",
    emoji: str = "",
    style: FlashcardStyle | None = None,
) -> None:
    """
    Render one card face.

    Args:
        main_text: Primary text (center, large)
        subtitle: Optional secondary line (phonetic aid or second translation)
        note: Optional small print below the subtitle
        emoji: Optional glyph at the bottom of the card
        style: Style preset (default: DEFAULT_FLASHCARD_STYLE)
    """
    style = style or DEFAULT_FLASHCARD_STYLE

    main_html = (
        f'<h1 style="font-size: {style.main_font_size}; color: {style.main_color}; '
        'font-weight: normal; margin: 0; text-align: center; line-height: 1.3; '
        f'overflow-wrap: anywhere;">{escape(main_text)}</h1>'
    )

    subtitle_html = ""
    if subtitle:
        subtitle_html = (
            f'<p style="font-size: {style.subtitle_font_size}; color: {style.subtitle_color}; '
            f'margin: 10px 0 0 0; text-align: center;">{escape(subtitle)}</p>'
        )

    note_html = ""
    if note:
        note_html = (
            f'<p style="font-size: {style.note_font_size}; color: {style.note_color}; '
            f'font-style: italic; margin: 8px 0 0 0; text-align: center;">{escape(note)}</p>'
        )

    emoji_html = ""
    if emoji:
        emoji_html = f'<div style="font-size: {style.emoji_font_size}; margin-top: 12px;">{escape(emoji)}</div>'

    html = (
        f'<div style="background-color: {style.bg_color}; padding: {style.padding}; '
        'border-radius: 15px; text-align: center; box-shadow: 0 4px 6px '
        f'rgba(0, 0, 0, 0.1); min-height: {style.min_height}; display: flex; '
        'flex-direction: column; align-items: center; justify-content: center;">'
        f"{main_html}{subtitle_html}{note_html}{emoji_html}</div>"
    )

    st.markdown(html, unsafe_allow_html=True)
