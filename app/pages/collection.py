"""
Remembered / forgotten collection pages.
"""

from __future__ import annotations

from typing import Optional

import streamlit as st

from app.session_controller import handle_navigate, handle_study_card
from app.ui import render_small_card
from core.schemas import DeckTheme
from core.study import Card, SessionState


NO_COLLECTED_CARDS = "No cards collected yet"
GRID_COLUMNS = 3


def _render_header(title: str, back_page: str) -> None:
    col1, col2 = st.columns([1, 5])
    with col1:
        if st.button("⬅️", key=f"back_{title}", help="Back to Study", use_container_width=True):
            handle_navigate(back_page)
            st.rerun()
    with col2:
        st.subheader(title)


def render_card_grid(cards: list[Card], theme: Optional[DeckTheme] = None, studyable: bool = False) -> None:
    """
    Render cards in a grid. Studyable cards hide their answer and offer "Study now".
    """
    for row_start in range(0, len(cards), GRID_COLUMNS):
        row = cards[row_start:row_start + GRID_COLUMNS]
        columns = st.columns(GRID_COLUMNS)
        for column, card in zip(columns, row):
            with column:
                render_small_card(card, theme, show_back=not studyable)
                if studyable:
                    translation, secondary, _ = card.back_parts()
                    with st.expander("Answer"):
                        st.markdown(f"**{translation}**")
                        if secondary:
                            st.caption(secondary)
                    if st.button("Study now", key=f"study_{card.key}", use_container_width=True):
                        handle_study_card(card)
                        st.rerun()


def render_remembered_page(state: SessionState) -> None:
    _render_header("Remembered Cards", "flashcards")
    if not len(state.remembered):
        st.info(NO_COLLECTED_CARDS)
        return
    render_card_grid(list(state.remembered), state.theme)


def render_forgotten_page(state: SessionState) -> None:
    _render_header("Forgotten Cards", "flashcards")
    if not len(state.forgotten):
        st.info(NO_COLLECTED_CARDS)
        return
    render_card_grid(list(state.forgotten), state.theme, studyable=True)
