"""
Flashcard study page rendering.
"""

from __future__ import annotations

import streamlit as st

from app.session_controller import (
    handle_navigate,
    handle_pronounce,
    handle_reset,
    handle_swipe,
)
from app.ui import (
    render_flashcard,
    render_pronunciation,
    render_session_complete,
    render_session_stats,
    render_swipe_buttons,
    render_top_nav,
)
from app.ui.flashcard_style import CARD_BACK_STYLE, CARD_FRONT_STYLE, PREVIEW_STYLE, themed
from core.study import Card, SessionState


def render_flashcards_page(state: SessionState) -> None:
    """
    Render the study flow (active deck or completion screen).
    """
    if not state.is_started:
        handle_reset()
        st.rerun()
        return

    if state.is_complete:
        _render_deck_complete(state)
        return

    target = render_top_nav()
    if target is not None:
        handle_navigate(target)
        st.rerun()

    st.subheader(state.deck_title or "")
    render_session_stats(state)
    render_pronunciation(st.session_state.pronunciation)
    st.session_state.pronunciation = None

    head, *up_next = state.visible_cards
    _render_head_card(state, head)

    st.markdown("<br>", unsafe_allow_html=True)
    direction = render_swipe_buttons(key_suffix=head.key)
    if direction is not None:
        handle_swipe(direction)
        st.rerun()

    if up_next:
        _render_up_next(state, up_next)


def _render_head_card(state: SessionState, card: Card) -> None:
    show_answer = st.session_state.show_answer

    if not show_answer:
        primary, phonetic = card.front_parts()
        render_flashcard(
            main_text=primary,
            subtitle=phonetic,
            emoji=card.emoji,
            style=themed(CARD_FRONT_STYLE, state.theme),
        )
        segments = [primary, phonetic]
    else:
        translation, secondary, note = card.back_parts()
        render_flashcard(
            main_text=translation,
            subtitle=secondary,
            note=note,
            emoji=card.emoji,
            style=themed(CARD_BACK_STYLE, state.theme, back=True),
        )
        segments = [translation, secondary]

    st.markdown("<br>", unsafe_allow_html=True)
    _render_pronounce_buttons(card, [s for s in segments if s])

    label = "Show Front" if show_answer else "Flip Card"
    if st.button(label, key=f"flip_{card.key}", use_container_width=True):
        st.session_state.show_answer = not show_answer
        st.rerun()


def _render_pronounce_buttons(card: Card, segments: list[str]) -> None:
    if not segments:
        return
    columns = st.columns(len(segments))
    for index, (column, text) in enumerate(zip(columns, segments)):
        with column:
            if st.button(f"🔊 {text}", key=f"say_{card.key}_{index}", use_container_width=True):
                handle_pronounce(text)
                st.rerun()


def _render_up_next(state: SessionState, cards: list[Card]) -> None:
    st.caption("Up next")
    columns = st.columns(len(cards))
    for column, card in zip(columns, cards):
        primary, phonetic = card.front_parts()
        with column:
            render_flashcard(
                main_text=primary,
                subtitle=phonetic,
                style=themed(PREVIEW_STYLE, state.theme),
            )


def _render_deck_complete(state: SessionState) -> None:
    render_session_complete(state)
    col1, col2 = st.columns(2)
    with col1:
        if st.button("Enter new code", type="primary", use_container_width=True):
            handle_reset()
            st.rerun()
    with col2:
        if st.button("View All Decks", use_container_width=True):
            handle_navigate("all_decks")
            st.rerun()
