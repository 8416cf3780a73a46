"""
Landing page rendering.
"""

from __future__ import annotations

import streamlit as st

from app.session_controller import handle_unlock
from app.ui import render_unlock_slider
from core.study import SessionState


LANDING_SUBTITLE = 'Enter "LearnChinesewithHelen1295" or "PinyinPractice" to start.'


def render_landing_page(state: SessionState) -> None:
    """
    Render the access code form.
    """
    st.markdown("<style>.stApp h1 { font-size: 1.8rem; text-align: center; }</style>", unsafe_allow_html=True)
    st.title("Learn Any Language with Flashcards")
    st.markdown(LANDING_SUBTITLE)
    st.markdown("<br>", unsafe_allow_html=True)

    code = st.text_input(
        "Access code",
        key="access_code",
        placeholder="paste or type your flash card code here...",
        label_visibility="collapsed",
    )

    if st.session_state.unlock_error:
        st.error(st.session_state.unlock_error)

    if render_unlock_slider(st.session_state.unlock_nonce):
        handle_unlock(code)
        st.rerun()
