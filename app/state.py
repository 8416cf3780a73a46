"""
Streamlit session state helpers.
"""

from __future__ import annotations

import streamlit as st

from core.study import SessionState


def ensure_session_state() -> None:
    """
    Populate Streamlit session_state with defaults.
    """
    if "study" not in st.session_state:
        st.session_state.study = SessionState()
    if "show_answer" not in st.session_state:
        st.session_state.show_answer = False
    if "unlock_error" not in st.session_state:
        st.session_state.unlock_error = None
    if "unlock_nonce" not in st.session_state:
        st.session_state.unlock_nonce = 0
    if "pronunciation" not in st.session_state:
        st.session_state.pronunciation = None


def get_study_state() -> SessionState:
    return st.session_state.study


def commit_study_state(state: SessionState) -> None:
    """
    Store the latest committed session state.
    """
    st.session_state.study = state
