"""
Session lifecycle handlers for the Streamlit app.

Each handler applies one pure transition from core.study and commits the
result to st.session_state.
"""

from __future__ import annotations

import logging

import streamlit as st

from app.state import commit_study_state, get_study_state
from core import study
from core.pronunciation import pronounce


logger = logging.getLogger(__name__)


def handle_unlock(code: str) -> bool:
    """
    Try to unlock a deck.

    Returns:
        True on success; on failure the error is stored for display and the
        unlock slider is reset
    """
    try:
        state = study.unlock(get_study_state(), code)
    except study.InvalidAccessCode as exc:
        st.session_state.unlock_error = str(exc)
        st.session_state.unlock_nonce += 1
        return False

    commit_study_state(state)
    st.session_state.unlock_error = None
    st.session_state.show_answer = False
    return True


def handle_swipe(direction: study.SwipeDirection) -> None:
    """
    Judge the head card and advance the deck.
    """
    commit_study_state(study.apply_swipe(get_study_state(), direction))
    st.session_state.show_answer = False
    st.session_state.pronunciation = None


def handle_reset() -> None:
    """
    Discard the session and return to the landing page.
    """
    commit_study_state(study.reset(get_study_state()))
    st.session_state.show_answer = False
    st.session_state.pronunciation = None
    st.session_state.unlock_nonce += 1
    st.session_state.pop("access_code", None)


def handle_navigate(page: str) -> None:
    if page == "landing":
        handle_reset()
        return
    commit_study_state(study.navigate(get_study_state(), page))


def handle_select_deck(code: str) -> None:
    commit_study_state(study.select_deck(get_study_state(), code))


def handle_study_card(card: study.Card) -> None:
    """
    Study a forgotten card next.
    """
    commit_study_state(study.study_card(get_study_state(), card))
    st.session_state.show_answer = False


def handle_pronounce(text: str) -> None:
    """
    Resolve a pronunciation for the next render. Failures leave nothing to play.
    """
    st.session_state.pronunciation = pronounce(text)
    if st.session_state.pronunciation is None:
        logger.debug("Nothing to play for %r", text)
