"""
Flashcard Trainer - Main App

Streamlit UI for swipe-style flashcard study.

Run with:
    streamlit run app/streamlit_app.py
"""

import logging

import streamlit as st

from core import config
from app.router import get_page
from app.state import ensure_session_state, get_study_state


# ---- Page Setup ----

st.set_page_config(
    page_title="Learn Any Language with Flashcards",
    page_icon="🃏",
    layout="centered"
)


# ---- Logging ----

@st.cache_resource
def _configure_logging():
    """Configure logging once per server process."""
    config.configure_logging()
    logging.getLogger(__name__).info("Flashcard trainer started")


_configure_logging()


# ---- Main App ----

def main():
    """Main app entry point."""
    ensure_session_state()
    state = get_study_state()
    get_page(state.page).render(state)


if __name__ == "__main__":
    main()
