"""
Session Statistics UI

Renders the top navigation bar and deck progress metrics.
"""

from __future__ import annotations

from typing import Optional

import streamlit as st
from core.study import SessionState


NAV_BUTTONS = [
    ("remembered", "✅", "Remembered Cards"),
    ("forgotten", "❓", "Forgotten Cards"),
    ("all_decks", "🗂️", "All Decks"),
    ("landing", "↩️", "Enter new code"),
]


def render_top_nav(key_prefix: str = "nav") -> Optional[str]:
    """
    Render navigation buttons.

    Returns:
        Target page of the clicked button ("landing" means reset), or None
    """
    columns = st.columns([3] + [1] * len(NAV_BUTTONS))
    for column, (page, icon, help_text) in zip(columns[1:], NAV_BUTTONS):
        with column:
            if st.button(icon, key=f"{key_prefix}_{page}", help=help_text, use_container_width=True):
                return page
    return None


def render_session_stats(state: SessionState) -> None:
    """
    Render deck progress metrics.
    """
    if not state.is_started:
        return

    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Pending", len(state.deck))
    with col2:
        st.metric("Remembered", len(state.remembered))
    with col3:
        st.metric("Forgotten", len(state.forgotten))

    st.divider()


def render_session_complete(state: SessionState) -> None:
    """Render deck completion message."""
    st.success("🎉 Deck Completed!")
    st.markdown("You've gone through all the cards in this deck.")
    if len(state.remembered):
        st.info(f"Remembered {len(state.remembered)} cards this session.")
