"""
Swipe Button UI

Renders the forgotten / remembered judgement buttons for the head card.
"""

from __future__ import annotations

from typing import Optional

import streamlit as st
from core.study import SwipeDirection


def render_swipe_buttons(key_suffix: str = "") -> Optional[SwipeDirection]:
    """
    Render swipe buttons.

    Returns:
        SwipeDirection selected by user, or None if no button clicked
    """
    st.markdown(
        """
        <style>
        div[data-testid="stHorizontalBlock"] button p {
            font-weight: 600;
        }
        </style>
        """,
        unsafe_allow_html=True
    )

    col1, col2 = st.columns(2)
    with col1:
        if st.button("⬅️ Forgot", key=f"swipe_left_{key_suffix}", use_container_width=True):
            return SwipeDirection.LEFT
    with col2:
        if st.button("Remembered ➡️", key=f"swipe_right_{key_suffix}", type="primary", use_container_width=True):
            return SwipeDirection.RIGHT
    return None
