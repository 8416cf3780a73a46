"""
Slide-to-unlock UI
"""

from __future__ import annotations

import streamlit as st


UNLOCK_THRESHOLD = 98


def render_unlock_slider(nonce: int) -> bool:
    """
    Render the unlock slider.

    The slider key carries `nonce` so a failed unlock can snap it back by
    bumping the nonce.

    Returns:
        True once the slider reaches the end
    """
    value = st.slider(
        "slide to unlock",
        min_value=0,
        max_value=100,
        value=0,
        key=f"unlock_slider_{nonce}",
        label_visibility="visible",
    )
    return value >= UNLOCK_THRESHOLD
