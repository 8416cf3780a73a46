"""UI Components for the Flashcard Trainer"""

from app.ui.flashcard import render_flashcard
from app.ui.session_stats import render_session_stats, render_session_complete, render_top_nav
from app.ui.small_card import render_small_card
from app.ui.speech import render_pronunciation
from app.ui.swipe_buttons import render_swipe_buttons
from app.ui.unlock_slider import render_unlock_slider

__all__ = [
    "render_flashcard",
    "render_session_stats",
    "render_session_complete",
    "render_top_nav",
    "render_small_card",
    "render_pronunciation",
    "render_swipe_buttons",
    "render_unlock_slider",
]
