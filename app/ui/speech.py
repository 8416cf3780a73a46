"""
Speech UI

Plays a resolved pronunciation: remote audio through an audio element,
everything else through the browser's speech synthesis.
"""

from __future__ import annotations

import json
from typing import Optional

import streamlit as st
import streamlit.components.v1 as components

from core.pronunciation import Pronunciation


def _speech_script(pronunciation: Pronunciation) -> str:
    return f"""
        <script>
        if ('speechSynthesis' in window) {{
            window.speechSynthesis.cancel();
            const utterance = new SpeechSynthesisUtterance({json.dumps(pronunciation.text)});
            utterance.lang = {json.dumps(pronunciation.lang)};
            utterance.rate = {pronunciation.rate};
            utterance.volume = 1.0;
            window.speechSynthesis.speak(utterance);
        }}
        </script>
    """


def render_pronunciation(pronunciation: Optional[Pronunciation]) -> None:
    """
    Play a pronunciation, if any.
    """
    if pronunciation is None:
        return
    if pronunciation.audio is not None:
        st.audio(pronunciation.audio, format="audio/mpeg", autoplay=True)
    elif pronunciation.use_browser_speech:
        components.html(_speech_script(pronunciation), height=0)
