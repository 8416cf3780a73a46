"""Pronunciation: language detection, remote TTS and browser speech dispatch."""

from core.pronunciation.detection import (
    LANGUAGE_TAGS,
    TextKind,
    classify_text,
    detect_language,
    is_pinyin,
)
from core.pronunciation.dispatcher import Pronunciation, pronounce
from core.pronunciation.tts_client import (
    TtsClient,
    TtsError,
    get_default_client,
    reset_default_client,
)

__all__ = [
    "LANGUAGE_TAGS",
    "TextKind",
    "classify_text",
    "detect_language",
    "is_pinyin",
    "Pronunciation",
    "pronounce",
    "TtsClient",
    "TtsError",
    "get_default_client",
    "reset_default_client",
]
