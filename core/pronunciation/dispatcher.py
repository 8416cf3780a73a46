"""
Pronunciation dispatch.

Chooses between remote TTS audio and browser speech synthesis for a text
segment. `pronounce` never raises: TTS failures are logged and dropped,
and study state never depends on the outcome.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Optional

import requests

from core import config
from core.pronunciation.detection import TextKind, classify_text, LANGUAGE_TAGS
from core.pronunciation.tts_client import TtsClient, TtsError, get_default_client


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Pronunciation:
    """
    What the UI should play for a text segment.

    Exactly one of `audio` (remote MPEG bytes) or `use_browser_speech` is set.
    """
    text: str
    lang: str
    audio: Optional[bytes] = None
    use_browser_speech: bool = False
    rate: float = 1.0


def _browser_speech(text: str, lang: str) -> Pronunciation:
    return Pronunciation(
        text=text,
        lang=lang,
        use_browser_speech=True,
        rate=config.value_or_default(config.get_speech_rate, config.DEFAULT_SPEECH_RATE),
    )


def _remote_audio(client: TtsClient, text: str, lang: str) -> Optional[bytes]:
    try:
        return client.fetch(text, lang)
    except (TtsError, requests.RequestException) as exc:
        logger.warning("External TTS failed for %s text %r: %s", lang, text, exc)
        return None


def pronounce(text: Optional[str], client: Optional[TtsClient] = None) -> Optional[Pronunciation]:
    """
    Resolve how to speak a text segment.

    Rules:
    - Chinese characters and pinyin: remote TTS only (no fallback)
    - Thai: remote TTS, browser speech if that fails
    - Everything else: browser speech

    Returns:
        Pronunciation, or None when there is nothing to play
    """
    if not text or not text.strip():
        logger.debug("No text to pronounce")
        return None

    text = text.strip()
    kind = classify_text(text)
    lang = LANGUAGE_TAGS[kind]
    logger.info("Pronounce %r as %s (%s)", text, lang, kind.value)

    if kind in (TextKind.HANZI, TextKind.PINYIN, TextKind.THAI):
        audio = _remote_audio(client or get_default_client(), text, lang)
        if audio is not None:
            return Pronunciation(text=text, lang=lang, audio=audio)
        if kind is not TextKind.THAI:
            return None

    return _browser_speech(text, lang)
