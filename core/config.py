"""
Environment configuration and logging setup.

Values come from the process environment, with a local .env file loaded
first when present.
"""

from __future__ import annotations

import logging
import os
from typing import Callable

from dotenv import load_dotenv

# Load environment
load_dotenv()


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_TTS_TIMEOUT = 10.0
DEFAULT_SPEECH_RATE = 0.8

logger = logging.getLogger(__name__)


def _get_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


def get_tts_url() -> str:
    """
    Remote text-to-speech endpoint. Empty means remote TTS is unavailable.
    """
    return os.getenv("TTS_URL", "").strip()


def get_tts_timeout() -> float:
    """Seconds to wait for the TTS endpoint before giving up."""
    return _get_float("TTS_TIMEOUT_SECONDS", DEFAULT_TTS_TIMEOUT)


def get_speech_rate() -> float:
    """Playback rate for browser speech synthesis."""
    return _get_float("SPEECH_RATE", DEFAULT_SPEECH_RATE)


def value_or_default(getter: Callable[[], float], default: float) -> float:
    """
    Read a numeric setting, logging and falling back to `default` when it is malformed.
    """
    try:
        return getter()
    except ValueError as exc:
        logger.warning("%s; using %r", exc, default)
        return default


def get_log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()


def configure_logging() -> None:
    """
    Configure root logging once per process.
    """
    logging.basicConfig(level=get_log_level(), format=LOG_FORMAT)
