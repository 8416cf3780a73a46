"""
HTTP client for the remote text-to-speech endpoint.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

import requests

from core import config


logger = logging.getLogger(__name__)

_default_client: Optional["TtsClient"] = None
_default_client_lock = threading.Lock()


class TtsError(Exception):
    """The TTS endpoint could not produce audio."""


class TtsClient:
    """
    Posts text to the TTS endpoint and returns MPEG audio bytes.

    A session created by the client is closed by `close()`; an injected
    session belongs to the caller.
    """

    def __init__(
        self,
        url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.url = config.get_tts_url() if url is None else url
        if timeout is None:
            timeout = config.value_or_default(config.get_tts_timeout, config.DEFAULT_TTS_TIMEOUT)
        self.timeout = timeout
        self._owns_session = session is None
        self.session = session or requests.Session()

    @property
    def is_configured(self) -> bool:
        return bool(self.url)

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "TtsClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def fetch(self, text: str, lang: str) -> bytes:
        """
        Request synthesized audio for `text`.

        Raises:
            TtsError: no endpoint configured, non-2xx response, or empty audio
            requests.RequestException: network failure or timeout
        """
        if not self.is_configured:
            raise TtsError("TTS_URL is not configured")

        response = self.session.post(
            self.url,
            json={"text": text, "lang": lang},
            headers={"Accept": "audio/mpeg"},
            timeout=self.timeout,
        )
        if not 200 <= response.status_code < 300:
            raise TtsError(
                f"TTS request failed with status {response.status_code}: {response.text}"
            )
        if not response.content:
            raise TtsError("Received empty audio data")

        logger.debug("TTS returned %d bytes for %s", len(response.content), lang)
        return response.content


def get_default_client() -> TtsClient:
    """
    Process-wide client, created on first use so its connection pool is shared.
    """
    global _default_client

    with _default_client_lock:
        if _default_client is None:
            _default_client = TtsClient()
        return _default_client


def reset_default_client() -> None:
    """
    Close and forget the shared client (picked up again from the environment on next use).
    """
    global _default_client

    with _default_client_lock:
        if _default_client is not None:
            _default_client.close()
        _default_client = None
