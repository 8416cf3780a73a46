"""
Tests for the remote TTS HTTP client.
"""

from unittest.mock import Mock

import pytest
import requests

from core.pronunciation import TtsClient, TtsError, get_default_client, reset_default_client
from core.pronunciation import tts_client


TTS_URL = "https://tts.example.test/tts"


def _session(status_code=200, content=b"ID3audio", text=""):
    response = Mock(spec=requests.Response)
    response.status_code = status_code
    response.content = content
    response.text = text
    session = Mock(spec=requests.Session)
    session.post.return_value = response
    return session


class TestTtsClient:

    def test_posts_text_and_language(self):
        session = _session()
        client = TtsClient(url=TTS_URL, timeout=3.0, session=session)

        assert client.fetch("爸爸", "zh-CN") == b"ID3audio"
        session.post.assert_called_once_with(
            TTS_URL,
            json={"text": "爸爸", "lang": "zh-CN"},
            headers={"Accept": "audio/mpeg"},
            timeout=3.0,
        )

    def test_error_status_raises(self):
        client = TtsClient(url=TTS_URL, session=_session(status_code=502, text="bad gateway"))
        with pytest.raises(TtsError, match="status 502: bad gateway"):
            client.fetch("好", "zh-CN")

    def test_empty_audio_raises(self):
        client = TtsClient(url=TTS_URL, session=_session(content=b""))
        with pytest.raises(TtsError, match="empty audio"):
            client.fetch("好", "zh-CN")

    def test_unconfigured_client_never_calls_out(self):
        session = _session()
        client = TtsClient(url="", session=session)

        assert not client.is_configured
        with pytest.raises(TtsError):
            client.fetch("好", "zh-CN")
        session.post.assert_not_called()

    def test_defaults_come_from_environment(self, monkeypatch):
        monkeypatch.setenv("TTS_URL", TTS_URL)
        monkeypatch.setenv("TTS_TIMEOUT_SECONDS", "4.5")
        client = TtsClient(session=_session())

        assert client.url == TTS_URL
        assert client.timeout == 4.5

    @pytest.mark.parametrize("status_code", [201, 204])
    def test_any_2xx_with_audio_succeeds(self, status_code):
        client = TtsClient(url=TTS_URL, session=_session(status_code=status_code))
        assert client.fetch("好", "zh-CN") == b"ID3audio"

    @pytest.mark.parametrize("status_code", [199, 300, 304, 404])
    def test_non_2xx_raises_even_with_audio(self, status_code):
        client = TtsClient(url=TTS_URL, session=_session(status_code=status_code))
        with pytest.raises(TtsError, match=f"status {status_code}"):
            client.fetch("好", "zh-CN")

    def test_malformed_timeout_falls_back_to_default(self, monkeypatch):
        monkeypatch.setenv("TTS_TIMEOUT_SECONDS", "ten")
        client = TtsClient(url=TTS_URL, session=_session())
        assert client.timeout == 10.0


class TestSessionOwnership:

    def test_close_releases_own_session(self, monkeypatch):
        session = _session()
        monkeypatch.setattr(tts_client.requests, "Session", Mock(return_value=session))

        with TtsClient(url=TTS_URL) as client:
            client.fetch("好", "zh-CN")
        session.close.assert_called_once_with()

    def test_close_leaves_injected_session_open(self):
        session = _session()
        TtsClient(url=TTS_URL, session=session).close()
        session.close.assert_not_called()


class TestDefaultClient:

    def test_default_client_is_shared(self, monkeypatch):
        session_factory = Mock(return_value=_session())
        monkeypatch.setattr(tts_client.requests, "Session", session_factory)

        assert get_default_client() is get_default_client()
        assert session_factory.call_count == 1

    def test_reset_closes_shared_session(self, monkeypatch):
        session = _session()
        monkeypatch.setattr(tts_client.requests, "Session", Mock(return_value=session))

        first = get_default_client()
        reset_default_client()

        session.close.assert_called_once_with()
        assert get_default_client() is not first
