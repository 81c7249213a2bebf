"""Tests for settings and data models."""

import dataclasses

import pytest

from vidscribe.config import DEFAULT_SETTINGS, Settings
from vidscribe.errors import ConfigurationError, MissingCredentialError
from vidscribe.models import ChatMessage, DisplaySegment


class TestSettings:
    def test_defaults(self):
        assert DEFAULT_SETTINGS.display_chunk_chars == 4096
        assert DEFAULT_SETTINGS.retry_delay_seconds == 60.0
        assert DEFAULT_SETTINGS.clean_tokens_per_call == 50_000
        assert DEFAULT_SETTINGS.summarize_policy.tiers[-1].max_tokens == 13_000
        assert DEFAULT_SETTINGS.clean_policy.tiers[-1].max_tokens == 75_000

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
        monkeypatch.setenv("OPENAI_BASE_URL", "https://proxy.example.com/v1")
        monkeypatch.setenv("VIDSCRIBE_REQUEST_TIMEOUT", "30")

        settings = Settings.from_env()
        assert settings.openai_api_key == "sk-env"
        assert settings.openai_base_url == "https://proxy.example.com/v1"
        assert settings.request_timeout == 30.0

    def test_from_env_accepts_token_name(self, monkeypatch):
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        monkeypatch.setenv("OPENAI_API_TOKEN", "sk-token")
        assert Settings.from_env().openai_api_key == "sk-token"

    def test_malformed_timeout_names_the_variable(self, monkeypatch):
        monkeypatch.setenv("VIDSCRIBE_REQUEST_TIMEOUT", "soon")
        with pytest.raises(ConfigurationError, match="VIDSCRIBE_REQUEST_TIMEOUT"):
            Settings.from_env()

    def test_blank_timeout_is_unset(self, monkeypatch):
        monkeypatch.setenv("VIDSCRIBE_REQUEST_TIMEOUT", "  ")
        assert Settings.from_env().request_timeout is None

    def test_require_api_key(self):
        assert Settings(openai_api_key="sk-x").require_api_key() == "sk-x"
        with pytest.raises(MissingCredentialError):
            Settings().require_api_key()

    def test_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_SETTINGS.display_chunk_chars = 10


class TestModels:
    def test_unknown_role_rejected(self):
        with pytest.raises(ValueError):
            ChatMessage(role="narrator", content="hi")

    def test_single_segment_heading_has_no_part_suffix(self):
        segment = DisplaySegment(text="t", index=1, total=1, title="Video", channel_name="Chan")
        assert segment.heading == "Video"
