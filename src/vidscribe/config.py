"""
Configuration for vidscribe.

Model tiers, token budgets and word thresholds encode cost/quality tradeoffs
for a specific model family. They live here so they can be revised without
touching the orchestration code.
"""

import os
from dataclasses import dataclass, field
from typing import Optional, Tuple

from vidscribe.errors import ConfigurationError, MissingCredentialError


@dataclass(frozen=True)
class ModelTier:
    """A chat model and the largest prompt (in tokens) it is allowed to take."""
    name: str
    model: str
    max_tokens: int


@dataclass(frozen=True)
class TierPolicy:
    """Ordered tiers; the first one whose ceiling covers the prompt wins."""
    action: str  # used in the rejection message, e.g. "summarize"
    tiers: Tuple[ModelTier, ...]


SUMMARIZE_POLICY = TierPolicy(
    action="summarize",
    tiers=(
        ModelTier(name="high", model="gpt-4", max_tokens=2_999),
        ModelTier(name="mid", model="gpt-3.5-turbo-16k", max_tokens=13_000),
    ),
)

CLEAN_POLICY = TierPolicy(
    action="clean up",
    tiers=(ModelTier(name="clean", model="gpt-4-turbo", max_tokens=75_000),),
)


def _optional_float(name: str) -> Optional[float]:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    try:
        return float(value)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be a number of seconds, got {value!r}") from e


@dataclass(frozen=True)
class Settings:
    """Process-wide settings. Read once, never mutated."""

    # Credentials / endpoint
    openai_api_key: Optional[str] = None
    openai_base_url: Optional[str] = None

    # Token counting
    token_model: str = "gpt-4"

    # Display
    display_chunk_chars: int = 4096

    # Chat invocation
    retry_delay_seconds: float = 60.0
    request_timeout: Optional[float] = None

    # Summarize
    min_summary_words: int = 200
    summary_words_ratio: int = 5
    max_summary_words: int = 2000

    # Clean transcript
    min_clean_words: int = 20
    clean_tokens_per_call: int = 50_000

    # Model tier tables
    summarize_policy: TierPolicy = field(default=SUMMARIZE_POLICY)
    clean_policy: TierPolicy = field(default=CLEAN_POLICY)

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build settings from environment variables.

        OPENAI_API_KEY (or OPENAI_API_TOKEN) holds the chat-completion key,
        OPENAI_BASE_URL an optional proxy endpoint and
        VIDSCRIBE_REQUEST_TIMEOUT an optional per-request timeout in seconds.
        """
        return cls(
            openai_api_key=os.getenv("OPENAI_API_KEY") or os.getenv("OPENAI_API_TOKEN"),
            openai_base_url=os.getenv("OPENAI_BASE_URL") or None,
            request_timeout=_optional_float("VIDSCRIBE_REQUEST_TIMEOUT"),
        )

    def require_api_key(self) -> str:
        if not self.openai_api_key:
            raise MissingCredentialError(
                "OpenAI API key required. Set OPENAI_API_KEY environment variable "
                "or pass openai_api_key to Settings."
            )
        return self.openai_api_key


DEFAULT_SETTINGS = Settings()
