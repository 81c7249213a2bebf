"""
vidscribe
=========

Summaries and cleaned-up transcripts of YouTube videos, produced with an
OpenAI chat model under per-request token budgets.

Example:
    $ vidscribe summarize "https://www.youtube.com/watch?v=xxx"
    $ vidscribe transcript "https://youtu.be/xxx" -v
"""

__version__ = "0.1.0"

from vidscribe.chunk import break_text_into_chunks
from vidscribe.config import DEFAULT_SETTINGS, ModelTier, Settings, TierPolicy
from vidscribe.errors import (
    ConfigurationError,
    EmptyResponseError,
    MissingCredentialError,
    RemoteError,
    TranscriptNotFoundError,
    UserFacingError,
    ValidationError,
)
from vidscribe.models import (
    ChatMessage,
    DisplaySegment,
    MessageSet,
    Operation,
    PromptPlan,
    VideoInfo,
    VideoResult,
)
from vidscribe.pipeline import TranscriptPipeline

__all__ = [
    "break_text_into_chunks",
    "DEFAULT_SETTINGS",
    "ModelTier",
    "Settings",
    "TierPolicy",
    "ConfigurationError",
    "EmptyResponseError",
    "MissingCredentialError",
    "RemoteError",
    "TranscriptNotFoundError",
    "UserFacingError",
    "ValidationError",
    "ChatMessage",
    "DisplaySegment",
    "MessageSet",
    "Operation",
    "PromptPlan",
    "VideoInfo",
    "VideoResult",
    "TranscriptPipeline",
    "__version__",
]
