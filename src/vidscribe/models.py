"""
Request-scoped data structures.

Nothing here outlives a single summary or transcript request.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Tuple


ROLES = ("system", "user", "assistant")


class Operation(str, Enum):
    SUMMARIZE = "summarize"
    CLEAN = "clean"


@dataclass(frozen=True)
class ChatMessage:
    role: str
    content: str

    def __post_init__(self) -> None:
        if self.role not in ROLES:
            raise ValueError(f"Unknown chat role: {self.role!r}")

    def to_dict(self) -> Dict[str, str]:
        return {"role": self.role, "content": self.content}


# One complete chat-completion request body: system message first, then user.
MessageSet = Tuple[ChatMessage, ...]


@dataclass(frozen=True)
class PromptPlan:
    """
    The message sets needed to process one transcript.

    transcript_parts[i] is the slice of transcript embedded in
    message_sets[i]; joined with single spaces they give back the transcript.
    """
    operation: Operation
    message_sets: Tuple[MessageSet, ...]
    token_counts: Tuple[int, ...]
    transcript_parts: Tuple[str, ...]

    @property
    def total_tokens(self) -> int:
        return sum(self.token_counts)

    def __len__(self) -> int:
        return len(self.message_sets)


@dataclass(frozen=True)
class VideoInfo:
    title: str
    channel_name: str


@dataclass(frozen=True)
class DisplaySegment:
    """One postable piece of the final text, numbered from 1."""
    text: str
    index: int
    total: int
    title: str
    channel_name: str

    @property
    def heading(self) -> str:
        if self.total == 1:
            return self.title
        return f"{self.title} (part {self.index}/{self.total})"


@dataclass(frozen=True)
class VideoResult:
    info: VideoInfo
    text: str
    segments: List[DisplaySegment] = field(default_factory=list)
