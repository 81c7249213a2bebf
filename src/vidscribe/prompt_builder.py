"""
Prompt construction for summaries and cleaned transcripts.

A summary is always a single request. A cleaned transcript is split into
several independent requests when one request would exceed the per-call token
budget; the split is on word boundaries, in order, with nothing dropped or
repeated.
"""

from __future__ import annotations

from typing import List, Optional, Protocol, Sequence

from vidscribe.config import DEFAULT_SETTINGS, Settings
from vidscribe.errors import ValidationError
from vidscribe.models import ChatMessage, MessageSet, Operation, PromptPlan
from vidscribe.prompts import (
    CLEAN_TRANSCRIPT_SYSTEM_MESSAGE,
    CLEAN_TRANSCRIPT_USER_MESSAGE_TEMPLATE,
    DEFAULT_SPEAKER,
    SUMMARIZE_SYSTEM_MESSAGE_TEMPLATE,
    SUMMARIZE_USER_MESSAGE_TEMPLATE,
    render_header,
)


class MessageTokenCounter(Protocol):
    def count(self, messages: Sequence[ChatMessage]) -> int:
        ...


def split_words(text: str) -> List[str]:
    # Single spaces only, so " ".join() gives back the exact text.
    return text.split(" ")


def partition_words(words: Sequence[str], parts: int) -> List[List[str]]:
    """
    Split words into `parts` contiguous groups whose sizes differ by at most one.

    The number of groups is capped at the number of words.
    """
    parts = max(1, min(parts, len(words)))
    size, extra = divmod(len(words), parts)
    groups = []
    start = 0
    for i in range(parts):
        end = start + size + (1 if i < extra else 0)
        groups.append(list(words[start:end]))
        start = end
    return groups


class PromptBuilder:
    """Builds PromptPlans for the summarize and clean-transcript operations."""

    def __init__(self, token_counter: MessageTokenCounter, settings: Settings = DEFAULT_SETTINGS):
        self.token_counter = token_counter
        self.settings = settings

    def build(
        self,
        operation: Operation,
        raw_transcript: str,
        title: Optional[str] = None,
        channel_name: Optional[str] = None,
    ) -> PromptPlan:
        if operation == Operation.SUMMARIZE:
            return self.summarize(raw_transcript, title, channel_name)
        if operation == Operation.CLEAN:
            return self.clean_transcript(raw_transcript, title, channel_name)
        raise ValueError(f"Unknown operation: {operation!r}")

    # ----------------------------
    # Summarize
    # ----------------------------

    def summary_goal_length(self, word_count: int) -> int:
        return min(word_count // self.settings.summary_words_ratio, self.settings.max_summary_words)

    def summarize(
        self,
        raw_transcript: str,
        title: Optional[str] = None,
        channel_name: Optional[str] = None,
    ) -> PromptPlan:
        """
        Build the single request that summarizes a transcript.

        Raises:
            ValidationError: if the transcript has too few words to summarize
        """
        word_count = len(split_words(raw_transcript))
        if word_count <= self.settings.min_summary_words:
            raise ValidationError(
                f"Transcript too short to summarize. ({word_count} words in transcript)"
            )
        goal_length = self.summary_goal_length(word_count)

        messages: MessageSet = (
            ChatMessage(
                role="system",
                content=SUMMARIZE_SYSTEM_MESSAGE_TEMPLATE.format(goal_length=goal_length),
            ),
            ChatMessage(
                role="user",
                content=SUMMARIZE_USER_MESSAGE_TEMPLATE.format(
                    header=render_header(title, channel_name),
                    transcript=raw_transcript,
                    speaker=channel_name or DEFAULT_SPEAKER,
                    goal_length=goal_length,
                ),
            ),
        )

        return PromptPlan(
            operation=Operation.SUMMARIZE,
            message_sets=(messages,),
            token_counts=(self.token_counter.count(messages),),
            transcript_parts=(raw_transcript,),
        )

    # ----------------------------
    # Clean transcript
    # ----------------------------

    def clean_transcript_messages(
        self,
        raw_transcript: str,
        title: Optional[str] = None,
        channel_name: Optional[str] = None,
    ) -> MessageSet:
        return (
            ChatMessage(role="system", content=CLEAN_TRANSCRIPT_SYSTEM_MESSAGE),
            ChatMessage(
                role="user",
                content=CLEAN_TRANSCRIPT_USER_MESSAGE_TEMPLATE.format(
                    header=render_header(title, channel_name),
                    transcript=raw_transcript,
                ),
            ),
        )

    def clean_transcript(
        self,
        raw_transcript: str,
        title: Optional[str] = None,
        channel_name: Optional[str] = None,
    ) -> PromptPlan:
        """
        Build the requests that clean up a transcript.

        A single candidate request is counted first. If it exceeds
        clean_tokens_per_call, the words are split into
        tokens // clean_tokens_per_call + 1 equal groups, each sent as its own
        request with the same title/channel framing.

        Raises:
            ValidationError: if the transcript has too few words to clean up
        """
        words = split_words(raw_transcript)
        if len(words) <= self.settings.min_clean_words:
            raise ValidationError(
                f"Transcript too short to clean up. ({len(words)} words in transcript)"
            )

        budget = self.settings.clean_tokens_per_call
        candidate = self.clean_transcript_messages(raw_transcript, title, channel_name)
        candidate_tokens = self.token_counter.count(candidate)

        if candidate_tokens <= budget:
            return PromptPlan(
                operation=Operation.CLEAN,
                message_sets=(candidate,),
                token_counts=(candidate_tokens,),
                transcript_parts=(raw_transcript,),
            )

        parts_needed = candidate_tokens // budget + 1
        parts = [" ".join(group) for group in partition_words(words, parts_needed)]
        message_sets = tuple(
            self.clean_transcript_messages(part, title, channel_name) for part in parts
        )

        return PromptPlan(
            operation=Operation.CLEAN,
            message_sets=message_sets,
            token_counts=tuple(self.token_counter.count(messages) for messages in message_sets),
            transcript_parts=tuple(parts),
        )
