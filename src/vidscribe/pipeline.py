"""
End-to-end summary and transcript generation for a single video.

fetch metadata + transcript -> build prompts -> pick a model tier ->
call the chat service once per message set, in order -> stitch -> re-chunk
for display.

The pipeline holds no per-request state, so one instance can serve concurrent
requests.
"""

from __future__ import annotations

from typing import List, Optional, Protocol

from vidscribe.chat import ChatInvoker
from vidscribe.chunk import break_text_into_chunks
from vidscribe.config import DEFAULT_SETTINGS, ModelTier, Settings
from vidscribe.errors import ValidationError
from vidscribe.model_selector import ModelSelector
from vidscribe.models import DisplaySegment, Operation, PromptPlan, VideoInfo, VideoResult
from vidscribe.prompt_builder import PromptBuilder
from vidscribe.tokens import TokenCounter
from vidscribe.youtube_client import MetadataFetcher, TranscriptFetcher


class TranscriptSource(Protocol):
    def fetch(self, video_id: str) -> str:
        ...


class MetadataSource(Protocol):
    def fetch(self, video_id: str) -> VideoInfo:
        ...


def reparagraph(text: str) -> str:
    # Approximation: also breaks after abbreviations such as "U.S. ".
    return text.replace(". ", ".\n\n")


def stitch_responses(responses: List[str], operation: Operation) -> str:
    text = " ".join(responses)
    if operation == Operation.CLEAN:
        text = reparagraph(text)
    return text


def to_display_segments(chunks: List[str], info: VideoInfo) -> List[DisplaySegment]:
    return [
        DisplaySegment(
            text=chunk,
            index=index,
            total=len(chunks),
            title=info.title,
            channel_name=info.channel_name,
        )
        for index, chunk in enumerate(chunks, start=1)
    ]


class TranscriptPipeline:
    """Orchestrates summary and clean-transcript requests."""

    def __init__(
        self,
        transcript_fetcher: TranscriptSource,
        metadata_fetcher: MetadataSource,
        invoker: ChatInvoker,
        prompt_builder: Optional[PromptBuilder] = None,
        settings: Settings = DEFAULT_SETTINGS,
        verbose: bool = False,
    ):
        self.transcript_fetcher = transcript_fetcher
        self.metadata_fetcher = metadata_fetcher
        self.invoker = invoker
        self.settings = settings
        self.prompt_builder = prompt_builder or PromptBuilder(
            TokenCounter(settings.token_model), settings
        )
        self.selectors = {
            Operation.SUMMARIZE: ModelSelector(settings.summarize_policy),
            Operation.CLEAN: ModelSelector(settings.clean_policy),
        }
        self.verbose = verbose

    @classmethod
    def from_settings(cls, settings: Settings, verbose: bool = False) -> "TranscriptPipeline":
        """Build a pipeline wired to YouTube and the OpenAI chat API."""
        invoker = ChatInvoker(
            api_key=settings.require_api_key(),
            base_url=settings.openai_base_url,
            retry_delay=settings.retry_delay_seconds,
            timeout=settings.request_timeout,
            verbose=verbose,
        )
        return cls(
            transcript_fetcher=TranscriptFetcher(),
            metadata_fetcher=MetadataFetcher(),
            invoker=invoker,
            settings=settings,
            verbose=verbose,
        )

    def request_summary(self, video_id: str) -> VideoResult:
        return self.run(video_id, Operation.SUMMARIZE)

    def request_clean_transcript(self, video_id: str) -> VideoResult:
        return self.run(video_id, Operation.CLEAN)

    def run(self, video_id: str, operation: Operation) -> VideoResult:
        """
        Produce display-ready output for one video.

        Args:
            video_id: YouTube video ID
            operation: Operation.SUMMARIZE or Operation.CLEAN

        Returns:
            VideoResult with the stitched text and its display segments

        Raises:
            ValidationError: transcript too short or too long (no chat call made)
            RemoteError: a fetch or chat call failed
        """
        if self.verbose:
            print(f"  Step 1: Fetching video metadata for {video_id}...")
        info = self.metadata_fetcher.fetch(video_id)
        if self.verbose:
            print(f"    Title: {info.title}")
            print(f"    Channel: {info.channel_name}")

        if self.verbose:
            print("  Step 2: Fetching transcript...")
        transcript = self.transcript_fetcher.fetch(video_id)
        if self.verbose:
            print(f"  ✓ Transcript fetched ({len(transcript):,} characters)")

        if self.verbose:
            print(f"  Step 3: Building prompts ({operation.value})...")
        plan = self.prompt_builder.build(operation, transcript, info.title, info.channel_name)
        tier = self.select_tier(plan)
        if self.verbose:
            print(
                f"  ✓ {len(plan)} request(s), {plan.total_tokens:,} estimated tokens, "
                f"model {tier.model} ({tier.name})"
            )

        if self.verbose:
            print("  Step 4: Calling chat completion...")
        responses = []
        for i, messages in enumerate(plan.message_sets, start=1):
            if self.verbose:
                print(f"    Request {i}/{len(plan)}...")
            responses.append(self.invoker.invoke(messages, tier))

        text = stitch_responses(responses, operation)
        chunks = break_text_into_chunks(text, self.settings.display_chunk_chars)
        if self.verbose:
            print(f"  ✓ Output split into {len(chunks)} display segment(s)")

        return VideoResult(info=info, text=text, segments=to_display_segments(chunks, info))

    def select_tier(self, plan: PromptPlan) -> ModelTier:
        """Pick one tier for the whole plan and check every request fits it."""
        tier = self.selectors[plan.operation].select(plan.total_tokens)
        for tokens in plan.token_counts:
            if tokens > tier.max_tokens:
                raise ValidationError(
                    f"Request of {tokens} tokens exceeds the {tier.name} tier limit "
                    f"of {tier.max_tokens} tokens"
                )
        return tier
