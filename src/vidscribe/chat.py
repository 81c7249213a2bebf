"""
Chat-completion invocation with a single bounded retry.

A failed request is retried exactly once after a fixed delay; a second failure
is raised to the caller as-is. There is no idempotency key, so a failure after
partial server-side processing looks the same as a clean failure.
"""

from __future__ import annotations

import time
from typing import Callable, Optional

from openai import OpenAI, OpenAIError

from vidscribe.config import ModelTier
from vidscribe.errors import EmptyResponseError, MissingCredentialError, RemoteError
from vidscribe.models import MessageSet


class ChatInvoker:
    """Sends one message set to the chat-completion service."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        client: Optional[OpenAI] = None,
        retry_delay: float = 60.0,
        sleep: Callable[[float], None] = time.sleep,
        timeout: Optional[float] = None,
        verbose: bool = False,
    ):
        """
        Initialize the invoker.

        Args:
            api_key: OpenAI API key, required unless a client is given
            base_url: Optional alternative endpoint (e.g. a proxy)
            client: Pre-built OpenAI-compatible client
            retry_delay: Seconds to wait before the single retry
            sleep: Function used to wait; tests pass a no-op
            timeout: Optional per-request timeout in seconds
            verbose: Enable verbose output for debugging
        """
        if client is None:
            if not api_key:
                raise MissingCredentialError(
                    "OpenAI API key required. Set OPENAI_API_KEY environment variable "
                    "or pass api_key parameter."
                )
            # Retries are handled here, not by the client.
            options = {"api_key": api_key, "base_url": base_url, "max_retries": 0}
            if timeout is not None:
                options["timeout"] = timeout
            client = OpenAI(**options)
        self.client = client
        self.retry_delay = retry_delay
        self.sleep = sleep
        self.verbose = verbose

    def invoke(self, messages: MessageSet, tier: ModelTier) -> str:
        """
        Return the first choice's content for a message set.

        Raises:
            RemoteError: if both attempts fail (the second failure is raised)
        """
        try:
            return self._invoke_once(messages, tier)
        except RemoteError as e:
            print(f"    Warning: chat request to {tier.model} failed: {e}")
            print(f"    Retrying in {self.retry_delay:.0f}s...")
            self.sleep(self.retry_delay)

        return self._invoke_once(messages, tier)

    def _invoke_once(self, messages: MessageSet, tier: ModelTier) -> str:
        if self.verbose:
            print(f"    Sending request to {tier.model} ({len(messages)} messages)...")
        try:
            response = self.client.chat.completions.create(
                model=tier.model,
                messages=[message.to_dict() for message in messages],
            )
        except OpenAIError as e:
            raise RemoteError(f"Chat completion failed: {e}") from e

        if not response.choices:
            raise EmptyResponseError("No choices in response")
        content = response.choices[0].message.content
        if content is None:
            raise EmptyResponseError("Empty message in first choice")

        if self.verbose:
            print(f"    ✓ Received response ({len(content)} characters)")
        return content
