"""
Token estimation for chat-completion requests.

Counts follow the OpenAI chat format: every message costs a fixed overhead
on top of its role and content, and the reply is primed with a few more
tokens. Undercounting risks rejection upstream; overcounting only risks an
unnecessary tier escalation.
"""

from __future__ import annotations

from typing import Iterable

import tiktoken

from vidscribe.models import ChatMessage


TOKENS_PER_MESSAGE = 3
REPLY_PRIMING_TOKENS = 3
FALLBACK_ENCODING = "cl100k_base"


def encoding_for(model: str) -> tiktoken.Encoding:
    """Return the tokenizer for a model family, or cl100k_base if unknown."""
    try:
        return tiktoken.encoding_for_model(model)
    except KeyError:
        return tiktoken.get_encoding(FALLBACK_ENCODING)


class TokenCounter:
    """Estimates how many tokens a message set consumes for one model family."""

    def __init__(self, model: str = "gpt-4"):
        self.model = model
        self._encoding = encoding_for(model)

    def count_text(self, text: str) -> int:
        return len(self._encoding.encode(text, disallowed_special=()))

    def count(self, messages: Iterable[ChatMessage]) -> int:
        """
        Count tokens in a message set, including per-message formatting overhead.

        Args:
            messages: Role-tagged messages in request order

        Returns:
            Estimated prompt token count
        """
        total = REPLY_PRIMING_TOKENS
        for message in messages:
            total += TOKENS_PER_MESSAGE
            total += self.count_text(message.role)
            total += self.count_text(message.content)
        return total
