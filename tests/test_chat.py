"""Tests for chat invocation and its single retry."""

import openai
import pytest

from vidscribe.chat import ChatInvoker
from vidscribe.config import ModelTier
from vidscribe.errors import EmptyResponseError, MissingCredentialError, RemoteError
from vidscribe.models import ChatMessage

from conftest import FakeCompletions, chat_response, fake_openai_client


TIER = ModelTier(name="high", model="gpt-4", max_tokens=2_999)
MESSAGES = (
    ChatMessage(role="system", content="You are a summarization assistant."),
    ChatMessage(role="user", content="Transcript: hello"),
)


def connection_error():
    return openai.OpenAIError("connection reset")


def make_invoker(outcomes):
    completions = FakeCompletions(outcomes)
    sleeps = []
    invoker = ChatInvoker(client=fake_openai_client(completions), retry_delay=60.0, sleep=sleeps.append)
    return invoker, completions, sleeps


class TestChatInvoker:
    def test_first_attempt_success(self):
        invoker, completions, sleeps = make_invoker([chat_response("A summary.", "ignored")])

        assert invoker.invoke(MESSAGES, TIER) == "A summary."
        assert sleeps == []
        assert completions.calls == [
            {
                "model": "gpt-4",
                "messages": [
                    {"role": "system", "content": "You are a summarization assistant."},
                    {"role": "user", "content": "Transcript: hello"},
                ],
            }
        ]

    def test_retry_after_failure(self, capsys):
        invoker, completions, sleeps = make_invoker([connection_error(), chat_response("Second try.")])

        assert invoker.invoke(MESSAGES, TIER) == "Second try."
        assert sleeps == [60.0]
        assert len(completions.calls) == 2
        assert completions.calls[0] == completions.calls[1]
        assert "Retrying in 60s" in capsys.readouterr().out

    def test_always_empty_attempted_twice(self):
        invoker, completions, sleeps = make_invoker([chat_response()])

        with pytest.raises(EmptyResponseError, match="No choices in response"):
            invoker.invoke(MESSAGES, TIER)
        assert len(completions.calls) == 2
        assert sleeps == [60.0]

    def test_second_failure_surfaces(self):
        first, second = connection_error(), connection_error()
        invoker, completions, sleeps = make_invoker([first, second])

        with pytest.raises(RemoteError) as excinfo:
            invoker.invoke(MESSAGES, TIER)
        assert excinfo.value.__cause__ is second
        assert "connection reset" in str(excinfo.value)
        assert len(completions.calls) == 2
        assert sleeps == [60.0]

    def test_none_content_is_empty_response(self):
        invoker, _, _ = make_invoker([chat_response(None)])
        with pytest.raises(EmptyResponseError):
            invoker.invoke(MESSAGES, TIER)

    def test_missing_api_key(self):
        with pytest.raises(MissingCredentialError):
            ChatInvoker(api_key=None)

    def test_builds_client_without_client_retries(self):
        invoker = ChatInvoker(api_key="sk-test", base_url="https://proxy.example.com/v1")
        assert invoker.client.max_retries == 0
        assert str(invoker.client.base_url).startswith("https://proxy.example.com/v1")
