"""Shared fakes for vidscribe tests."""

from types import SimpleNamespace

import pytest

from vidscribe.models import VideoInfo


class WordCounter:
    """Counts one token per whitespace-separated word."""

    def count(self, messages):
        return sum(len(m.content.split()) for m in messages)


class ScriptedCounter:
    """Returns pre-set token counts in order, repeating the last one."""

    def __init__(self, counts):
        self.counts = list(counts)
        self.calls = 0

    def count(self, messages):
        index = min(self.calls, len(self.counts) - 1)
        self.calls += 1
        return self.counts[index]


class FakeTranscriptFetcher:
    def __init__(self, text=None, error=None):
        self.text = text
        self.error = error
        self.calls = []

    def fetch(self, video_id):
        self.calls.append(video_id)
        if self.error is not None:
            raise self.error
        return self.text


class FakeMetadataFetcher:
    def __init__(self, info=None, error=None):
        self.info = info or VideoInfo(title="Test Video", channel_name="Test Channel")
        self.error = error
        self.calls = []

    def fetch(self, video_id):
        self.calls.append(video_id)
        if self.error is not None:
            raise self.error
        return self.info


class FakeInvoker:
    def __init__(self, responses=None, error=None):
        self.responses = list(responses or ["Response."])
        self.error = error
        self.calls = []

    def invoke(self, messages, tier):
        self.calls.append((messages, tier))
        if self.error is not None:
            raise self.error
        index = min(len(self.calls) - 1, len(self.responses) - 1)
        return self.responses[index]


class FakeCompletions:
    """Stands in for client.chat.completions; outcomes are responses or exceptions."""

    def __init__(self, outcomes):
        self.outcomes = list(outcomes)
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        index = min(len(self.calls) - 1, len(self.outcomes) - 1)
        outcome = self.outcomes[index]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


def chat_response(*contents):
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=c)) for c in contents]
    )


def fake_openai_client(completions):
    return SimpleNamespace(chat=SimpleNamespace(completions=completions))


def make_transcript(word_count, prefix="w"):
    return " ".join(f"{prefix}{i}" for i in range(word_count))


@pytest.fixture
def video_info():
    return VideoInfo(title="Test Video", channel_name="Test Channel")
