"""Shared pytest fixtures for the speech-coach test suite.

Provides an in-memory key-value store, a factory for provider transcription
results, and a mock transcription provider.
"""

from unittest.mock import MagicMock

import pytest

from speech_coach.domain.models import (
    Entity,
    JobStatus,
    SentimentSegment,
    TranscriptionJob,
    TranscriptionResult,
    Word,
)
from speech_coach.infrastructure.interfaces import KeyValueStore, TranscriptionProvider


class InMemoryKeyValueStore(KeyValueStore):
    """Dict-backed KeyValueStore for tests."""

    def __init__(self):
        self.data: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value


@pytest.fixture
def kv_store():
    """Empty in-memory key-value store."""
    return InMemoryKeyValueStore()


@pytest.fixture
def make_transcription():
    """Factory for TranscriptionResult with the given counts.

    Returns:
        Callable building a result from filler count, sentiment labels,
        word count and duration in seconds.
    """

    def _make(
        fillers: int = 0,
        sentiments: list[str] | None = None,
        word_count: int = 0,
        duration: float = 60.0,
        text: str = "hello world",
        other_entities: int = 0,
    ) -> TranscriptionResult:
        entities = [Entity(entity_type="filler", text="um") for _ in range(fillers)]
        entities += [
            Entity(entity_type="person_name", text="Ada") for _ in range(other_entities)
        ]
        return TranscriptionResult(
            text=text,
            entities=entities,
            sentiment_segments=[
                SentimentSegment(sentiment=s) for s in (sentiments or [])
            ],
            words=[Word(text="word", start=i, end=i + 1) for i in range(word_count)],
            audio_duration=duration,
        )

    return _make


@pytest.fixture
def provider(make_transcription):
    """Mock provider whose job completes on the first status check."""
    mock = MagicMock(spec=TranscriptionProvider)
    mock.upload_audio.return_value = "https://cdn.example/upload/abc"
    mock.submit_job.return_value = TranscriptionJob(
        id="job-1", status=JobStatus.QUEUED
    )
    mock.get_job.return_value = TranscriptionJob(
        id="job-1",
        status=JobStatus.COMPLETED,
        result=make_transcription(sentiments=["POSITIVE"], word_count=135),
    )
    return mock
