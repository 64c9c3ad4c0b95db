"""Domain models for speech analysis and the recording store."""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class JobStatus(str, Enum):
    """Lifecycle states of a provider transcription job."""

    QUEUED = "queued"
    PROCESSING = "processing"
    COMPLETED = "completed"
    ERROR = "error"


class Entity(BaseModel, frozen=True):
    """A detected entity spanning part of the transcript."""

    entity_type: str
    text: str = ""
    start: int | None = None
    end: int | None = None


class SentimentSegment(BaseModel, frozen=True):
    """A sentiment label attached to a contiguous stretch of speech."""

    sentiment: Literal["POSITIVE", "NEUTRAL", "NEGATIVE"]
    text: str = ""
    start: int | None = None
    end: int | None = None
    confidence: float | None = None


class Word(BaseModel, frozen=True):
    """A recognized word with its timing in milliseconds."""

    text: str
    start: int | None = None
    end: int | None = None
    confidence: float | None = None


class TranscriptionResult(BaseModel, frozen=True):
    """Structured output of a completed transcription job."""

    text: str = ""
    entities: list[Entity] = Field(default_factory=list)
    sentiment_segments: list[SentimentSegment] = Field(default_factory=list)
    words: list[Word] = Field(default_factory=list)
    audio_duration: float = 0.0

    @field_validator("text", mode="before")
    @classmethod
    def _none_text_is_empty(cls, value):
        return "" if value is None else value

    @field_validator("entities", "sentiment_segments", "words", mode="before")
    @classmethod
    def _none_list_is_empty(cls, value):
        return [] if value is None else value

    @field_validator("audio_duration", mode="before")
    @classmethod
    def _none_duration_is_zero(cls, value):
        return 0.0 if value is None else value


class TranscriptionJob(BaseModel, frozen=True):
    """Snapshot of a transcription job as last reported by the provider."""

    id: str
    status: JobStatus
    error: str | None = None
    result: TranscriptionResult | None = None


class SpeechMetrics(BaseModel, frozen=True):
    """Intermediate measurements the confidence score is derived from."""

    filler_count: int
    sentiment_score: float
    speaking_rate: float


class AnalysisResult(BaseModel, frozen=True):
    """Confidence score and coaching tips for one recording."""

    transcript: str
    confidence: int = Field(ge=0, le=100)
    tips: list[str]


class Recording(BaseModel):
    """A locally stored recording and its optional analysis."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    uri: str
    duration: float
    created_at: str = Field(alias="createdAt")
    size: int
    analysis: AnalysisResult | None = None
