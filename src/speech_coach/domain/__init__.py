"""Domain layer exports."""

from .models import (
    AnalysisResult,
    Entity,
    JobStatus,
    Recording,
    SentimentSegment,
    SpeechMetrics,
    TranscriptionJob,
    TranscriptionResult,
    Word,
)
from .job_poller import JobPoller
from .speech_scorer import SpeechScorer

__all__ = [
    "AnalysisResult",
    "Entity",
    "JobStatus",
    "Recording",
    "SentimentSegment",
    "SpeechMetrics",
    "TranscriptionJob",
    "TranscriptionResult",
    "Word",
    "JobPoller",
    "SpeechScorer",
]
