"""Infrastructure interface exports."""

from .key_value_store import KeyValueStore
from .transcription_provider import TranscriptionProvider

__all__ = ["KeyValueStore", "TranscriptionProvider"]
