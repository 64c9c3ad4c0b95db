"""Dependency injection configuration for the speech-coach service."""

import httpx
import redis

from speech_coach.config import load_config
from speech_coach.domain import JobPoller, SpeechScorer
from speech_coach.handlers import AnalysisHandler, RecordingHandler
from speech_coach.infrastructure import AssemblyAIClient, RedisKeyValueStore
from speech_coach.logging import setup_logging
from speech_coach.repositories import RecordingRepository

logger = setup_logging()

_config = load_config()

if not _config.assemblyai.api_key:
    logger.warning("ASSEMBLYAI_API_KEY is not set, analysis requests will fail")

# AssemblyAI setup
_http_client = httpx.Client(timeout=_config.assemblyai.request_timeout_seconds)
_provider = AssemblyAIClient(_http_client, _config.assemblyai)
_poller = JobPoller(
    _provider,
    interval_seconds=_config.polling.interval_seconds,
    max_attempts=_config.polling.max_attempts,
)
_analysis_handler = AnalysisHandler(
    _provider, _poller, SpeechScorer(), _config.storage.upload_dir
)

# Redis-backed recording store
_redis_client = redis.Redis(
    host=_config.redis.host,
    port=_config.redis.port,
    decode_responses=True,
)
_store = RedisKeyValueStore(_redis_client)
_repository = RecordingRepository(
    _store, _config.storage.recordings_dir, key=_config.redis.recordings_key
)
_recording_handler = RecordingHandler(
    _repository, _analysis_handler, _config.storage.upload_dir
)


def get_analysis_handler() -> AnalysisHandler:
    """Returns the configured analysis handler."""
    return _analysis_handler


def get_recording_repository() -> RecordingRepository:
    """Returns the shared recording repository."""
    return _repository


def get_recording_handler() -> RecordingHandler:
    """Returns the configured recording handler."""
    return _recording_handler
