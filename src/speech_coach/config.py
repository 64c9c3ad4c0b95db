"""Application configuration loaded from environment variables."""

import os
from pathlib import Path

from pydantic import BaseModel, Field


class AssemblyAIConfig(BaseModel, frozen=True):
    """AssemblyAI API configuration."""

    api_key: str
    base_url: str = "https://api.assemblyai.com/v2"
    sentiment_analysis: bool = True
    entity_detection: bool = True
    request_timeout_seconds: float = 60.0


class PollingConfig(BaseModel, frozen=True):
    """Transcription job polling configuration."""

    interval_seconds: float = Field(default=5.0, ge=0)
    max_attempts: int = Field(default=120, ge=1)  # 10 minutes at 5s


class RedisConfig(BaseModel, frozen=True):
    """Redis connection configuration."""

    host: str
    port: int = 6379
    recordings_key: str = "recordings"


class StorageConfig(BaseModel, frozen=True):
    """Local file system locations."""

    upload_dir: Path = Path("uploads")
    recordings_dir: Path = Path("recordings")


class ServerConfig(BaseModel, frozen=True):
    """HTTP server configuration."""

    host: str = "0.0.0.0"
    port: int = 3000


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    assemblyai: AssemblyAIConfig
    polling: PollingConfig
    redis: RedisConfig
    storage: StorageConfig
    server: ServerConfig


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        assemblyai=AssemblyAIConfig(
            api_key=os.getenv("ASSEMBLYAI_API_KEY", ""),
            base_url=os.getenv("ASSEMBLYAI_BASE_URL", "https://api.assemblyai.com/v2"),
            request_timeout_seconds=float(
                os.getenv("ASSEMBLYAI_REQUEST_TIMEOUT_SECONDS", "60")
            ),
        ),
        polling=PollingConfig(
            interval_seconds=float(os.getenv("POLL_INTERVAL_SECONDS", "5")),
            max_attempts=int(os.getenv("POLL_MAX_ATTEMPTS", "120")),
        ),
        redis=RedisConfig(
            host=os.getenv("REDIS_HOST", "redis"),
            port=int(os.getenv("REDIS_PORT", "6379")),
            recordings_key=os.getenv("RECORDINGS_KEY", "recordings"),
        ),
        storage=StorageConfig(
            upload_dir=Path(os.getenv("UPLOAD_DIR", "uploads")),
            recordings_dir=Path(os.getenv("RECORDINGS_DIR", "recordings")),
        ),
        server=ServerConfig(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "3000")),
        ),
    )
