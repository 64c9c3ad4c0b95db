"""Infrastructure layer exports."""

from .assemblyai_client import AssemblyAIClient
from .redis_store import RedisKeyValueStore

__all__ = ["AssemblyAIClient", "RedisKeyValueStore"]
