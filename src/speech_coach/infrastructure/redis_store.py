"""Redis implementation of the KeyValueStore interface."""

import redis

from speech_coach.exceptions import KeyValueStoreError
from speech_coach.logging import setup_logging

from .interfaces import KeyValueStore

logger = setup_logging()


class RedisKeyValueStore(KeyValueStore):
    """Key-value store backed by Redis string keys without expiry."""

    def __init__(self, client: redis.Redis):
        self._client = client

    def get(self, key: str) -> str | None:
        try:
            return self._client.get(key)
        except redis.RedisError as e:
            logger.exception("Redis get failed", extra={"key": key})
            raise KeyValueStoreError(key, "get", cause=e) from e

    def set(self, key: str, value: str) -> None:
        try:
            self._client.set(key, value)
        except redis.RedisError as e:
            logger.exception("Redis set failed", extra={"key": key})
            raise KeyValueStoreError(key, "set", cause=e) from e
        logger.info("Key stored", extra={"key": key, "size_bytes": len(value)})
