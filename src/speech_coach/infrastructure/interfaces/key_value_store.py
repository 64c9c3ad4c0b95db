"""Abstract interface for key-value storage."""

from abc import ABC, abstractmethod


class KeyValueStore(ABC):
    """Abstract base class for string key-value backends."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """
        Retrieves the value stored under a key.

        Returns:
            The stored value or None if the key is absent.

        Raises:
            KeyValueStoreError: If the store operation fails.
        """
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """
        Stores a value under a key, replacing any previous value.

        Raises:
            KeyValueStoreError: If the store operation fails.
        """
        pass
