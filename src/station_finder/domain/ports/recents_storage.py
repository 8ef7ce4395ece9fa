"""Durable storage port for the recent stations slot."""

from collections.abc import Callable
from typing import Protocol

StorageListener = Callable[[str, str | None], None]


class RecentsStorage(Protocol):
    """Port for a named-slot key/value store that survives restarts."""

    def get(self, key: str) -> str | None:
        """Read the raw value stored under key, or None if the slot is empty."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store a raw value under key."""
        ...

    def subscribe(self, listener: StorageListener) -> Callable[[], None]:
        """Register a listener called with (key, value) after each write.

        Returns:
            A callable that removes the listener.
        """
        ...
