from __future__ import annotations

from typing import Optional, Protocol, Sequence


class KeyValueStorage(Protocol):
    """Durable string key -> string value storage.

    The persistence adapter depends on this interface, not on a concrete
    backend (file, memory, MySQL).
    """

    def get(self, key: str) -> Optional[str]:
        """Return the stored value, or None when the key is absent."""

        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, fully replacing prior contents."""

        raise NotImplementedError

    def keys(self) -> Sequence[str]:
        raise NotImplementedError
