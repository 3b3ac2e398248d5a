from __future__ import annotations

from typing import Optional, Sequence


class InMemoryStorage:
    """Process-local storage used by tests and throwaway runs."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._data: dict[str, str] = dict(initial or {})
        self.writes: list[str] = []

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value
        self.writes.append(key)

    def keys(self) -> Sequence[str]:
        return list(self._data.keys())
