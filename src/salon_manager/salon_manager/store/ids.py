from __future__ import annotations

import time
from typing import Callable, Container


class IdGenerator:
    """Issue record ids as millisecond-timestamp strings.

    Two ids requested within the same millisecond, or a clock that went
    backwards, still yield distinct values: each id is strictly greater than
    the previous one and never equal to an id already in the collection.
    """

    def __init__(self, clock: Callable[[], float] = time.time):
        self._clock = clock
        self._last = 0

    def next_id(self, existing: Container[str] = ()) -> str:
        candidate = max(int(self._clock() * 1000), self._last + 1)
        while str(candidate) in existing:
            candidate += 1
        self._last = candidate
        return str(candidate)
