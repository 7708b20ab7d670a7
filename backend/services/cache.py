"""Simple in-memory TTL cache for computed views.

Note: Each uvicorn worker has its own cache instance. With --workers 2,
a view may be computed twice (once per worker). Concurrent misses within
one worker may also compute redundantly; the last write wins.
"""

import time
from typing import Any, Callable


class TTLCache:
    def __init__(self, ttl_seconds: float = 60, clock: Callable[[], float] = time.monotonic):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._store: dict[str, tuple[float, Any]] = {}

    def get(self, key: str) -> Any | None:
        if key in self._store:
            expires_at, value = self._store[key]
            if self._clock() < expires_at:
                return value
            del self._store[key]
        return None

    def set(self, key: str, value: Any) -> None:
        self._store[key] = (self._clock() + self.ttl_seconds, value)

    def __len__(self) -> int:
        now = self._clock()
        return sum(1 for expires_at, _ in self._store.values() if now < expires_at)
