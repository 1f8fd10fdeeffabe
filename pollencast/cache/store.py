"""In-process TTL store, one entry per logical key.

Created once per process and handed to the coordinator; nothing is persisted
across restarts. Entries are immutable and replaced whole, so a reader sees
either the old entry or the new one.
"""

import time
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class CacheState(StrEnum):
    EMPTY = "empty"
    FETCHING = "fetching"
    FRESH = "fresh"


@dataclass(frozen=True)
class CacheEntry:
    value: Any
    stored_at: float
    expires_at: float

    def is_fresh(self, now: float) -> bool:
        return now < self.expires_at


class CacheStore:
    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self.clock = clock
        self._entries: dict[str, CacheEntry] = {}

    def get(self, key: str) -> CacheEntry | None:
        """Return the entry for key while it is fresh; expired entries are evicted."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        if not entry.is_fresh(self.clock()):
            self._entries.pop(key, None)
            return None
        return entry

    def put(self, key: str, value: Any, ttl_seconds: float) -> CacheEntry:
        now = self.clock()
        entry = CacheEntry(value=value, stored_at=now, expires_at=now + ttl_seconds)
        self._entries[key] = entry
        return entry
