"""Time-bounded memo of resolved video references, keyed by trimmed input."""

from __future__ import annotations

import threading
import time
from collections import OrderedDict
from typing import Callable, Optional

from models import ResolvedVideoReference
from validators import trim

DEFAULT_TTL_SECONDS = 600  # 10 minutes
DEFAULT_MAX_ENTRIES = 1024

Resolver = Callable[[str], ResolvedVideoReference]


def cache_key(value: object) -> str:
    return trim(value) if isinstance(value, str) else ""


class ResolutionCache:
    """Thread-safe TTL cache for resolver results.

    Entries expire *ttl_seconds* after they were stored. When full, the
    oldest entry is dropped first.
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        max_entries: int = DEFAULT_MAX_ENTRIES,
    ) -> None:
        self._ttl = ttl_seconds
        self._max_entries = max_entries
        self._store: OrderedDict[str, tuple[float, ResolvedVideoReference]] = OrderedDict()
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def get(self, value: str) -> Optional[ResolvedVideoReference]:
        """Return the cached reference for *value* if still fresh."""
        key = cache_key(value)
        with self._lock:
            self._evict_expired()
            entry = self._store.get(key)
            if entry is None:
                self.misses += 1
                return None
            self.hits += 1
            return entry[1]

    def set(self, value: str, ref: ResolvedVideoReference) -> None:
        key = cache_key(value)
        with self._lock:
            self._store.pop(key, None)
            self._store[key] = (time.monotonic(), ref)
            while len(self._store) > self._max_entries:
                self._store.popitem(last=False)

    def get_or_resolve(self, value: str, resolver: Resolver) -> ResolvedVideoReference:
        """Return the cached reference, resolving and storing it on a miss."""
        ref = self.get(value)
        if ref is None:
            ref = resolver(value)
            self.set(value, ref)
        return ref

    def clear(self) -> None:
        with self._lock:
            self._store.clear()
            self.hits = 0
            self.misses = 0

    def _evict_expired(self) -> None:
        """Drop entries older than TTL. Caller holds the lock."""
        now = time.monotonic()
        while self._store:
            key, (ts, _) = next(iter(self._store.items()))
            if now - ts < self._ttl:
                break
            del self._store[key]

    def __len__(self) -> int:
        with self._lock:
            self._evict_expired()
            return len(self._store)
