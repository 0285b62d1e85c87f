"""Time-boxed response cache with LRU eviction."""

import time
from collections import OrderedDict
from collections.abc import Mapping
from typing import Any

DEFAULT_TTL = 300  # 5 minutes


def make_key(url: str, params: Mapping[str, Any] | None = None) -> str:
    """Build a cache key from request identity (URL plus sorted params)."""
    if not params:
        return url
    query = "&".join(f"{k}={params[k]}" for k in sorted(params))
    return f"{url}?{query}"


class TTLCache:
    """In-memory cache with time-to-live and max-size eviction.

    Instances are passed to whatever needs caching rather than living at
    module level, so each app (or test) owns its own.

    Usage::

        cache = TTLCache(ttl=300, max_size=256)
        cache.set("key", value)
        hit = cache.get("key")  # returns value or None if expired/missing
    """

    def __init__(self, ttl: float = DEFAULT_TTL, max_size: int = 256) -> None:
        self._ttl = ttl
        self._max_size = max_size
        self._store: OrderedDict[str, tuple[Any, float]] = OrderedDict()

    @property
    def ttl(self) -> float:
        return self._ttl

    def __len__(self) -> int:
        return len(self._store)

    def get(self, key: str) -> Any | None:
        """Return the cached value if present and not expired, else None.

        Expired entries are dropped on read.
        """
        entry = self._store.get(key)
        if entry is None:
            return None
        value, ts = entry
        if time.time() - ts > self._ttl:
            del self._store[key]
            return None
        self._store.move_to_end(key)
        return value

    def set(self, key: str, value: Any) -> None:
        """Store a value under *key*, evicting the oldest entry if at capacity."""
        if key in self._store:
            self._store.move_to_end(key)
        self._store[key] = (value, time.time())
        while len(self._store) > self._max_size:
            self._store.popitem(last=False)

    def clear(self) -> None:
        self._store.clear()
