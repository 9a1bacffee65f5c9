"""
In-memory TTL cache for market data responses.

The cache is created by whoever wires the bot together and handed to the
components that need it; there is no module-level instance.
"""
import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from cryptomate.config import CACHE_TTL_SECONDS

logger = logging.getLogger(__name__)


@dataclass
class CacheEntry:
    value: Any
    expires_at: float


class TTLCache:
    """
    Key-value store whose entries expire after a time-to-live.

    Expired entries are evicted lazily on read and in bulk by
    ``purge_expired`` (see CacheCleanupScheduler).
    """

    def __init__(
        self,
        ttl_seconds: float = CACHE_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        if ttl_seconds <= 0:
            raise ValueError(f"Cache TTL must be positive, got {ttl_seconds}")
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: Dict[str, CacheEntry] = {}

    def get(self, key: str) -> Optional[Any]:
        """Return the cached value, or None if missing or expired."""
        entry = self._entries.get(key)
        if entry is None:
            logger.debug("Cache miss: %s", key)
            return None

        if self._clock() >= entry.expires_at:
            logger.debug("Cache expired: %s", key)
            del self._entries[key]
            return None

        logger.debug("Cache hit: %s", key)
        return entry.value

    def set(self, key: str, value: Any, ttl_seconds: Optional[float] = None) -> None:
        """Store ``value`` under ``key`` for ``ttl_seconds`` (default TTL if omitted)."""
        ttl = self.ttl_seconds if ttl_seconds is None else ttl_seconds
        if ttl <= 0:
            raise ValueError(f"Cache TTL must be positive, got {ttl}")
        self._entries[key] = CacheEntry(value=value, expires_at=self._clock() + ttl)
        logger.debug("Cache set: %s (ttl=%ss)", key, ttl)

    def delete(self, key: str) -> bool:
        return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        self._entries.clear()

    def purge_expired(self) -> int:
        """
        Drop every expired entry.

        Returns:
            Number of entries removed
        """
        now = self._clock()
        expired = [key for key, entry in self._entries.items() if now >= entry.expires_at]
        for key in expired:
            del self._entries[key]

        if expired:
            logger.debug("Cleaned %d expired cache entries", len(expired))
        return len(expired)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        entry = self._entries.get(key)
        return entry is not None and self._clock() < entry.expires_at
