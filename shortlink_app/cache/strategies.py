"""
Cache strategies using Strategy Pattern.
Allows switching between different cache backends (Redis, In-Memory, Null).

Only alias -> URL lookups are cached. Records are never mutated, so an
entry can only expire, never become wrong.
"""

from abc import ABC, abstractmethod
from typing import Callable, Optional, Tuple
import logging
import threading
import time

from cachetools import TLRUCache
from redis.exceptions import RedisError

logger = logging.getLogger("shortlink.cache")


class CacheStrategy(ABC):
    """
    Abstract base class for cache strategies.

    This is the Strategy Pattern interface - allows multiple cache implementations
    without changing the service layer code.

    All methods are async because cache operations involve I/O (network for Redis).
    """

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """
        Get value from cache.

        Args:
            key: Cache key

        Returns:
            Cached value or None if not found
        """
        pass

    @abstractmethod
    async def set(self, key: str, value: str, ttl: int = 3600) -> bool:
        """
        Set value in cache with TTL (Time To Live).

        Args:
            key: Cache key
            value: Value to cache
            ttl: Time to live in seconds (default: 1 hour)

        Returns:
            True if successful, False otherwise
        """
        pass


class RedisCache(CacheStrategy):
    """
    Redis cache implementation.

    Shared between all service processes. A Redis failure degrades to a
    cache miss; it never fails the request.
    """

    def __init__(self, redis_client):
        """
        Initialize Redis cache.

        Args:
            redis_client: Redis client instance (redis.Redis)
        """
        self.redis = redis_client

    async def get(self, key: str) -> Optional[str]:
        try:
            value = self.redis.get(key)
            return value.decode('utf-8') if value else None
        except RedisError as e:
            logger.warning("redis get failed", extra={"key": key, "error": str(e)})
            return None

    async def set(self, key: str, value: str, ttl: int = 3600) -> bool:
        try:
            return bool(self.redis.setex(key, ttl, value))
        except RedisError as e:
            logger.warning("redis set failed", extra={"key": key, "error": str(e)})
            return False


def _time_to_use(key: str, entry: Tuple[str, int], now: float) -> float:
    return now + entry[1]


class InMemoryCache(CacheStrategy):
    """
    In-memory cache backed by cachetools.TLRUCache.

    Per-process and lost on restart. Each entry expires after the ttl
    passed to set(); past maxsize entries the least recently used one
    is evicted.
    """

    def __init__(self, maxsize: int = 10000, timer: Callable[[], float] = time.monotonic):
        self._cache = TLRUCache(maxsize=maxsize, ttu=_time_to_use, timer=timer)
        # cachetools caches are not thread-safe
        self._lock = threading.Lock()

    async def get(self, key: str) -> Optional[str]:
        with self._lock:
            entry = self._cache.get(key)
        return entry[0] if entry else None

    async def set(self, key: str, value: str, ttl: int = 3600) -> bool:
        with self._lock:
            self._cache[key] = (value, ttl)
        return True

    def __len__(self) -> int:
        with self._lock:
            self._cache.expire()
            return len(self._cache)


class NullCache(CacheStrategy):
    """
    Null Object Pattern - cache that does nothing.

    Used to disable caching; every lookup goes to the store.
    """

    async def get(self, key: str) -> Optional[str]:
        """Always returns None (cache miss)"""
        return None

    async def set(self, key: str, value: str, ttl: int = 3600) -> bool:
        """Pretends to set but does nothing"""
        return True
