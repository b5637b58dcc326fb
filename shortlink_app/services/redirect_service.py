import logging
from typing import Optional

from shortlink_app.cache.keys import cache_key
from shortlink_app.cache.strategies import CacheStrategy
from shortlink_app.storage.strategies import URLStore


class RedirectService:
    """Read-only alias resolution"""

    def __init__(
        self,
        store: URLStore,
        logger: logging.Logger,
        cache: Optional[CacheStrategy] = None,
        cache_ttl: int = 3600,
    ):
        self.store = store
        self.logger = logger
        self.cache = cache
        self.cache_ttl = cache_ttl

    async def resolve(self, alias: str) -> str:
        """
        Get the URL for an alias using Cache-Aside pattern.

        Flow:
        1. Check cache first
        2. On a miss, ask the store (raises NotFoundError if absent)
        3. Populate cache for next time
        """
        key = cache_key(alias)

        if self.cache is not None:
            cached_url = await self.cache.get(key)
            if cached_url:
                return cached_url

        url = self.store.get_url(alias)
        self.logger.debug("got url", extra={"alias": alias})

        if self.cache is not None:
            await self.cache.set(key, url, ttl=self.cache_ttl)

        return url
