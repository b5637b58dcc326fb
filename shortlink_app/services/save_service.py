import logging
from typing import Optional

from pydantic import AnyUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from shortlink_app.cache.keys import cache_key
from shortlink_app.cache.strategies import CacheStrategy
from shortlink_app.errors import (
    AliasExistsError,
    AliasSpaceExhaustedError,
    ValidationError,
)
from shortlink_app.services.alias_generator import AliasGenerator
from shortlink_app.storage.strategies import URLStore

_url_adapter = TypeAdapter(AnyUrl)

# Single-segment paths served by main.py; an alias equal to one of them
# could never be reached through GET /{alias}
RESERVED_ALIASES = frozenset({"health", "docs", "redoc"})


def validate_url(url: Optional[str]) -> None:
    """
    Check that url is present and absolute (scheme + host).

    The parser silently drops surrounding whitespace and embedded tabs or
    newlines, but the URL is stored verbatim, so such input is rejected.

    Raises:
        ValidationError: with the message returned to the client
    """
    if url is None or not url.strip():
        raise ValidationError("field url is a required field")

    if url != url.strip() or any(c in url for c in "\t\r\n"):
        raise ValidationError("field url is not a valid URL")

    try:
        parsed = _url_adapter.validate_python(url)
    except PydanticValidationError:
        raise ValidationError("field url is not a valid URL")

    if not parsed.host:
        raise ValidationError("field url is not a valid URL")


class SaveService:
    """
    Creates alias -> URL records.

    Dependencies are injected (store, generator, logger, cache) so the
    service runs unchanged against the in-memory store in tests.
    """

    def __init__(
        self,
        store: URLStore,
        generator: AliasGenerator,
        logger: logging.Logger,
        alias_length: int = 6,
        alias_max_length: int = 32,
        max_retries: int = 5,
        cache: Optional[CacheStrategy] = None,
        cache_ttl: int = 3600,
        reserved_aliases=RESERVED_ALIASES,
    ):
        if max_retries < 1:
            raise ValueError(f"max_retries must be positive, got {max_retries}")
        self.store = store
        self.generator = generator
        self.logger = logger
        self.alias_length = alias_length
        self.alias_max_length = alias_max_length
        self.max_retries = max_retries
        self.cache = cache
        self.cache_ttl = cache_ttl
        self.reserved_aliases = frozenset(reserved_aliases)

    def _validate_alias(self, alias: str) -> None:
        if not alias or len(alias) > self.alias_max_length or not (
            alias.isascii() and alias.isalnum()
        ):
            raise ValidationError("field alias is not a valid alias")
        if alias in self.reserved_aliases:
            raise ValidationError("field alias is not a valid alias")

    async def save(self, url: Optional[str], alias: Optional[str] = None) -> str:
        """
        Store url under alias, or under a freshly generated alias.

        A custom alias that is already taken raises AliasExistsError
        straight away. Generated aliases are retried up to max_retries
        times before AliasSpaceExhaustedError is raised.

        Returns:
            The alias the URL was stored under
        """
        validate_url(url)

        if alias is not None:
            self._validate_alias(alias)
            record_id = self.store.save(alias, url)
        else:
            alias, record_id = self._save_generated(url)

        self.logger.info("url added", extra={"alias": alias, "id": record_id})

        if self.cache is not None:
            await self.cache.set(cache_key(alias), url, ttl=self.cache_ttl)

        return alias

    def _save_generated(self, url: str):
        for attempt in range(1, self.max_retries + 1):
            candidate = self.generator.generate(self.alias_length)
            if candidate in self.reserved_aliases:
                continue
            try:
                return candidate, self.store.save(candidate, url)
            except AliasExistsError:
                self.logger.debug(
                    "generated alias collided",
                    extra={"alias": candidate, "attempt": attempt},
                )

        raise AliasSpaceExhaustedError(self.max_retries)
