"""
FastAPI dependencies for dependency injection.

This module provides singleton instances of the url store, cache, alias
generator and logger that are injected into services and routes.
Tests swap any of them through app.dependency_overrides.
"""

import logging
from functools import lru_cache

from fastapi import Depends

from shortlink_app.cache.factory import CacheFactory, CacheBackend
from shortlink_app.cache.strategies import CacheStrategy
from shortlink_app.config import settings
from shortlink_app.logging_config import LOGGER_NAME
from shortlink_app.services.alias_generator import AliasGenerator, RandomAliasGenerator
from shortlink_app.services.redirect_service import RedirectService
from shortlink_app.services.save_service import SaveService
from shortlink_app.storage.factory import URLStoreFactory, StorageBackend
from shortlink_app.storage.strategies import URLStore


@lru_cache()
def get_url_store() -> URLStore:
    """
    Get url store instance (singleton).

    Factory gets config from settings internally.
    """
    backend = StorageBackend(settings.storage_backend)
    return URLStoreFactory.create(backend)


@lru_cache()
def get_cache() -> CacheStrategy:
    """Get cache instance (singleton)."""
    backend = CacheBackend(settings.cache_backend)
    return CacheFactory.create(backend)


@lru_cache()
def get_alias_generator() -> AliasGenerator:
    return RandomAliasGenerator()


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def get_save_service(
    store: URLStore = Depends(get_url_store),
    generator: AliasGenerator = Depends(get_alias_generator),
    cache: CacheStrategy = Depends(get_cache),
    logger: logging.Logger = Depends(get_logger),
) -> SaveService:
    """Get SaveService with all dependencies injected."""
    return SaveService(
        store=store,
        generator=generator,
        logger=logger.getChild("save"),
        alias_length=settings.alias_length,
        alias_max_length=settings.alias_max_length,
        max_retries=settings.max_retries,
        cache=cache,
        cache_ttl=settings.cache_ttl,
    )


def get_redirect_service(
    store: URLStore = Depends(get_url_store),
    cache: CacheStrategy = Depends(get_cache),
    logger: logging.Logger = Depends(get_logger),
) -> RedirectService:
    """Get RedirectService with all dependencies injected."""
    return RedirectService(
        store=store,
        logger=logger.getChild("redirect"),
        cache=cache,
        cache_ttl=settings.cache_ttl,
    )
