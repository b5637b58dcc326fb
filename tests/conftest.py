"""
Test configuration and fixtures for the shortlink service.
This centralizes all test setup, making individual tests clean.
"""

import logging

import pytest
from fastapi.testclient import TestClient

from main import app
from shortlink_app.cache.strategies import InMemoryCache
from shortlink_app.database.connection import build_engine
from shortlink_app.dependencies import get_cache, get_url_store
from shortlink_app.services.alias_generator import RandomAliasGenerator
from shortlink_app.services.redirect_service import RedirectService
from shortlink_app.services.save_service import SaveService
from shortlink_app.storage.strategies import InMemoryURLStore, SQLAlchemyURLStore


@pytest.fixture(scope="function")
def sql_store(tmp_path):
    """
    Fresh SQLite-backed store for each test.
    A file database (not :memory:) so several threads see the same data.
    """
    store = SQLAlchemyURLStore(build_engine(f"sqlite:///{tmp_path / 'test.db'}"))
    store.init()
    try:
        yield store
    finally:
        store.close()


@pytest.fixture(scope="function")
def memory_store():
    return InMemoryURLStore()


@pytest.fixture
def logger():
    return logging.getLogger("shortlink.tests")


@pytest.fixture
def save_service(memory_store, logger):
    return SaveService(
        store=memory_store,
        generator=RandomAliasGenerator(),
        logger=logger,
    )


@pytest.fixture
def redirect_service(memory_store, logger):
    return RedirectService(store=memory_store, logger=logger)


@pytest.fixture(scope="function")
def client(sql_store):
    """
    Create a test client with the store and cache overridden.
    This is the main fixture that tests will use.
    """
    cache = InMemoryCache()
    app.dependency_overrides[get_url_store] = lambda: sql_store
    app.dependency_overrides[get_cache] = lambda: cache

    with TestClient(app) as test_client:
        yield test_client

    # Clean up overrides
    app.dependency_overrides.clear()
