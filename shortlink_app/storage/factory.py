"""
Factory for creating URL store instances.
Simple, clean factory with singleton caching.
"""

import logging
from enum import Enum
from .strategies import URLStore, SQLAlchemyURLStore, InMemoryURLStore
from shortlink_app.config import settings
from shortlink_app.database.connection import build_engine

logger = logging.getLogger("shortlink.storage")


class StorageBackend(Enum):
    """Available storage backends"""
    SQLALCHEMY = "sqlalchemy"
    MEMORY = "memory"


class URLStoreFactory:
    """
    Simple factory for creating URL store instances.

    Gets configuration from settings (not passed as parameters).
    """

    _instance: URLStore = None  # Single cached instance

    @classmethod
    def create(cls, backend: StorageBackend) -> URLStore:
        """
        Create or return cached URL store instance.

        Args:
            backend: Type of storage backend (from enum)

        Returns:
            Singleton URL store instance
        """
        # Return cached instance if exists
        if cls._instance is not None:
            return cls._instance

        if backend == StorageBackend.SQLALCHEMY:
            cls._instance = SQLAlchemyURLStore(build_engine(settings.database_url))
            logger.info("SQLAlchemy url store initialized")

        elif backend == StorageBackend.MEMORY:
            cls._instance = InMemoryURLStore()
            logger.info("In-memory url store initialized")

        else:
            raise ValueError(f"Unknown storage backend: {backend}")

        return cls._instance

    @classmethod
    def clear_instance(cls):
        """Clear cached instance (for testing)"""
        cls._instance = None
