"""
URL storage module.

Implements the Strategy Pattern for pluggable alias -> URL storage.
"""

from .strategies import URLStore, SQLAlchemyURLStore, InMemoryURLStore
from .factory import URLStoreFactory, StorageBackend

__all__ = [
    "URLStore",
    "SQLAlchemyURLStore",
    "InMemoryURLStore",
    "URLStoreFactory",
    "StorageBackend",
]
