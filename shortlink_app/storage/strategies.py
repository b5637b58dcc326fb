"""
URL storage strategies using Strategy Pattern.

Allows switching between different backing stores:
- SQLAlchemy: any SQL database (SQLite by default)
- InMemory: development/testing, no external services
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional
import threading

from sqlalchemy import select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from shortlink_app.database.connection import Base, build_session_factory
from shortlink_app.errors import AliasExistsError, NotFoundError, StorageError
from shortlink_app.models.url import URL


class URLStore(ABC):
    """
    Abstract base class for URL stores.

    The store is the only shared mutable resource of the service and owns
    its concurrency control: for a given alias at most one save() ever
    succeeds, every other caller gets AliasExistsError.
    """

    def init(self) -> None:
        """Create the schema if the backend needs one"""

    def close(self) -> None:
        """Release connections held by the store"""

    @abstractmethod
    def save(self, alias: str, url: str) -> int:
        """
        Insert a new record.

        Args:
            alias: Short alias, must not exist yet
            url: Original URL

        Returns:
            The record id assigned by the store

        Raises:
            AliasExistsError: alias is already taken
            StorageError: any other persistence failure
        """
        pass

    @abstractmethod
    def get_url(self, alias: str) -> str:
        """
        Look up the URL stored under an alias.

        Raises:
            NotFoundError: no record has this alias
            StorageError: persistence failure
        """
        pass


class SQLAlchemyURLStore(URLStore):
    """
    SQL implementation backed by a SQLAlchemy engine.

    Uniqueness comes from the UNIQUE index on url.alias: the INSERT either
    commits or fails with IntegrityError, there is no read-then-write check.
    Every call uses its own short-lived session.
    """

    def __init__(self, engine: Engine):
        self.engine = engine
        self.session_factory = build_session_factory(engine)

    def init(self) -> None:
        try:
            Base.metadata.create_all(bind=self.engine)
        except SQLAlchemyError as e:
            raise StorageError(f"failed to initialize schema: {e}") from e

    def close(self) -> None:
        self.engine.dispose()

    def save(self, alias: str, url: str) -> int:
        with self.session_factory() as session:
            record = URL(alias=alias, url=url)
            session.add(record)
            try:
                session.flush()
                record_id = record.id
                session.commit()
            except IntegrityError as e:
                session.rollback()
                raise AliasExistsError(alias) from e
            except SQLAlchemyError as e:
                session.rollback()
                raise StorageError(f"failed to save alias '{alias}': {e}") from e

        return record_id

    def get_url(self, alias: str) -> str:
        try:
            with self.session_factory() as session:
                url = session.execute(
                    select(URL.url).where(URL.alias == alias)
                ).scalar_one_or_none()
        except SQLAlchemyError as e:
            raise StorageError(f"failed to get url for alias '{alias}': {e}") from e

        if url is None:
            raise NotFoundError(alias)

        return url


class InMemoryURLStore(URLStore):
    """
    In-memory implementation using Python dicts.

    Pros:
    - Very fast, no external dependencies
    - Good for development and testing

    Cons:
    - Not shared between processes
    - Lost on restart

    The check-and-insert runs under an internal lock; nothing else
    happens while the lock is held.
    """

    def __init__(self):
        self._records: Dict[str, URL] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def save(self, alias: str, url: str) -> int:
        with self._lock:
            if alias in self._records:
                raise AliasExistsError(alias)

            record_id = self._next_id
            self._next_id += 1
            self._records[alias] = URL(id=record_id, alias=alias, url=url)

        return record_id

    def get_url(self, alias: str) -> str:
        record: Optional[URL] = self._records.get(alias)
        if record is None:
            raise NotFoundError(alias)
        return record.url

    def __len__(self) -> int:
        return len(self._records)
