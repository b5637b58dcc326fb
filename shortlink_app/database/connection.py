from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from shortlink_app.config import settings

Base = declarative_base()


def build_engine(database_url: Optional[str] = None) -> Engine:
    """
    Create an engine for the given URL (defaults to settings.database_url).

    SQLite connections are shared across request threads, so the
    same-thread check is disabled and writers wait on the file lock
    instead of failing immediately.
    """
    database_url = database_url or settings.database_url
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args = {"check_same_thread": False, "timeout": 15}
    return create_engine(database_url, connect_args=connect_args)


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)
