# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20261019v1
# ---------------------------------------------------------------------------
"""
SQLAlchemy engine / session factories and the declarative base.

Unlike a fixed single-database app, the engine is only built when a
DATABASE_URL is configured (see ``storage.factory.build_storage``).  Without
one the in-memory backend is used and nothing here is touched beyond the
model declarations.
"""

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

Base = declarative_base()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores REFERENCES ... ON DELETE CASCADE unless enabled per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def make_engine(database_url: str) -> Engine:
    """
    Build an engine for *database_url*.

    SQLite URLs get foreign-key enforcement switched on, and a purely
    in-memory SQLite database (``sqlite://``) is pinned to a single shared
    connection so every session sees the same tables.
    """
    if database_url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        engine = create_engine(database_url, **kwargs)
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        return engine

    # pool_pre_ping keeps idle connections alive across server-side timeouts
    return create_engine(database_url, pool_pre_ping=True)


def make_session_factory(engine: Engine) -> sessionmaker:
    # expire_on_commit=False: rows are converted to pydantic records after commit
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)
