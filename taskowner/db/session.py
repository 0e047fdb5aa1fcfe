from contextlib import contextmanager

from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlmodel import create_engine, Session
from taskowner.core.config import settings

# Global engine instance
_engine = None


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores ON DELETE clauses unless this is set per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def make_engine(db_url: str, **kwargs) -> Engine:
    """
    Build an engine for ``db_url``.

    SQLite connections are shared across threads and enforce foreign keys.
    Extra keyword arguments are passed to ``create_engine`` (e.g. ``poolclass``).
    """
    connect_args = dict(kwargs.pop("connect_args", {}))
    is_sqlite = db_url.startswith("sqlite")

    # SQLite fix for multithreading
    if is_sqlite:
        connect_args.setdefault("check_same_thread", False)
    else:
        kwargs.setdefault("pool_pre_ping", True)

    kwargs.setdefault("echo", settings.SQL_ECHO)
    new_engine = create_engine(db_url, connect_args=connect_args, **kwargs)

    if is_sqlite:
        event.listen(new_engine, "connect", _enable_sqlite_foreign_keys)
    return new_engine


def get_engine() -> Engine:
    global _engine

    if _engine is not None:
        return _engine

    _engine = make_engine(settings.DATABASE_URL)
    return _engine


def get_db():
    with Session(get_engine()) as session:
        yield session


# Context-manager form of get_db for scripts
db_session = contextmanager(get_db)
