# tests/conftest.py

from __future__ import annotations

from typing import Iterator

import pytest
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import Session

from taskowner.db.init_db import sync_db
from taskowner.db.session import make_engine


@pytest.fixture()
def engine() -> Iterator[Engine]:
    """
    Private in-memory SQLite database per test.

    StaticPool keeps the single connection alive so every session sees
    the same database.
    """
    eng = make_engine("sqlite://", poolclass=StaticPool, echo=False)
    sync_db(eng, force=True)
    yield eng
    eng.dispose()


@pytest.fixture()
def db(engine: Engine) -> Iterator[Session]:
    with Session(engine) as session:
        yield session
