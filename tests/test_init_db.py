# tests/test_init_db.py

from __future__ import annotations

from sqlalchemy import inspect
from sqlalchemy.engine import Engine
from sqlmodel import Session

from taskowner.db.init_db import seed_demo_data, sync_db
from taskowner.models import Owner, Task


def test_sync_db_creates_tables(engine: Engine) -> None:
    assert set(inspect(engine).get_table_names()) >= {"owners", "tasks"}


def test_sync_db_without_force_keeps_rows(engine: Engine) -> None:
    with Session(engine) as session:
        Owner.create(session, name="Natalie")

    sync_db(engine)

    with Session(engine) as session:
        assert Owner.count(session) == 1


def test_sync_db_force_resets_schema(engine: Engine) -> None:
    with Session(engine) as session:
        seed_demo_data(session)

    sync_db(engine, force=True)

    with Session(engine) as session:
        assert Owner.count(session) == 0
        assert Task.count(session) == 0
