# tests/test_crud.py

from __future__ import annotations

import pytest
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from taskowner.models import Owner, Task


def test_create_assigns_id_and_defaults(db: Session) -> None:
    task = Task.create(db, name="write report")

    assert task.id is not None
    assert task.complete is False
    assert task.due is None
    assert task.owner_id is None


def test_bulk_create_accepts_dicts_and_instances(db: Session) -> None:
    owners = Owner.bulk_create(db, [{"name": "Natalie"}, Owner(name="Ben")])

    assert [o.name for o in owners] == ["Natalie", "Ben"]
    assert all(o.id is not None for o in owners)
    assert Owner.count(db) == 2


def test_find_helpers(db: Session) -> None:
    Owner.bulk_create(db, [{"name": "Natalie"}, {"name": "Ben"}])

    ben = Owner.find_one(db, Owner.name == "Ben")
    assert ben is not None
    assert Owner.find_by_pk(db, ben.id) is ben
    assert Owner.find_by_pk(db, 999) is None
    assert Owner.find_one(db, Owner.name == "Nobody") is None
    assert [o.name for o in Owner.find_all(db)] == ["Natalie", "Ben"]


def test_update_persists_fields(db: Session) -> None:
    task = Task.create(db, name="draft")

    task.update(db, name="final", complete=True)

    stored = Task.find_one(db, Task.name == "final")
    assert stored is task
    assert stored.complete is True


def test_update_rejects_unknown_field(db: Session) -> None:
    task = Task.create(db, name="draft")
    with pytest.raises(ValueError):
        task.update(db, colour="red")


def test_store_errors_propagate_and_session_stays_usable(db: Session) -> None:
    with pytest.raises(IntegrityError):
        Task.create(db)

    assert Task.count(db) == 0
    Task.create(db, name="after failure")
    assert Task.count(db) == 1


def test_failed_bulk_create_writes_nothing(db: Session) -> None:
    with pytest.raises(IntegrityError):
        Owner.bulk_create(db, [{"name": "Natalie"}, {}])

    assert Owner.count(db) == 0


def test_destroy_task(db: Session) -> None:
    task = Task.create(db, name="disposable")
    task.destroy(db)
    assert Task.count(db) == 0
