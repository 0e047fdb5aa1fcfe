"""
Persistence Helpers Module

This module defines the CRUDMixin shared by all table models. It gives every model
an explicit set of store operations (create, bulk create, find, update, destroy) so
callers never have to build statements or manage commits themselves.

Every method takes the caller's Session as its first argument and commits before
returning. If the store rejects a write the session is rolled back and the
SQLAlchemy error is re-raised unchanged.
"""
import logging
from contextlib import contextmanager
from typing import Any, Iterable, List, Mapping, Optional, Type, TypeVar, Union

from sqlalchemy import delete, func
from sqlmodel import Session, select

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound="CRUDMixin")


@contextmanager
def transaction(db: Session):
    """Commit on success, roll back and re-raise on any store failure."""
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise


class CRUDMixin:
    """
    Store operations shared by the table models.

    Intended to be combined with a SQLModel table class, e.g.
    ``class Owner(OwnerBase, CRUDMixin, table=True)``.
    """

    @classmethod
    def create(cls: Type[ModelT], db: Session, **fields: Any) -> ModelT:
        """Insert a single row and return it with its generated id."""
        obj = cls(**fields)
        with transaction(db):
            db.add(obj)
        db.refresh(obj)
        return obj

    @classmethod
    def bulk_create(
        cls: Type[ModelT],
        db: Session,
        rows: Iterable[Union[Mapping[str, Any], ModelT]],
    ) -> List[ModelT]:
        """
        Insert many rows in one transaction.

        Rows may be dictionaries of field values or unsaved instances. The created
        objects are returned refreshed, in the order they were given.
        """
        objs = [row if isinstance(row, cls) else cls(**row) for row in rows]
        with transaction(db):
            db.add_all(objs)
        for obj in objs:
            db.refresh(obj)
        logger.debug("Created %d %s rows", len(objs), cls.__name__)
        return objs

    @classmethod
    def find_all(cls: Type[ModelT], db: Session, *criteria: Any) -> List[ModelT]:
        """Return all rows matching every criterion, ordered by primary key."""
        statement = select(cls).where(*criteria).order_by(cls.id)
        return list(db.exec(statement).all())

    @classmethod
    def find_one(cls: Type[ModelT], db: Session, *criteria: Any) -> Optional[ModelT]:
        statement = select(cls).where(*criteria).order_by(cls.id)
        return db.exec(statement).first()

    @classmethod
    def find_by_pk(cls: Type[ModelT], db: Session, pk: Any) -> Optional[ModelT]:
        return db.get(cls, pk)

    @classmethod
    def count(cls, db: Session, *criteria: Any) -> int:
        statement = select(func.count()).select_from(cls).where(*criteria)
        return db.exec(statement).one()

    @classmethod
    def destroy_where(cls, db: Session, *criteria: Any) -> int:
        """
        Delete every matching row with a single statement.

        Instance-level guards (``before_destroy``) are not consulted.
        Returns the number of deleted rows.
        """
        with transaction(db):
            result = db.exec(delete(cls).where(*criteria))
        logger.info("Deleted %d %s rows", result.rowcount, cls.__name__)
        return result.rowcount

    def update(self: ModelT, db: Session, **fields: Any) -> ModelT:
        """Set the given fields, persist and return the refreshed instance."""
        for key, value in fields.items():
            if key not in type(self).model_fields:
                raise ValueError(f"{type(self).__name__} has no field {key!r}")
            setattr(self, key, value)
        return self.save(db)

    def save(self: ModelT, db: Session) -> ModelT:
        with transaction(db):
            db.add(self)
        db.refresh(self)
        return self

    def before_destroy(self) -> None:
        """Hook run by ``destroy`` before anything is deleted. Raise to veto."""

    def destroy(self, db: Session) -> None:
        self.before_destroy()
        with transaction(db):
            db.delete(self)
