"""
Task Model Module

This module defines the Task model: a unit of work with a name, an optional due date
and a completion flag. A task may belong to one Owner through the owner_id foreign key.
"""
import logging
import math
from datetime import datetime, timezone
from typing import Optional, TYPE_CHECKING
from sqlalchemy import update
from sqlmodel import SQLModel, Field, Relationship, Session, col

from taskowner.db.types import UTCDateTime, as_utc
from taskowner.models.base import CRUDMixin, transaction

if TYPE_CHECKING:
    from taskowner.models.owner import Owner

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    """Current time in UTC, read from the system clock on every call."""
    return datetime.now(timezone.utc)


class TaskBase(SQLModel):
    """
    Base Task model containing common fields.
    """
    # Basic task information
    name: str = Field(nullable=False)

    # Deadline - None means the task has no due date; stored in UTC
    due: Optional[datetime] = Field(default=None, sa_type=UTCDateTime)

    complete: bool = Field(default=False, nullable=False)

    # Owner association - cleared when the owner row is deleted
    owner_id: Optional[int] = Field(
        default=None, foreign_key="owners.id", ondelete="SET NULL", index=True
    )


class Task(TaskBase, CRUDMixin, table=True):
    """
    Task table model.
    """
    __tablename__ = "tasks"

    # Primary key
    id: Optional[int] = Field(default=None, primary_key=True)

    owner: Optional["Owner"] = Relationship(back_populates="tasks")

    @classmethod
    def clear_completed(cls, db: Session) -> int:
        """Delete every completed task. Returns the number of rows removed."""
        return cls.destroy_where(db, col(cls.complete).is_(True))

    @classmethod
    def complete_all(cls, db: Session) -> int:
        """Mark every incomplete task as complete. Returns the number of rows changed."""
        statement = update(cls).where(col(cls.complete).is_(False)).values(complete=True)
        with transaction(db):
            result = db.exec(statement)
        logger.info("Completed %d tasks", result.rowcount)
        return result.rowcount

    def get_time_remaining(self) -> float:
        """
        Milliseconds until the task is due.

        Negative once the due date has passed, ``math.inf`` when there is no due date.
        """
        if self.due is None:
            return math.inf
        return (as_utc(self.due) - utcnow()).total_seconds() * 1000

    def is_overdue(self) -> bool:
        """A task is overdue when it is still open and its due date has passed."""
        if self.complete or self.due is None:
            return False
        return as_utc(self.due) < utcnow()

    def set_owner(self, db: Session, owner: Optional["Owner"]) -> "Task":
        """Point the task at ``owner`` (or detach it when None) and persist."""
        self.owner_id = owner.id if owner is not None else None
        return self.save(db)

    def assign_owner(self, db: Session, owner: "Owner") -> "Task":
        task = self.set_owner(db, owner)
        logger.debug("Assigned task %s to owner %s", task.id, owner.id)
        return task


class TaskRead(TaskBase):
    """Schema for reading basic task data."""
    id: int
