"""
Owner Model Module

This module defines the Owner model. An owner has a name and zero or more tasks
linked to it through Task.owner_id. Owners whose name is listed in
settings.PROTECTED_OWNER_NAMES cannot be destroyed one at a time.
"""
import logging
from typing import List, Optional, TYPE_CHECKING
from sqlalchemy.orm import selectinload
from sqlmodel import SQLModel, Field, Relationship, Session, col, select

from taskowner.core.config import settings
from taskowner.core.exceptions import ForbiddenOperation
from taskowner.models.base import CRUDMixin
from taskowner.models.task import TaskRead

if TYPE_CHECKING:
    from taskowner.models.task import Task

logger = logging.getLogger(__name__)


class OwnerBase(SQLModel):
    """
    Base Owner model containing common fields.
    """
    name: str = Field(nullable=False)


class Owner(OwnerBase, CRUDMixin, table=True):
    """
    Owner table model.
    """
    __tablename__ = "owners"

    # Primary key
    id: Optional[int] = Field(default=None, primary_key=True)

    # Tasks assigned to this owner
    tasks: List["Task"] = Relationship(
        back_populates="owner", sa_relationship_kwargs={"order_by": "Task.id"}
    )

    @classmethod
    def get_owners_and_tasks(cls, db: Session) -> List["Owner"]:
        """Return every owner with its tasks loaded up front."""
        statement = select(cls).options(selectinload(cls.tasks)).order_by(cls.id)
        return list(db.exec(statement).all())

    def get_incomplete_tasks(self, db: Session) -> List["Task"]:
        from taskowner.models.task import Task

        return Task.find_all(db, Task.owner_id == self.id, col(Task.complete).is_(False))

    def before_destroy(self) -> None:
        """Refuse to delete owners with a protected name."""
        if self.name in settings.PROTECTED_OWNER_NAMES:
            logger.warning("Refused to destroy protected owner %r (id=%s)", self.name, self.id)
            raise ForbiddenOperation(
                f"Owner {self.name!r} cannot be destroyed",
                entity="Owner",
                entity_id=self.id,
            )


class OwnerRead(OwnerBase):
    """Schema for reading basic owner data."""
    id: int


class OwnerReadWithTasks(OwnerRead):
    """Schema for reading an owner together with its tasks."""
    tasks: List[TaskRead] = []
