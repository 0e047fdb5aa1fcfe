from .base import CRUDMixin
from .task import Task, TaskRead
from .owner import Owner, OwnerRead, OwnerReadWithTasks

__all__ = [
    "CRUDMixin",
    "Task", "TaskRead",
    "Owner", "OwnerRead", "OwnerReadWithTasks",
]
