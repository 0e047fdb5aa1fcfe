"""
Exceptions Module

Domain errors raised by the model layer. Store failures (SQLAlchemy exceptions)
are not wrapped and reach the caller unchanged.
"""
from typing import Optional


class TaskOwnerError(Exception):
    """Base class for errors raised by the task/owner model layer."""


class ForbiddenOperation(TaskOwnerError):
    """
    Raised when an operation is refused by a domain rule.

    Nothing has been written to the store when this is raised.
    """

    def __init__(
        self, message: str, *, entity: Optional[str] = None, entity_id: Optional[int] = None
    ):
        super().__init__(message)
        self.entity = entity
        self.entity_id = entity_id
