"""
Database Initialization Module

Schema creation/reset and demo data for local development and tests.
"""
import logging
from typing import List

from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, Session

# Importing the models registers their tables on SQLModel.metadata
from taskowner.models import Owner, Task

logger = logging.getLogger(__name__)


def sync_db(engine: Engine, force: bool = False) -> None:
    """
    Create all tables that do not exist yet.

    With ``force=True`` every table is dropped first, leaving an empty schema.
    """
    if force:
        logger.info("Dropping all tables")
        SQLModel.metadata.drop_all(engine)
    SQLModel.metadata.create_all(engine)
    logger.info("Schema is in sync (%d tables)", len(SQLModel.metadata.tables))


def seed_demo_data(db: Session) -> List[Owner]:
    """
    Insert a small set of owners and tasks.

    Natalie gets two tasks, Ben one, Orlando none.
    """
    owners = Owner.bulk_create(
        db, [{"name": "Natalie"}, {"name": "Ben"}, {"name": "Orlando"}]
    )
    natalie, ben, _ = owners
    Task.bulk_create(
        db,
        [
            {"name": "buy groceries", "owner_id": natalie.id},
            {"name": "learn python", "owner_id": natalie.id},
            {"name": "bake a cake", "owner_id": ben.id},
        ],
    )
    logger.info("Seeded %d owners", len(owners))
    return owners
