import sys
import os

# Add current directory to path so we can import taskowner
sys.path.append(os.getcwd())

from taskowner.core.config import settings
from taskowner.core.logging_setup import setup_logging
from taskowner.db.session import db_session, get_engine
from taskowner.db.init_db import sync_db, seed_demo_data
from taskowner.models import Owner, OwnerReadWithTasks


def verify_database(reset: bool = False):
    print(f"--- {settings.PROJECT_NAME} {settings.VERSION}: Database Verification ---")
    try:
        print("Attempting to create tables...")
        sync_db(get_engine(), force=reset)
        print("Table creation/verification successful.")

        with db_session() as session:
            if Owner.count(session) == 0:
                print("No owners found, seeding demo data...")
                seed_demo_data(session)

            for owner in Owner.get_owners_and_tasks(session):
                data = OwnerReadWithTasks.model_validate(owner)
                task_names = ", ".join(task.name for task in data.tasks) or "-"
                print(f"{data.name}: {task_names}")
            print("Database connection test: SUCCESS")

    except Exception as e:
        print("Database connection test: FAILED")
        print(f"Error: {e}")
        return False
    return True


if __name__ == "__main__":
    setup_logging()
    if not verify_database(reset="--reset" in sys.argv):
        sys.exit(1)
