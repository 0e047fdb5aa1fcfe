from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlalchemy.types import TypeDecorator


def as_utc(value: datetime) -> datetime:
    """Convert ``value`` to UTC. Naive datetimes are taken to be UTC already."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class UTCDateTime(TypeDecorator):
    """
    Timestamp column that always stores UTC and always loads timezone-aware values.

    Backends without timezone support (SQLite) drop the offset on write, so values
    are converted to UTC before they are bound.
    """
    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return value
        return as_utc(value)

    def process_result_value(self, value, dialect):
        if value is None:
            return value
        return as_utc(value)
