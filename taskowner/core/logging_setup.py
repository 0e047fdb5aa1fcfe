import logging
import sys
from typing import Union

from taskowner.core.config import settings

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: Union[int, str, None] = None) -> None:
    """
    Configure the root logger with a single stderr handler.

    Call this once from an entry point, before the first log record.
    SQLAlchemy's engine logger stays at WARNING unless SQL_ECHO is set.
    """
    if level is None:
        level = settings.LOG_LEVEL
    if isinstance(level, str):
        name = level.upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {name!r}")

    root = logging.getLogger()
    root.setLevel(level)

    # Remove any pre-existing handlers to avoid duplicates
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)

    engine_level = logging.INFO if settings.SQL_ECHO else logging.WARNING
    logging.getLogger("sqlalchemy.engine").setLevel(engine_level)

    logging.captureWarnings(True)
