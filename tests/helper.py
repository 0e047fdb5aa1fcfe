# tests/helper.py

from __future__ import annotations

from datetime import datetime, timedelta

from taskowner.models.task import utcnow


def tomorrow() -> datetime:
    return utcnow() + timedelta(days=1)


def yesterday() -> datetime:
    return utcnow() - timedelta(days=1)
