"""Clock helpers.

Timestamps in the economy are timezone-aware UTC. SQLite hands back naive
datetimes, so values read from storage go through ``as_utc``.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime | None) -> datetime | None:
    if value is None:
        return None
    if value.tzinfo is None or value.utcoffset() is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


__all__ = ["Clock", "as_utc", "utcnow"]
