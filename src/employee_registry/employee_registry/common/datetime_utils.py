from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..core.constants import SERVER_TIMEZONE


def now_utc() -> datetime:
    """Current instant in the server reference zone (UTC).

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(SERVER_TIMEZONE)


def as_reference(value: datetime) -> datetime:
    """Label a value with the reference zone; naive values are assumed to be UTC already."""
    if value.tzinfo is None:
        return value.replace(tzinfo=SERVER_TIMEZONE)
    return value.astimezone(SERVER_TIMEZONE)


def to_display(value: Optional[datetime]) -> Optional[datetime]:
    """Same instant, re-labelled in the process's local zone."""
    if value is None:
        return None
    return as_reference(value).astimezone()


def to_storage(value: Optional[datetime]) -> Optional[datetime]:
    """Naive UTC for DATETIME columns (MySQL and SQLite drop tzinfo anyway)."""
    if value is None:
        return None
    return as_reference(value).replace(tzinfo=None)


def from_storage(value: Optional[datetime]) -> Optional[datetime]:
    if value is None:
        return None
    return as_reference(value)
