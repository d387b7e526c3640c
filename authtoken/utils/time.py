"""UTC time helpers and epoch offset conversions."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Union

EPOCH_DATETIME = datetime(2023, 1, 1, tzinfo=timezone.utc)
EPOCH = int(EPOCH_DATETIME.timestamp())

Timestamp = Union[int, float, datetime]


def utc_now() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(timezone.utc)


def unix_seconds(value: Timestamp) -> int:
    """Return whole Unix seconds for a timestamp, truncating sub-second precision.

    Naive datetimes are interpreted as UTC.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return int(value.timestamp())
    return int(value)


def timestamp_to_epoch_offset(timestamp: Timestamp) -> int:
    """Convert Unix seconds (or a datetime) into seconds elapsed since ``EPOCH``."""
    return unix_seconds(timestamp) - EPOCH


def epoch_offset_to_timestamp(offset: int) -> int:
    """Convert an epoch offset back into Unix seconds."""
    return EPOCH + offset


def epoch_offset_to_datetime(offset: int) -> datetime:
    return datetime.fromtimestamp(epoch_offset_to_timestamp(offset), tz=timezone.utc)
