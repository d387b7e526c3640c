"""Utility helpers for encoding and time operations."""

from .encoding import SEPARATOR, decode, encode, split
from .time import (
    EPOCH,
    EPOCH_DATETIME,
    epoch_offset_to_datetime,
    epoch_offset_to_timestamp,
    timestamp_to_epoch_offset,
    utc_now,
)

__all__ = [
    "SEPARATOR",
    "encode",
    "decode",
    "split",
    "EPOCH",
    "EPOCH_DATETIME",
    "utc_now",
    "timestamp_to_epoch_offset",
    "epoch_offset_to_timestamp",
    "epoch_offset_to_datetime",
]
