"""Token datatypes."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..utils.time import epoch_offset_to_datetime, epoch_offset_to_timestamp


@dataclass(frozen=True)
class TokenParts:
    """Decoded fields of a structurally valid token."""

    subject_id: str
    epoch_offset: int
    signature: str

    @property
    def timestamp(self) -> int:
        """Issuance time in Unix seconds."""
        return epoch_offset_to_timestamp(self.epoch_offset)

    @property
    def issued_at(self) -> Optional[datetime]:
        """Issuance time as an aware UTC datetime, or None outside the datetime range."""
        try:
            return epoch_offset_to_datetime(self.epoch_offset)
        except (OverflowError, ValueError, OSError):
            return None


@dataclass(frozen=True)
class IssuedToken:
    token: str
    subject_id: str
    timestamp: int
    signature: str
