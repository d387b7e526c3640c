"""Token wire format: payload construction, HMAC signing and parsing.

Token format: ``{b64(subject_id)}.{b64(epoch_offset)}.{b64(hmac_sha256)}``

The epoch offset is the number of whole seconds since 2023-01-01T00:00:00Z.
Public timestamps are Unix seconds and are converted to and from the offset
at the edges. All functions are pure apart from ``generate`` reading the
clock when no ``now`` is given.
"""

from __future__ import annotations

import base64
import hmac
import logging
import re
from datetime import datetime
from hashlib import sha256
from typing import Optional, Union

from ..utils.encoding import SEPARATOR, decode, encode, split
from ..utils.time import Timestamp, timestamp_to_epoch_offset, utc_now
from .types import TokenParts

logger = logging.getLogger(__name__)

Secret = Union[str, bytes]

_INT_RE = re.compile(r"[+-]?[0-9]{1,19}")

# Offsets are bounded to a signed 64-bit integer.
_OFFSET_MIN = -(2**63)
_OFFSET_MAX = 2**63 - 1


def _secret_bytes(secret: Secret) -> bytes:
    if isinstance(secret, str):
        return secret.encode("utf-8")
    return bytes(secret)


def payload(subject_id: str, timestamp: Timestamp) -> str:
    """Return the signable ``{b64(id)}.{b64(offset)}`` string for Unix seconds ``timestamp``."""
    offset = timestamp_to_epoch_offset(timestamp)
    return encode(subject_id) + SEPARATOR + encode(str(offset))


def sign(payload: str, secret: Secret) -> str:
    """Return base64 HMAC-SHA256 of ``payload`` keyed by ``secret``."""
    digest = hmac.new(_secret_bytes(secret), payload.encode("utf-8"), sha256).digest()
    return base64.b64encode(digest).decode("ascii")


def parse(token: str) -> Optional[TokenParts]:
    """Decode a token's fields if it is structurally valid, else return None.

    Only the shape is checked. A forged token with the right shape parses.
    """
    if not isinstance(token, str):
        logger.debug("Token rejected: not a string")
        return None

    parts = split(token)
    if len(parts) != 3:
        logger.debug("Token rejected: expected 3 segments, got %d", len(parts))
        return None

    id_segment, timestamp_segment, signature = parts

    subject_id = decode(id_segment)
    if not subject_id:
        logger.debug("Token rejected: empty or undecodable id segment")
        return None

    raw_offset = decode(timestamp_segment)
    if not raw_offset:
        logger.debug("Token rejected: empty or undecodable timestamp segment")
        return None
    if not _INT_RE.fullmatch(raw_offset) or not _OFFSET_MIN <= int(raw_offset) <= _OFFSET_MAX:
        logger.debug("Token rejected: timestamp segment is not a 64-bit integer")
        return None

    if not signature:
        logger.debug("Token rejected: empty signature segment")
        return None

    return TokenParts(subject_id=subject_id, epoch_offset=int(raw_offset), signature=signature)


def validate(token: str) -> bool:
    """Return whether ``token`` has the shape of a token."""
    return parse(token) is not None


def authenticate(token: str, secret: Secret) -> Optional[TokenParts]:
    """Return the decoded fields of ``token`` if it is well formed and signed with ``secret``."""
    parts = parse(token)
    if parts is None:
        return None

    expected = sign(payload(parts.subject_id, parts.timestamp), secret)
    if not hmac.compare_digest(expected.encode("utf-8"), parts.signature.encode("utf-8")):
        logger.debug("Token rejected: signature mismatch")
        return None
    return parts


def verify(token: str, secret: Secret) -> bool:
    """Return whether ``token`` is well formed and signed with ``secret``."""
    return authenticate(token, secret) is not None


def generate(subject_id: str, secret: Secret, *, now: Optional[Timestamp] = None) -> str:
    """Issue a signed token for ``subject_id`` stamped with ``now`` (default: current time)."""
    if not subject_id:
        raise ValueError("`subject_id` must be a non-empty string.")
    issued = utc_now() if now is None else now
    token_payload = payload(subject_id, issued)
    return token_payload + SEPARATOR + sign(token_payload, secret)


def get_id(token: str) -> Optional[str]:
    parts = parse(token)
    return parts.subject_id if parts is not None else None


def get_timestamp(token: str) -> Optional[int]:
    """Return the token's issuance time in Unix seconds."""
    parts = parse(token)
    return parts.timestamp if parts is not None else None


def get_issued_at(token: str) -> Optional[datetime]:
    """Return the token's issuance time as an aware UTC datetime."""
    parts = parse(token)
    return parts.issued_at if parts is not None else None


def get_signature(token: str) -> Optional[str]:
    parts = parse(token)
    return parts.signature if parts is not None else None
