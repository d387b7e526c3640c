"""HMAC-backed token issuer bound to a configured secret."""

from __future__ import annotations

from typing import Callable, Optional

from ..config import TokenConfig
from ..utils.encoding import SEPARATOR
from ..utils.time import Timestamp, unix_seconds, utc_now
from .codec import generate
from .types import IssuedToken


class TokenIssuer:
    """Issue compact signed tokens for a subject identifier."""

    def __init__(
        self,
        *,
        secret_key: Optional[str] = None,
        clock: Optional[Callable[[], Timestamp]] = None,
    ) -> None:
        self._config = TokenConfig.from_env(secret_key)
        self._clock = clock or utc_now

    def issue(self, subject_id: str) -> IssuedToken:
        issued_at = unix_seconds(self._clock())
        token = generate(subject_id, self._config.secret_bytes, now=issued_at)
        signature = token.rsplit(SEPARATOR, 1)[1]
        return IssuedToken(token=token, subject_id=subject_id, timestamp=issued_at, signature=signature)
