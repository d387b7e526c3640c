"""Token verification bound to a configured secret."""

from __future__ import annotations

from typing import Optional

from ..config import TokenConfig
from .codec import authenticate
from .types import TokenParts


class TokenVerifier:
    """Verify signed tokens and expose their fields once authenticated.

    Freshness is not checked here; compare ``TokenParts.timestamp`` against
    the caller's own expiry policy.
    """

    def __init__(self, *, secret_key: Optional[str] = None) -> None:
        self._config = TokenConfig.from_env(secret_key)

    def verify(self, token: str) -> bool:
        return self.claims(token) is not None

    def claims(self, token: str) -> Optional[TokenParts]:
        """Return decoded fields for an authentic token, None otherwise."""
        return authenticate(token, self._config.secret_bytes)
