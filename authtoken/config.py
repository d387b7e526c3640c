"""Runtime configuration for configured token issuers and verifiers."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

SECRET_ENV_VAR = "AUTHTOKEN_SECRET"
DEFAULT_SECRET = "dev-secret"


@dataclass(frozen=True)
class TokenConfig:
    """Shared-secret settings for signing and verifying tokens."""

    secret: str = DEFAULT_SECRET

    @classmethod
    def from_env(cls, secret: Optional[str] = None) -> "TokenConfig":
        """Build config from an explicit secret, falling back to ``AUTHTOKEN_SECRET``."""
        if secret is None:
            secret = os.getenv(SECRET_ENV_VAR, DEFAULT_SECRET)
        return cls(secret=secret)

    @property
    def secret_bytes(self) -> bytes:
        return self.secret.encode("utf-8")
