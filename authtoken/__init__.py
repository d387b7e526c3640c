"""authtoken package.

Stateless HMAC-SHA256 bearer tokens binding a subject identifier to an
issuance time. Tokens are self-contained and verifiable by any holder of
the shared secret.
"""

from .config import TokenConfig
from .token import (
    IssuedToken,
    TokenIssuer,
    TokenParts,
    TokenVerifier,
    authenticate,
    generate,
    get_id,
    get_issued_at,
    get_signature,
    get_timestamp,
    parse,
    payload,
    sign,
    validate,
    verify,
)
from .utils import EPOCH, EPOCH_DATETIME, SEPARATOR, decode, encode, split

__all__ = [
    "authenticate",
    "generate",
    "payload",
    "sign",
    "parse",
    "validate",
    "verify",
    "get_id",
    "get_timestamp",
    "get_issued_at",
    "get_signature",
    "split",
    "encode",
    "decode",
    "EPOCH",
    "EPOCH_DATETIME",
    "SEPARATOR",
    "TokenConfig",
    "TokenIssuer",
    "TokenVerifier",
    "IssuedToken",
    "TokenParts",
]
