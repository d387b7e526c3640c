"""Signed token codec, issuance and verification."""

from .codec import (
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
from .issuer import TokenIssuer
from .types import IssuedToken, TokenParts
from .verifier import TokenVerifier

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
    "TokenIssuer",
    "TokenVerifier",
    "IssuedToken",
    "TokenParts",
]
