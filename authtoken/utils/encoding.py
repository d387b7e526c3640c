"""Base64 text codec and separator splitting for token segments."""

from __future__ import annotations

import base64
import binascii

SEPARATOR = "."


def encode(text: str) -> str:
    """Return standard base64 of the UTF-8 bytes of ``text``."""
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def decode(encoded: str) -> str:
    """Decode standard base64 into UTF-8 text.

    Malformed input (bad alphabet, bad padding or non UTF-8 bytes) decodes to
    an empty string, which callers treat as a missing segment.
    """
    try:
        raw = base64.b64decode(encoded.encode("ascii"), validate=True)
        return raw.decode("utf-8")
    except (binascii.Error, UnicodeError):
        return ""


def split(text: str, separator: str = SEPARATOR) -> list[str]:
    """Split ``text`` on ``separator``, keeping empty pieces."""
    return text.split(separator)
