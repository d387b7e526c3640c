"""Issue a token for a subject and check it the way a receiving service would."""

from __future__ import annotations

import logging
import os
import time

from authtoken import TokenIssuer, TokenVerifier

MAX_AGE_SECONDS = int(os.getenv("AUTHTOKEN_MAX_AGE", "3600"))


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)

    issued = TokenIssuer().issue("user-1234")
    print("Issued token:", issued.token)

    verifier = TokenVerifier()
    claims = verifier.claims(issued.token)
    if claims is None:
        print("Token rejected")
        return

    # Freshness is the caller's policy.
    age = int(time.time()) - claims.timestamp
    issued_at = claims.issued_at.isoformat() if claims.issued_at is not None else "out of range"
    print(f"subject={claims.subject_id} issued_at={issued_at} fresh={0 <= age <= MAX_AGE_SECONDS}")

    tampered = issued.token[:-2] + "AA"
    print("Tampered token accepted:", verifier.verify(tampered))


if __name__ == "__main__":
    main()
