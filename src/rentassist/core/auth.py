from __future__ import annotations

import hmac


def secrets_match(candidate: str | None, expected: str) -> bool:
    """Constant-time comparison of an admin credential against the configured secret.

    An unset secret never matches, so admin access stays closed until one is configured.
    """
    if not expected or candidate is None:
        return False
    return hmac.compare_digest(candidate.encode("utf-8"), expected.encode("utf-8"))
