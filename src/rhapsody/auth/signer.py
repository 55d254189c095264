# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import hashlib
import hmac

from itsdangerous.encoding import want_bytes
from itsdangerous.signer import HMACAlgorithm

from rhapsody.auth.errors import ConfigurationError
from rhapsody.config import MIN_SECRET_BYTES

_ALGORITHM = HMACAlgorithm(hashlib.sha256)


class Signer:
    """HMAC-SHA256 over raw payload bytes, hex encoded."""

    def __init__(self, secret: str | bytes) -> None:
        key = want_bytes(secret or b"")
        if len(key) < MIN_SECRET_BYTES:
            raise ConfigurationError(
                f"Signing secret must be at least {MIN_SECRET_BYTES} bytes"
            )
        self._key = key

    def sign(self, raw: bytes) -> str:
        return _ALGORITHM.get_signature(self._key, raw).hex()

    def verify(self, raw: bytes, candidate_hex: str) -> bool:
        return signatures_match(candidate_hex, self.sign(raw))


def signatures_match(candidate_hex: str, expected_hex: str) -> bool:
    """Constant-time comparison of two hex digests.

    Only the length may short-circuit. Non-ASCII input never raises.
    """
    try:
        a = (candidate_hex or "").encode("ascii")
        b = (expected_hex or "").encode("ascii")
    except UnicodeEncodeError:
        return False
    if len(a) != len(b):
        return False
    return hmac.compare_digest(a, b)
