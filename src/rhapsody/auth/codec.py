# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Session token wire format.

    token = base64url(json_bytes) + "." + hex(HMAC-SHA256(key, json_bytes))

with ``json_bytes`` = ``{"admin":true,"exp":<unix millis>}``. The signature
covers the raw JSON bytes, so the payload is decoded before verifying.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from itsdangerous.encoding import base64_decode, base64_encode
from itsdangerous.exc import BadData

from rhapsody.auth.errors import MalformedToken
from rhapsody.auth.signer import Signer

SEPARATOR = "."


@dataclass(frozen=True)
class SessionClaim:
    admin: bool
    expires_at_millis: int

    def to_dict(self) -> Dict[str, Any]:
        return {"admin": self.admin, "exp": self.expires_at_millis}


@dataclass(frozen=True)
class DecodedToken:
    claim: SessionClaim
    raw_payload: bytes
    signature_hex: str


def serialize_claim(claim: SessionClaim) -> bytes:
    return json.dumps(claim.to_dict(), separators=(",", ":"), sort_keys=True).encode("utf-8")


def encode_payload(raw: bytes) -> str:
    return base64_encode(raw).decode("ascii")


def decode_payload(payload_b64: str) -> bytes:
    try:
        return base64_decode(payload_b64)
    except BadData as e:
        raise MalformedToken("payload is not valid base64url") from e


def split_token(token: str) -> Tuple[str, str]:
    """Split on the last separator into (payload_b64, signature_hex)."""
    payload_b64, sep, signature_hex = (token or "").rpartition(SEPARATOR)
    if not sep:
        raise MalformedToken("token has no separator")
    return payload_b64, signature_hex


def _load_object(raw: bytes) -> Dict[str, Any]:
    try:
        data = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, ValueError, RecursionError) as e:
        raise MalformedToken("payload is not JSON") from e
    if not isinstance(data, dict):
        raise MalformedToken("payload is not an object")
    return data


def _as_millis(value: Any) -> int:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedToken("exp is missing or not an integer")
    return value


def read_expiry(raw: bytes) -> int:
    """Only the ``exp`` field, no ``admin`` check (edge tier)."""
    return _as_millis(_load_object(raw).get("exp"))


def parse_claim(raw: bytes) -> SessionClaim:
    data = _load_object(raw)
    if data.get("admin") is not True:
        raise MalformedToken("admin claim missing")
    return SessionClaim(admin=True, expires_at_millis=_as_millis(data.get("exp")))


def encode(claim: SessionClaim, signer: Signer) -> str:
    raw = serialize_claim(claim)
    return encode_payload(raw) + SEPARATOR + signer.sign(raw)


def decode(token: str) -> DecodedToken:
    """Structural decode; does not check expiry or signature."""
    payload_b64, signature_hex = split_token(token)
    raw = decode_payload(payload_b64)
    return DecodedToken(claim=parse_claim(raw), raw_payload=raw, signature_hex=signature_hex)
