# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from rhapsody.auth import codec
from rhapsody.auth.codec import SessionClaim
from rhapsody.auth.errors import AuthError, ConfigurationError, Expired, InvalidCredentials, MalformedToken
from rhapsody.auth.passwords import check_admin_password
from rhapsody.auth.signer import Signer
from rhapsody.config import AuthConfig
from rhapsody.core.utils import now_millis

logger = logging.getLogger(__name__)

COOKIE_NAME = "admin_session"
MAX_AGE_SECONDS = 60 * 60 * 24 * 7  # 7 days

Clock = Callable[[], int]


@dataclass(frozen=True)
class SessionCookie:
    value: str
    max_age: int
    name: str = COOKIE_NAME
    path: str = "/"
    httponly: bool = True
    samesite: str = "lax"
    secure: bool = False

    def header_value(self) -> str:
        """Render as a ``Set-Cookie`` header value."""
        parts = [f"{self.name}={self.value}", f"Path={self.path}"]
        if self.httponly:
            parts.append("HttpOnly")
        if self.secure:
            parts.append("Secure")
        parts.append(f"SameSite={self.samesite.capitalize()}")
        parts.append(f"Max-Age={self.max_age}")
        return "; ".join(parts)


def _signer(config: AuthConfig) -> Signer:
    try:
        return Signer(config.signing_key())
    except ConfigurationError:
        logger.error("Admin signing secret is not configured or too short")
        raise


class SessionIssuer:
    """Turns a correct admin password into a freshly signed session cookie."""

    def __init__(self, config: AuthConfig, *, clock: Clock = now_millis) -> None:
        self._config = config
        self._clock = clock

    def authenticate(self, submitted_password: str) -> SessionCookie:
        if not self._config.has_password:
            logger.error("Admin password is not configured")
            raise ConfigurationError("Admin password is not configured")
        signer = _signer(self._config)
        if not check_admin_password(self._config, submitted_password):
            logger.warning("Admin login rejected")
            raise InvalidCredentials()

        claim = SessionClaim(admin=True, expires_at_millis=self._clock() + MAX_AGE_SECONDS * 1000)
        token = codec.encode(claim, signer)
        logger.info("Admin session issued, expires at %d", claim.expires_at_millis)
        return SessionCookie(value=token, max_age=MAX_AGE_SECONDS, secure=self._config.cookie_secure)

    def clear_cookie(self) -> SessionCookie:
        return clear_session_cookie(secure=self._config.cookie_secure)


def clear_session_cookie(*, secure: bool = False) -> SessionCookie:
    return SessionCookie(value="", max_age=0, secure=secure)


class SessionVerifier:
    """Authoritative check: structure, expiry and HMAC signature.

    The only check state-mutating operations may trust.
    """

    def __init__(self, config: AuthConfig, *, clock: Clock = now_millis) -> None:
        self._config = config
        self._clock = clock

    def check(self, token: Optional[str]) -> SessionClaim:
        """Return the claim or raise the precise ``AuthError``."""
        if not token:
            raise MalformedToken("no session cookie")
        signer = _signer(self._config)
        decoded = codec.decode(token)
        if decoded.claim.expires_at_millis <= self._clock():
            raise Expired("session expired")
        if not signer.verify(decoded.raw_payload, decoded.signature_hex):
            raise MalformedToken("signature mismatch")
        return decoded.claim

    def is_authenticated(self, token: Optional[str]) -> bool:
        try:
            self.check(token)
        except ConfigurationError:
            raise
        except AuthError as e:
            logger.debug("Admin session rejected: %s", e)
            return False
        return True
