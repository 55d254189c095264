# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import hmac

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError

from rhapsody.auth.errors import ConfigurationError
from rhapsody.config import AuthConfig

_PH = PasswordHasher()


def hash_password(plain: str) -> str:
    if not plain:
        raise ValueError("Empty password")
    return _PH.hash(plain)


def verify_password(hash_value: str, plain: str) -> bool:
    if not hash_value or not plain:
        return False
    try:
        return _PH.verify(hash_value, plain)
    except VerificationError:
        return False
    except InvalidHashError as e:
        raise ConfigurationError("ADMIN_PASSWORD_HASH is not a valid argon2 hash") from e


def check_admin_password(config: AuthConfig, submitted: str) -> bool:
    """Compare a submitted password against the configured admin password.

    The argon2 hash wins when both forms are configured. The plain form is
    compared with ``hmac.compare_digest``.
    """
    if config.admin_password_hash:
        return verify_password(config.admin_password_hash, submitted)
    if not config.admin_password:
        raise ConfigurationError("Set ADMIN_PASSWORD (or ADMIN_PASSWORD_HASH) in the environment")
    return hmac.compare_digest(
        (submitted or "").encode("utf-8"),
        config.admin_password.encode("utf-8"),
    )
