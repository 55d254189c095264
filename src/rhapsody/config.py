# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Process-wide admin configuration.

Loaded once (``load_config``) and injected into the issuer, the verifier and
the edge gatekeeper. Missing values do not fail here: each operation raises
``ConfigurationError`` when it actually needs the value.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from rhapsody.auth.errors import ConfigurationError
from rhapsody.core.utils import env_flag, env_str

MIN_SECRET_BYTES = 16


@dataclass(frozen=True)
class AuthConfig:
    admin_password: str = ""
    admin_password_hash: str = ""
    auth_secret: str = ""
    cookie_secure: bool = False

    def __repr__(self) -> str:
        return (
            "AuthConfig(admin_password=***, admin_password_hash=***, "
            f"auth_secret=***, cookie_secure={self.cookie_secure!r})"
        )

    @property
    def has_password(self) -> bool:
        return bool(self.admin_password or self.admin_password_hash)

    def signing_key(self) -> bytes:
        key = (self.auth_secret or "").encode("utf-8")
        if len(key) < MIN_SECRET_BYTES:
            raise ConfigurationError(
                f"Set AUTH_SECRET (min {MIN_SECRET_BYTES} bytes) in the environment"
            )
        return key


def load_config() -> AuthConfig:
    return AuthConfig(
        admin_password=os.getenv("ADMIN_PASSWORD", ""),
        admin_password_hash=os.getenv("ADMIN_PASSWORD_HASH", "").strip(),
        auth_secret=env_str("AUTH_SECRET", "RHAPSODY_AUTH_SECRET"),
        cookie_secure=env_flag("RHAPSODY_COOKIE_SECURE"),
    )
