# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations


class AuthError(Exception):
    """Base class for admin authentication failures."""


class ConfigurationError(AuthError):
    """Admin password or signing secret is not provisioned (server side)."""


class InvalidCredentials(AuthError):
    def __init__(self, message: str = "Wrong password") -> None:
        super().__init__(message)


class MalformedToken(AuthError):
    """Token could not be split, decoded, parsed or its signature does not match."""


class Expired(AuthError):
    """Claim's ``exp`` is at or before the current time."""
