# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Signature-blind pre-routing check for the admin section.

Only short-circuits obviously unauthenticated navigations with a redirect to
the login page. It holds no key material and is not a security boundary:
state-mutating routes still go through ``SessionVerifier``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union
from urllib.parse import urlencode

from rhapsody.auth import codec
from rhapsody.auth.errors import MalformedToken
from rhapsody.auth.session import Clock
from rhapsody.core.utils import now_millis


@dataclass(frozen=True)
class Proceed:
    pass


@dataclass(frozen=True)
class Redirect:
    location: str


Decision = Union[Proceed, Redirect]


class EdgeGatekeeper:
    def __init__(
        self,
        *,
        protected_prefix: str = "/admin",
        login_path: str = "/admin/login",
        return_param: str = "from",
        clock: Clock = now_millis,
    ) -> None:
        self.protected_prefix = protected_prefix.rstrip("/")
        self.login_path = login_path
        self.return_param = return_param
        self._clock = clock

    def applies_to(self, path: str) -> bool:
        if path == self.login_path:
            return False
        return path == self.protected_prefix or path.startswith(self.protected_prefix + "/")

    def looks_valid(self, cookie: Optional[str]) -> bool:
        if not cookie:
            return False
        try:
            payload_b64, _ = codec.split_token(cookie)
            exp = codec.read_expiry(codec.decode_payload(payload_b64))
        except MalformedToken:
            return False
        return exp > self._clock()

    def allow_request(self, path: str, cookie: Optional[str]) -> Decision:
        if not self.applies_to(path) or self.looks_valid(cookie):
            return Proceed()
        query = urlencode({self.return_param: path})
        return Redirect(location=f"{self.login_path}?{query}")
