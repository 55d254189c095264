# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

from typing import Optional

from fastapi import HTTPException, Request

from rhapsody.auth.session import COOKIE_NAME, SessionVerifier


def session_token(request: Request) -> Optional[str]:
    return request.cookies.get(COOKIE_NAME) or None


def is_admin(request: Request) -> bool:
    verifier: SessionVerifier = request.app.state.verifier
    return verifier.is_authenticated(session_token(request))


def require_admin(request: Request) -> None:
    """Dependency for every state-mutating route."""
    if not is_admin(request):
        raise HTTPException(status_code=401, detail="Unauthorized")
