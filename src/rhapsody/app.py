# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from rhapsody.auth.edge import EdgeGatekeeper, Redirect
from rhapsody.auth.errors import ConfigurationError, InvalidCredentials
from rhapsody.auth.session import COOKIE_NAME, SessionCookie, SessionIssuer, SessionVerifier
from rhapsody.config import AuthConfig, load_config
from rhapsody.permissions import is_admin

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent
templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))

NOT_CONFIGURED = {"error": "Server not configured"}


def _with_cookie(payload: dict, cookie: SessionCookie) -> JSONResponse:
    resp = JSONResponse(payload)
    resp.headers["set-cookie"] = cookie.header_value()
    return resp


def create_app(config: Optional[AuthConfig] = None, *, gatekeeper: Optional[EdgeGatekeeper] = None) -> FastAPI:
    config = config or load_config()
    app = FastAPI(title="Daily Rhapsody admin")
    app.state.config = config
    app.state.issuer = SessionIssuer(config)
    app.state.verifier = SessionVerifier(config)
    app.state.gatekeeper = gatekeeper or EdgeGatekeeper()

    @app.middleware("http")
    async def _edge_middleware(request: Request, call_next):
        decision = request.app.state.gatekeeper.allow_request(
            request.url.path, request.cookies.get(COOKIE_NAME)
        )
        if isinstance(decision, Redirect):
            return RedirectResponse(url=decision.location, status_code=307)
        return await call_next(request)

    @app.exception_handler(ConfigurationError)
    async def _configuration_error(request: Request, exc: ConfigurationError):
        logger.error("Configuration error on %s: %s", request.url.path, exc)
        return JSONResponse(NOT_CONFIGURED, status_code=500)

    # ------------------ API ------------------

    @app.post("/api/auth/login")
    async def login(request: Request):
        try:
            body = await request.json()
        except ValueError:
            return JSONResponse({"error": "Invalid body"}, status_code=400)
        password = body.get("password") if isinstance(body, dict) else None
        if not isinstance(password, str):
            return JSONResponse({"error": "Invalid body"}, status_code=400)

        try:
            cookie = request.app.state.issuer.authenticate(password)
        except InvalidCredentials:
            return JSONResponse({"error": "Wrong password"}, status_code=401)
        return _with_cookie({"ok": True}, cookie)

    @app.post("/api/auth/logout")
    def logout(request: Request):
        return _with_cookie({"ok": True}, request.app.state.issuer.clear_cookie())

    @app.get("/api/auth/session")
    def session_status(request: Request):
        return {"authenticated": is_admin(request)}

    # ------------------ Pages ------------------

    @app.get("/admin/login", response_class=HTMLResponse)
    def login_page(request: Request):
        from_path = request.query_params.get("from") or "/admin"
        if not from_path.startswith("/") or from_path.startswith("//"):
            from_path = "/admin"
        return templates.TemplateResponse(request, "login.html", {"from_path": from_path})

    @app.get("/admin", response_class=HTMLResponse)
    def admin_home(request: Request):
        return templates.TemplateResponse(request, "admin.html", {})

    return app


app = create_app()
