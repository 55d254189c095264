import sys
from pathlib import Path as _Path
sys.path.insert(0, str(_Path(__file__).resolve().parents[1] / "src"))

import os

import pytest
from fastapi.testclient import TestClient

from rhapsody.app import create_app
from rhapsody.auth.edge import EdgeGatekeeper
from rhapsody.auth.session import SessionIssuer, SessionVerifier
from rhapsody.auth.signer import Signer
from rhapsody.config import AuthConfig

NOW = 1_700_000_000_000
PASSWORD = "s3cr3t!"


@pytest.fixture()
def secret() -> bytes:
    """16 random bytes hex-encoded (32 ASCII bytes), so it survives env/str round trips."""
    return os.urandom(16).hex().encode("ascii")


@pytest.fixture()
def config(secret) -> AuthConfig:
    return AuthConfig(admin_password=PASSWORD, auth_secret=secret.decode("ascii"))


@pytest.fixture()
def clock():
    return lambda: NOW


@pytest.fixture()
def signer(secret) -> Signer:
    return Signer(secret)


@pytest.fixture()
def issuer(config, clock) -> SessionIssuer:
    return SessionIssuer(config, clock=clock)


@pytest.fixture()
def verifier(config, clock) -> SessionVerifier:
    return SessionVerifier(config, clock=clock)


@pytest.fixture()
def app(config):
    return create_app(config, gatekeeper=EdgeGatekeeper())


@pytest.fixture()
def client(app) -> TestClient:
    return TestClient(app)
