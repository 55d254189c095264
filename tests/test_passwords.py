import pytest

from rhapsody.auth.errors import ConfigurationError
from rhapsody.auth.passwords import check_admin_password, hash_password, verify_password
from rhapsody.config import AuthConfig


def test_plain_password():
    cfg = AuthConfig(admin_password="s3cr3t!")
    assert check_admin_password(cfg, "s3cr3t!")
    assert not check_admin_password(cfg, "wrong")
    assert not check_admin_password(cfg, "")


def test_hash_takes_precedence():
    cfg = AuthConfig(admin_password="plain-one", admin_password_hash=hash_password("hashed-one"))
    assert check_admin_password(cfg, "hashed-one")
    assert not check_admin_password(cfg, "plain-one")


def test_missing_password_is_configuration_error():
    with pytest.raises(ConfigurationError):
        check_admin_password(AuthConfig(), "anything")


def test_invalid_hash_is_configuration_error():
    with pytest.raises(ConfigurationError):
        verify_password("not-an-argon2-hash", "x")


def test_hash_password_rejects_empty():
    with pytest.raises(ValueError):
        hash_password("")
