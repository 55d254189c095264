import hashlib
import hmac

import pytest

from rhapsody.auth.errors import ConfigurationError
from rhapsody.auth.signer import Signer, signatures_match


def test_sign_is_hex_hmac_sha256(secret):
    raw = b'{"admin":true,"exp":1}'
    assert Signer(secret).sign(raw) == hmac.new(secret, raw, hashlib.sha256).hexdigest()


@pytest.mark.parametrize("value", ["", None, "short", "x" * 15])
def test_short_or_missing_secret_rejected(value):
    with pytest.raises(ConfigurationError):
        Signer(value)


def test_sixteen_byte_secret_accepted():
    Signer("x" * 16)


def test_signatures_match():
    assert signatures_match("abcd", "abcd")
    assert not signatures_match("abce", "abcd")
    assert not signatures_match("abc", "abcd")
    assert not signatures_match("", "abcd")
    assert not signatures_match("abéd", "abcd")
