"""Tests for utils.tokens — JWT issue/verify and bearer header parsing."""

from types import SimpleNamespace

import jwt
import pytest

from utils.errors import Unauthorized
from utils.tokens import TokenSigner, extract_bearer_token

SECRET = "unit-test-signing-secret-0123456789"
USER = SimpleNamespace(id=7, username="root", password_hash="never-in-token")


def test_issued_token_carries_public_identity_only():
    signer = TokenSigner(SECRET)
    payload = signer.verify(signer.issue(USER))
    assert payload["id"] == 7
    assert payload["username"] == "root"
    assert "exp" in payload
    assert "password_hash" not in payload
    assert "never-in-token" not in str(payload)


def test_token_signed_with_other_secret_is_rejected():
    token = TokenSigner("old-signing-secret-0123456789abcdef").issue(USER)
    with pytest.raises(Unauthorized):
        TokenSigner("rotated-signing-secret-0123456789abcdef").verify(token)


def test_expired_token_is_rejected():
    signer = TokenSigner(SECRET, ttl_seconds=-10)
    with pytest.raises(Unauthorized) as exc_info:
        signer.verify(signer.issue(USER))
    assert "expired" in exc_info.value.message


@pytest.mark.parametrize("token", [None, "", "not-a-jwt"])
def test_missing_or_garbage_token_is_rejected(token):
    with pytest.raises(Unauthorized):
        TokenSigner(SECRET).verify(token)


def test_token_without_identity_fields_is_rejected():
    token = jwt.encode({"sub": "someone"}, SECRET, algorithm="HS256")
    with pytest.raises(Unauthorized):
        TokenSigner(SECRET).verify(token)


def test_empty_secret_is_refused():
    with pytest.raises(ValueError):
        TokenSigner("")


@pytest.mark.parametrize(
    "header, expected",
    [
        ("Bearer abc.def.ghi", "abc.def.ghi"),
        ("bearer abc", "abc"),
        ("  Bearer   abc  ", "abc"),
        ("Basic dXNlcjpwYXNz", None),
        ("Bearer", None),
        ("", None),
        (None, None),
    ],
)
def test_extract_bearer_token(header, expected):
    assert extract_bearer_token(header) == expected
