"""Identity Tokens — signing, verification failures and cookie attributes.

Tests:
    - Claims survive issue → verify; no exp claim unless a TTL is configured
    - Missing, tampered, foreign-secret and expired tokens raise UnauthorizedError
    - Cookie is cross-site capable only in production
"""

import base64

import jwt
import pytest

from jobhorizon.core.errors import UnauthorizedError
from jobhorizon.core.tokens import TokenService, cookie_attributes

SECRET = "unit-test-secret-with-enough-length-0123456789"


@pytest.fixture
def tokens():
    return TokenService(SECRET)


def test_verify_returns_identity_with_email_and_claims(tokens):
    token = tokens.issue({"email": "a@x.com", "displayName": "Ann"})
    identity = tokens.verify(token)
    assert identity.email == "a@x.com"
    assert identity.claims["displayName"] == "Ann"


def test_issued_token_has_no_expiry_by_default(tokens):
    token = tokens.issue({"email": "a@x.com"})
    claims = jwt.decode(token, options={"verify_signature": False})
    assert "exp" not in claims


def test_ttl_adds_expiry_claim():
    token = TokenService(SECRET, ttl_seconds=60).issue({"email": "a@x.com"})
    claims = jwt.decode(token, options={"verify_signature": False})
    assert "exp" in claims


def test_missing_token_is_unauthorized(tokens):
    with pytest.raises(UnauthorizedError) as exc:
        tokens.verify(None)
    assert exc.value.reason == "missing token"
    assert exc.value.http_status == 401


def test_tampered_token_is_unauthorized(tokens):
    token = tokens.issue({"email": "a@x.com"})
    header, _, signature = token.split(".")
    payload = base64.urlsafe_b64encode(b'{"email":"b@x.com"}').rstrip(b"=").decode()
    forged = ".".join([header, payload, signature])
    with pytest.raises(UnauthorizedError) as exc:
        tokens.verify(forged)
    assert exc.value.reason == "invalid token"


def test_malformed_token_is_unauthorized(tokens):
    with pytest.raises(UnauthorizedError):
        tokens.verify("not-a-jwt")


def test_token_signed_with_other_secret_is_unauthorized(tokens):
    other = TokenService("another-secret-also-long-enough-0123456789")
    with pytest.raises(UnauthorizedError):
        tokens.verify(other.issue({"email": "a@x.com"}))


def test_expired_token_is_unauthorized():
    expired = TokenService(SECRET, ttl_seconds=-10)
    with pytest.raises(UnauthorizedError) as exc:
        expired.verify(expired.issue({"email": "a@x.com"}))
    assert exc.value.reason == "expired token"


def test_token_without_email_verifies_with_empty_identity(tokens):
    identity = tokens.verify(tokens.issue({"name": "anonymous"}))
    assert identity.email is None


def test_cookie_attributes_development():
    assert cookie_attributes(False) == {
        "httponly": True, "secure": False, "samesite": "strict",
    }


def test_cookie_attributes_production():
    assert cookie_attributes(True) == {
        "httponly": True, "secure": True, "samesite": "none",
    }


def test_issue_refuses_caller_supplied_expiry(tokens):
    with pytest.raises(ValueError, match="reserved claims"):
        tokens.issue({"email": "a@x.com", "exp": "soon"})
