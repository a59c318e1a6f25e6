"""Identity Tokens — sign and verify the JWT carried in the auth cookie.

Invariants:
    - issue() signs the given claims unchanged, adding exp only when a TTL is configured
    - Registered claims (exp, nbf, iat, ...) are never taken from the caller
    - verify() returns an Identity or raises UnauthorizedError, never anything else
    - Cookie attributes depend only on whether the deployment is production
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any

import jwt

from jobhorizon.core.domain_types import Identity
from jobhorizon.core.errors import UnauthorizedError

logger = logging.getLogger(__name__)

RESERVED_CLAIMS = frozenset({"exp", "nbf", "iat", "aud", "iss", "sub", "jti"})


def cookie_attributes(production: bool) -> dict[str, Any]:
    """Cookie flags for the identity cookie.

    Production frontends live on another site, so the cookie must be
    cross-site capable (SameSite=None requires Secure).
    """
    return {
        "httponly": True,
        "secure": production,
        "samesite": "none" if production else "strict",
    }


class TokenService:
    """HMAC-signed identity tokens."""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        ttl_seconds: int | None = None,
    ):
        self._secret = secret
        self._algorithm = algorithm
        self._ttl_seconds = ttl_seconds

    def issue(self, claims: dict[str, Any]) -> str:
        reserved = RESERVED_CLAIMS.intersection(claims)
        if reserved:
            raise ValueError(f"reserved claims not allowed: {sorted(reserved)}")
        payload = dict(claims)
        if self._ttl_seconds:
            payload["exp"] = datetime.now(timezone.utc) + timedelta(
                seconds=self._ttl_seconds,
            )
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str | None) -> Identity:
        if not token:
            raise UnauthorizedError("missing token")
        try:
            claims = jwt.decode(
                token, self._secret, algorithms=[self._algorithm],
            )
        except jwt.ExpiredSignatureError:
            raise UnauthorizedError("expired token")
        except jwt.InvalidTokenError as e:
            logger.info(f"Token verification failed: {e}")
            raise UnauthorizedError("invalid token")
        email = claims.get("email")
        return Identity(
            email=email if isinstance(email, str) and email else None,
            claims=claims,
        )
