"""Signed, short-lived access tokens (JWT, HS256).

Each user's tokens are signed with a key derived from the global secret and
that user's salt. Verification never touches the store: the caller supplies
the key. The expiry check is done here rather than by PyJWT so it can be
evaluated against an explicit clock, using the same closed-open rule as
refresh sessions.
"""

import hashlib
import hmac
from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import UUID

import jwt

from tasklist.core.modules.token.models import AccessToken
from tasklist.errors import TokenExpiredError, TokenMalformedError, TokenSignatureInvalidError
from tasklist.utils import is_expired, now

ALGORITHM = "HS256"
REQUIRED_CLAIMS = ["sub", "iat", "exp"]


def derive_signing_key(secret: str, salt: str) -> str:
    """Derive a per-user signing key: HMAC-SHA256 over the salt, keyed by the global secret."""
    return hmac.new(secret.encode("utf-8"), salt.encode("utf-8"), hashlib.sha256).hexdigest()


def issue_access_token(
    user_id: UUID, signing_key: str, ttl: timedelta, issued_at: datetime | None = None
) -> AccessToken:
    issued_at = issued_at or now()
    payload = {
        "sub": str(user_id),
        "iat": int(issued_at.timestamp()),
        "exp": int((issued_at + ttl).timestamp()),
    }
    return AccessToken(jwt.encode(payload, signing_key, algorithm=ALGORITHM))


def read_unverified_subject(token: str) -> UUID:
    """Read the subject without checking the signature.

    Only used to select the signing key; the result must not be trusted.
    """
    try:
        claims = jwt.decode(token, options={"verify_signature": False})
    except jwt.InvalidTokenError as e:
        raise TokenMalformedError from e
    return _parse_subject(claims)


def verify_access_token(token: str, signing_key: str, at: datetime | None = None) -> UUID:
    """Verify signature and expiry, returning the user id the token was issued to.

    Raises:
        TokenMalformedError: undecodable token, missing or invalid claims
        TokenSignatureInvalidError: signature made with another key
        TokenExpiredError: `exp` is at or before `at`
    """
    try:
        claims = jwt.decode(
            token,
            signing_key,
            algorithms=[ALGORITHM],
            options={"require": REQUIRED_CLAIMS, "verify_exp": False, "verify_iat": False},
        )
    except jwt.InvalidSignatureError as e:
        raise TokenSignatureInvalidError from e
    except jwt.InvalidTokenError as e:
        raise TokenMalformedError from e

    expires = claims["exp"]
    if not isinstance(expires, int) or isinstance(expires, bool):
        raise TokenMalformedError
    try:
        expires_at = datetime.fromtimestamp(expires, UTC)
    except (OverflowError, OSError, ValueError) as e:
        raise TokenMalformedError from e
    if is_expired(expires_at, at):
        raise TokenExpiredError
    return _parse_subject(claims)


def _parse_subject(claims: dict[str, Any]) -> UUID:
    try:
        return UUID(claims["sub"])
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise TokenMalformedError from e
