"""JWT issuance and verification.

Two token families share the same shape but not the same secret:
- access tokens carry ``userId`` and expire after an hour
- email-verification tokens carry ``email`` and expire after a day
"""

from datetime import UTC, datetime

import jwt
from protean.exceptions import ValidationError

from marketplace import settings
from marketplace.identity.exceptions import AuthenticationError


def _encode(claims: dict, secret: str, ttl) -> str:
    now = datetime.now(UTC)
    payload = {**claims, "iat": now, "exp": now + ttl}
    return jwt.encode(payload, secret, algorithm=settings.JWT_ALGORITHM)


def issue_access_token(user_id: str) -> str:
    return _encode({"userId": str(user_id)}, settings.JWT_SECRET, settings.ACCESS_TOKEN_TTL)


def decode_access_token(token: str) -> str:
    """Return the ``userId`` claim of a valid access token."""
    if not token:
        raise AuthenticationError("No token, authorization denied")

    try:
        payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except jwt.PyJWTError as exc:
        raise AuthenticationError() from exc

    user_id = payload.get("userId")
    if not user_id:
        raise AuthenticationError()
    return str(user_id)


def issue_verification_token(email: str) -> str:
    return _encode({"email": email}, settings.JWT_EMAIL_SECRET, settings.VERIFICATION_TOKEN_TTL)


def decode_verification_token(token: str) -> str:
    """Return the ``email`` claim of a valid email-verification token."""
    try:
        payload = jwt.decode(token or "", settings.JWT_EMAIL_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except jwt.PyJWTError as exc:
        raise ValidationError({"token": ["Invalid or expired token"]}) from exc

    email = payload.get("email")
    if not email:
        raise ValidationError({"token": ["Invalid or expired token"]})
    return email
