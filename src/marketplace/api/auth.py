"""Bearer-token dependencies for protected routes."""

from fastapi import Depends, Header
from protean.utils.globals import current_domain

from marketplace.identity.exceptions import AuthenticationError
from marketplace.identity.user.tokens import decode_access_token
from marketplace.identity.user.user import User


def current_user_id(authorization: str | None = Header(default=None)) -> str:
    """Resolve ``Authorization: Bearer <token>`` to the caller's user id."""
    if not authorization:
        raise AuthenticationError("No token, authorization denied")

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise AuthenticationError("No token, authorization denied")

    return decode_access_token(token.strip())


async def current_active_user_id(user_id: str = Depends(current_user_id)) -> str:
    """Like ``current_user_id``, but a deleted account's token resolves to 404."""
    current_domain.repository_for(User).get_active(user_id)
    return user_id
