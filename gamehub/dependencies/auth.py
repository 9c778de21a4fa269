"""
Authentication dependencies for FastAPI route protection.

Tokens travel only in the ``Authorization: Bearer <token>`` header, for every
route.
"""

from typing import Any
from uuid import UUID

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from gamehub.exceptions import InvalidTokenError, UnauthorizedError
from gamehub.utils.auth import TokenService, get_token_service

# Missing headers are reported by the gate itself, not by HTTPBearer
security = HTTPBearer(auto_error=False)


async def get_current_user_id(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    token_service: TokenService = Depends(get_token_service),
) -> UUID:
    """
    Verify the bearer token and return the authenticated user id.

    The id is also stored on ``request.state.user_id`` for downstream code.
    Raises UnauthorizedError without a token, InvalidTokenError or
    TokenExpiredError for a bad one.
    """
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError()

    claims = token_service.verify(credentials.credentials)
    try:
        user_id = UUID(claims["sub"])
    except ValueError as e:
        raise InvalidTokenError() from e

    request.state.user_id = user_id
    return user_id


async def get_optional_claims(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    token_service: TokenService = Depends(get_token_service),
) -> dict[str, Any] | None:
    """
    Claims of a valid bearer token, or None when the token is missing or invalid.
    """
    if credentials is None:
        return None
    try:
        return token_service.verify(credentials.credentials)
    except InvalidTokenError:
        return None
