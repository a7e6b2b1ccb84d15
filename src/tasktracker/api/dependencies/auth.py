"""Authentication dependencies."""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Header, HTTPException, status

from src.tasktracker.api.dependencies.repositories import UserRepo
from src.tasktracker.core.logging import bind_user_context
from src.tasktracker.core.security import TokenType, decode_token
from src.tasktracker.models import User


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    user_repo: UserRepo,
    authorization: Annotated[str | None, Header()] = None,
) -> User:
    """Validate the bearer token and return the user it identifies.

    Rejects missing/malformed headers, invalid or expired tokens, tokens of
    the wrong type, and users that no longer exist or are inactive.
    """
    if not authorization or not authorization.startswith("Bearer "):
        raise _unauthorized("Missing or invalid authorization header")

    payload = decode_token(authorization[7:])
    if payload is None:
        raise _unauthorized("Invalid or expired token")

    if payload.get("type") != TokenType.ACCESS:
        raise _unauthorized("Invalid token type")

    user_id = payload.get("sub")
    if not user_id:
        raise _unauthorized("Invalid token payload")

    try:
        user_uuid = UUID(user_id)
    except ValueError as e:
        raise _unauthorized("Invalid user_id in token") from e

    user = await user_repo.get_by_id(user_uuid)
    if user is None or not user.is_active:
        raise _unauthorized("User not found or inactive")

    bind_user_context(user.id)
    return user


CurrentUser = Annotated[User, Depends(get_current_user)]
