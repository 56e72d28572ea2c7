"""
Authentication Dependencies

Bearer-token verification. Tokens are issued by the identity service; this
API only checks the signature and that the user still exists.

Dependency Hierarchy:
=====================
    get_current_user_token()  ← Extract and validate JWT from header
           │
           ▼
    get_current_user()        ← Resolve the user row (401 if gone)

    get_optional_user()       ← Same, but None when no header is sent

Type Aliases:
=============
    CurrentUser   - Authenticated User (required)
    OptionalUser  - User or None (anonymous upload)

Usage:
======
    from heroflicks.api.dependencies.auth import CurrentUser

    @router.get("/users/me/likes")
    async def my_likes(current_user: CurrentUser, ...):
        ...
"""

from typing import Annotated, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from heroflicks.api.dependencies.database import DbSession
from heroflicks.config.settings import settings
from heroflicks.shared.core.exceptions import AuthenticationError
from heroflicks.shared.models.user import User
from heroflicks.shared.repositories.user_repository import UserRepository
from heroflicks.shared.utils.security import SecurityUtils


# auto_error=False so a missing header becomes our own 401 body
security = HTTPBearer(auto_error=False)


async def get_current_user_token(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)] = None,
) -> dict:
    """
    Extract and validate JWT token from Authorization header.

    Raises:
        AuthenticationError: If token is missing or invalid
    """
    if not credentials:
        raise AuthenticationError("Authorization header required")

    try:
        return SecurityUtils.decode_access_token(
            credentials.credentials,
            settings.SECRET_KEY,
            algorithm=settings.JWT_ALGORITHM,
        )
    except ValueError as e:
        raise AuthenticationError(str(e)) from e


async def _resolve_user(payload: dict, db: DbSession) -> User:
    try:
        user_id = SecurityUtils.user_id_from_payload(payload)
    except ValueError as e:
        raise AuthenticationError("Invalid token payload") from e

    user = await UserRepository(db).get(user_id)
    if user is None:
        raise AuthenticationError("User not found")
    return user


async def get_current_user(
    token: Annotated[dict, Depends(get_current_user_token)],
    db: DbSession,
) -> User:
    """
    Get current authenticated user from token.

    Raises:
        AuthenticationError: If the token names no existing user
    """
    return await _resolve_user(token, db)


async def get_optional_user(
    db: DbSession,
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)] = None,
) -> Optional[User]:
    """The caller if a bearer token was sent; a bad token is still a 401."""
    if not credentials:
        return None
    payload = await get_current_user_token(credentials)
    return await _resolve_user(payload, db)


# ═══════════════════════════════════════════════════════════════════════════════
# TYPE ALIASES
# ═══════════════════════════════════════════════════════════════════════════════

CurrentUser = Annotated[User, Depends(get_current_user)]
OptionalUser = Annotated[Optional[User], Depends(get_optional_user)]
