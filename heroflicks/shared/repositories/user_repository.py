"""
User Repository

Database operations specific to the User model.

Users are created by the identity service; this backend only reads them,
mainly to resolve the user named by a bearer token.

Usage Example:
==============
    async def resolve_token_user(db: AsyncSession, user_id: int) -> User:
        user = await UserRepository(db).get(user_id)
        if not user:
            raise AuthenticationError("User no longer exists")
        return user
"""

from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from heroflicks.shared.repositories.base import BaseRepository
from heroflicks.shared.models.user import User


class UserRepository(BaseRepository[User]):
    """Repository for User database operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(User, session)

    async def get_by_username(self, username: str) -> Optional[User]:
        """
        Get user by username, case-insensitively.

        SQL Generated:
            SELECT * FROM users WHERE lower(username) = 'peter'
        """
        result = await self.session.execute(
            select(User).where(func.lower(User.username) == username.lower())
        )
        return result.scalar_one_or_none()
