"""
Engagement Repositories

Likes and pending entries share one shape: a unique (user_id, comic_id) pair.
Comments add text, an optional rating and pagination.

    UserComicRepository[Like | PendingEntry]
         ├── LikeRepository
         └── PendingEntryRepository
    CommentRepository
"""

from typing import NamedTuple, Optional, TypeVar, Union

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.functions import count as sql_count

from heroflicks.shared.repositories.base import BaseRepository
from heroflicks.shared.models.engagement import Comment, Like, PendingEntry
from heroflicks.shared.models.user import User


UserComicModel = TypeVar("UserComicModel", bound=Union[Like, PendingEntry])


class UserComicRepository(BaseRepository[UserComicModel]):
    """Idempotent add/remove of a (user, comic) pair."""

    async def add(self, user_id: int, comic_id: int) -> bool:
        """Ensure the pair exists. Returns False if it already did."""
        return await self.insert_ignore(user_id=user_id, comic_id=comic_id)

    async def remove(self, user_id: int, comic_id: int) -> bool:
        """Delete the pair. Returns False if there was nothing to delete."""
        result = await self.session.execute(
            delete(self.model).where(
                self.model.user_id == user_id,
                self.model.comic_id == comic_id,
            )
        )
        return (result.rowcount or 0) > 0

    async def has(self, user_id: int, comic_id: int) -> bool:
        return await self.count({"user_id": user_id, "comic_id": comic_id}) > 0

    async def comic_ids_for_user(self, user_id: int) -> list[int]:
        result = await self.session.execute(
            select(self.model.comic_id).where(self.model.user_id == user_id)
        )
        return list(result.scalars().all())


class LikeRepository(UserComicRepository[Like]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Like, session)

    async def count_for_comic(self, comic_id: int) -> int:
        return await self.count({"comic_id": comic_id})


class PendingEntryRepository(UserComicRepository[PendingEntry]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(PendingEntry, session)


class CommentWithAuthor(NamedTuple):
    comment: Comment
    username: Optional[str]


class RatingSummary(NamedTuple):
    average: Optional[float]
    count: int


class CommentRepository(BaseRepository[Comment]):
    """Repository for Comment database operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Comment, session)

    async def list_for_comic(
        self, comic_id: int, *, offset: int = 0, limit: int = 10
    ) -> list[CommentWithAuthor]:
        """
        A page of a comic's comments with author names, newest first.

        SQL Generated:
            SELECT comments.*, users.username
            FROM comments LEFT JOIN users ON users.id = comments.user_id
            WHERE comments.comic_id = 42
            ORDER BY comments.created_at DESC, comments.id DESC
            LIMIT 10 OFFSET 0
        """
        query = (
            select(Comment, User.username)
            .outerjoin(User, User.id == Comment.user_id)
            .where(Comment.comic_id == comic_id)
            .order_by(Comment.created_at.desc(), Comment.id.desc())
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(query)
        return [CommentWithAuthor(*row) for row in result.all()]

    async def get_with_author(self, comment_id: int) -> Optional[CommentWithAuthor]:
        result = await self.session.execute(
            select(Comment, User.username)
            .outerjoin(User, User.id == Comment.user_id)
            .where(Comment.id == comment_id)
        )
        row = result.first()
        return CommentWithAuthor(*row) if row else None

    async def count_for_comic(self, comic_id: int) -> int:
        return await self.count({"comic_id": comic_id})

    async def rating_summary(self, comic_id: int) -> RatingSummary:
        """Average of non-null ratings and how many ratings there are."""
        result = await self.session.execute(
            select(func.avg(Comment.rating), sql_count(Comment.rating)).where(
                Comment.comic_id == comic_id,
                Comment.rating.is_not(None),
            )
        )
        average, count = result.one()
        return RatingSummary(
            average=float(average) if average is not None else None,
            count=count or 0,
        )
