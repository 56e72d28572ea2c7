"""
Comment Service

Comments with optional ratings. Only the author may edit or delete a comment.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from heroflicks.shared.core.exceptions import (
    AuthorizationError,
    ComicNotFoundError,
    CommentNotFoundError,
)
from heroflicks.shared.core.logging import logger
from heroflicks.shared.repositories.comic_repository import ComicRepository
from heroflicks.shared.repositories.engagement_repository import (
    CommentRepository,
    CommentWithAuthor,
)
from heroflicks.shared.schemas.comic import format_timestamp
from heroflicks.shared.schemas.comment import (
    CommentPageResponse,
    CommentResponse,
    CommentWrite,
    RatingResponse,
)
from heroflicks.shared.schemas.common import PaginationParams, total_pages


def to_comment_response(item: CommentWithAuthor) -> CommentResponse:
    comment = item.comment
    return CommentResponse(
        id=comment.id,
        user_id=comment.user_id,
        comic_id=comment.comic_id,
        username=item.username,
        text=comment.text,
        rating=comment.rating,
        created_at=format_timestamp(comment.created_at),
    )


class CommentService:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.comment_repo = CommentRepository(session)
        self.comic_repo = ComicRepository(session)

    async def add_comment(self, user_id: int, comic_id: int, data: CommentWrite) -> CommentResponse:
        if not await self.comic_repo.exists(comic_id):
            raise ComicNotFoundError(comic_id)
        comment = await self.comment_repo.create(
            user_id=user_id,
            comic_id=comic_id,
            text=data.text,
            rating=data.rating,
        )
        logger.info("Comment added", comment_id=comment.id, comic_id=comic_id, user_id=user_id)
        return to_comment_response(await self.comment_repo.get_with_author(comment.id))

    async def list_comments(self, comic_id: int, pagination: PaginationParams) -> CommentPageResponse:
        """A page of comments, newest first, with author names."""
        items = await self.comment_repo.list_for_comic(
            comic_id, offset=pagination.offset, limit=pagination.limit
        )
        total = await self.comment_repo.count_for_comic(comic_id)
        return CommentPageResponse(
            comments=[to_comment_response(item) for item in items],
            current_page=pagination.page,
            total_pages=total_pages(total, pagination.limit),
            total_comments=total,
        )

    async def _owned(self, user_id: int, comment_id: int):
        comment = await self.comment_repo.get(comment_id)
        if comment is None:
            raise CommentNotFoundError(comment_id)
        if comment.user_id != user_id:
            raise AuthorizationError("You can only modify your own comments")
        return comment

    async def update_comment(self, user_id: int, comment_id: int, data: CommentWrite) -> None:
        comment = await self._owned(user_id, comment_id)
        comment.text = data.text
        comment.rating = data.rating
        await self.session.flush()

    async def delete_comment(self, user_id: int, comment_id: int) -> None:
        await self._owned(user_id, comment_id)
        await self.comment_repo.delete(comment_id)
        logger.info("Comment deleted", comment_id=comment_id, user_id=user_id)

    async def average_rating(self, comic_id: int) -> RatingResponse:
        """Mean of the given ratings rounded to one decimal, None when unrated."""
        summary = await self.comment_repo.rating_summary(comic_id)
        average = round(summary.average, 1) if summary.average is not None else None
        return RatingResponse(average_rating=average, rating_count=summary.count)
