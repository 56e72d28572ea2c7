"""
Engagement Service

Likes and pending ("pendientes") entries.

Both are idempotent: liking twice, or two concurrent likes, leave exactly
one row and both calls succeed. Removing something that is not there is
also a success.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from heroflicks.shared.core.exceptions import ComicNotFoundError
from heroflicks.shared.core.logging import logger
from heroflicks.shared.repositories.comic_repository import ComicRepository
from heroflicks.shared.repositories.engagement_repository import (
    LikeRepository,
    PendingEntryRepository,
)
from heroflicks.shared.schemas.comic import ComicResponse
from heroflicks.shared.services.tag_aggregator import TagAggregator


class EngagementService:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.comic_repo = ComicRepository(session)
        self.like_repo = LikeRepository(session)
        self.pending_repo = PendingEntryRepository(session)
        self.aggregator = TagAggregator(session)

    async def _require_comic(self, comic_id: int) -> None:
        if not await self.comic_repo.exists(comic_id):
            raise ComicNotFoundError(comic_id)

    # ═══════════════════════════════════════════════════════════════════════════
    # LIKES
    # ═══════════════════════════════════════════════════════════════════════════

    async def like(self, user_id: int, comic_id: int) -> None:
        await self._require_comic(comic_id)
        created = await self.like_repo.add(user_id, comic_id)
        logger.info("Comic liked", user_id=user_id, comic_id=comic_id, created=created)

    async def unlike(self, user_id: int, comic_id: int) -> None:
        removed = await self.like_repo.remove(user_id, comic_id)
        logger.info("Comic unliked", user_id=user_id, comic_id=comic_id, removed=removed)

    async def is_liked(self, user_id: int, comic_id: int) -> bool:
        return await self.like_repo.has(user_id, comic_id)

    async def like_count(self, comic_id: int) -> int:
        return await self.like_repo.count_for_comic(comic_id)

    async def liked_comics(self, user_id: int) -> list[ComicResponse]:
        return await self.aggregator.map_rows(await self.comic_repo.liked_by_user(user_id))

    # ═══════════════════════════════════════════════════════════════════════════
    # PENDING ENTRIES
    # ═══════════════════════════════════════════════════════════════════════════

    async def add_pending(self, user_id: int, comic_id: int) -> None:
        await self._require_comic(comic_id)
        await self.pending_repo.add(user_id, comic_id)

    async def remove_pending(self, user_id: int, comic_id: int) -> None:
        await self.pending_repo.remove(user_id, comic_id)

    async def is_pending(self, user_id: int, comic_id: int) -> bool:
        return await self.pending_repo.has(user_id, comic_id)

    async def pending_comics(self, user_id: int) -> list[ComicResponse]:
        return await self.aggregator.map_rows(await self.comic_repo.pending_for_user(user_id))
