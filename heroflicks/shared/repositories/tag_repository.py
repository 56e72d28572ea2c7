"""
Tag Repository

Tag CRUD plus the tag aggregation queries:

- tags_for_comics()           → (comic_id, tag) pairs for many comics in one query
- top_tags_for_user_likes()   → most frequent tags across a user's liked comics
- liked_tags()                → distinct tags across a user's liked comics
- add_to_comic() / remove_from_comic()
"""

from typing import NamedTuple, Optional, Sequence

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from heroflicks.shared.repositories.base import BaseRepository
from heroflicks.shared.models.engagement import Like
from heroflicks.shared.models.tag import ComicTag, Tag


class ComicTagRow(NamedTuple):
    comic_id: int
    tag_id: int
    tag_name: str


class TagFrequency(NamedTuple):
    tag_id: int
    tag_name: str
    frequency: int


class TagRepository(BaseRepository[Tag]):
    """Repository for Tag and ComicTag database operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Tag, session)

    # ═══════════════════════════════════════════════════════════════════════════
    # LOOKUP
    # ═══════════════════════════════════════════════════════════════════════════

    async def get_by_name(self, name: str) -> Optional[Tag]:
        """Exact-name lookup."""
        result = await self.session.execute(select(Tag).where(Tag.name == name))
        return result.scalar_one_or_none()

    async def name_taken(self, name: str, exclude_id: Optional[int] = None) -> bool:
        query = select(Tag.id).where(Tag.name == name)
        if exclude_id is not None:
            query = query.where(Tag.id != exclude_id)
        result = await self.session.execute(query.limit(1))
        return result.first() is not None

    async def list_by_name(self) -> list[Tag]:
        return await self.list(order_by="name")

    # ═══════════════════════════════════════════════════════════════════════════
    # AGGREGATION
    # ═══════════════════════════════════════════════════════════════════════════

    async def tags_for_comics(self, comic_ids: Sequence[int]) -> list[ComicTagRow]:
        """
        Tags of many comics in a single query, ordered by tag name.

        SQL Generated:
            SELECT ct.comic_id, t.id, t.name
            FROM comics_tags ct JOIN tags t ON t.id = ct.tag_id
            WHERE ct.comic_id IN (1, 2, 3)
            ORDER BY t.name, t.id
        """
        if not comic_ids:
            return []
        query = (
            select(ComicTag.comic_id, Tag.id, Tag.name)
            .join(Tag, Tag.id == ComicTag.tag_id)
            .where(ComicTag.comic_id.in_(list(comic_ids)))
            .order_by(Tag.name.asc(), Tag.id.asc())
        )
        result = await self.session.execute(query)
        return [ComicTagRow(*row) for row in result.all()]

    async def top_tags_for_user_likes(self, user_id: int, n: int) -> list[TagFrequency]:
        """
        The n most frequent tags across the comics a user liked.

        Ties are broken by tag name, then tag id, so the result is deterministic.

        SQL Generated:
            SELECT t.id, t.name, count(*) AS frequency
            FROM likes l
            JOIN comics_tags ct ON ct.comic_id = l.comic_id
            JOIN tags t ON t.id = ct.tag_id
            WHERE l.user_id = :user_id
            GROUP BY t.id, t.name
            ORDER BY frequency DESC, t.name ASC, t.id ASC
            LIMIT :n
        """
        frequency = func.count().label("frequency")
        query = (
            select(Tag.id, Tag.name, frequency)
            .select_from(Like)
            .join(ComicTag, ComicTag.comic_id == Like.comic_id)
            .join(Tag, Tag.id == ComicTag.tag_id)
            .where(Like.user_id == user_id)
            .group_by(Tag.id, Tag.name)
            .order_by(frequency.desc(), Tag.name.asc(), Tag.id.asc())
            .limit(n)
        )
        result = await self.session.execute(query)
        return [TagFrequency(*row) for row in result.all()]

    async def liked_tags(self, user_id: int) -> list[Tag]:
        """Distinct tags across the user's liked comics, by name."""
        liked_tag_ids = (
            select(ComicTag.tag_id)
            .join(Like, Like.comic_id == ComicTag.comic_id)
            .where(Like.user_id == user_id)
        )
        query = select(Tag).where(Tag.id.in_(liked_tag_ids)).order_by(Tag.name.asc(), Tag.id.asc())
        result = await self.session.execute(query)
        return list(result.scalars().all())

    # ═══════════════════════════════════════════════════════════════════════════
    # COMIC ASSOCIATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def add_to_comic(self, comic_id: int, tag_id: int) -> bool:
        """Ensure the association exists. Returns False if it was already there."""
        return await self._associations().insert_ignore(comic_id=comic_id, tag_id=tag_id)

    async def remove_from_comic(self, comic_id: int, tag_id: int) -> bool:
        """Delete the association. Returns False if there was none."""
        result = await self.session.execute(
            delete(ComicTag).where(ComicTag.comic_id == comic_id, ComicTag.tag_id == tag_id)
        )
        return (result.rowcount or 0) > 0

    def _associations(self) -> BaseRepository[ComicTag]:
        return BaseRepository(ComicTag, self.session)
