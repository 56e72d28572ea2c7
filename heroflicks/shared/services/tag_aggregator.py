"""
Tag Aggregator

Tag lists for comics and tag statistics over a user's likes.

Every endpoint that returns comics hydrates them through map_rows(), which
fetches the tags of all comics in ONE query and then runs map_comic() on each.

Usage:
======
    aggregator = TagAggregator(db)

    comics = await aggregator.map_rows(await ComicRepository(db).most_liked(5))

    top = await aggregator.top_tags_for_user_likes(user_id, 2)
    if not top.has_likes:
        ...
"""

from dataclasses import dataclass, field
from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from heroflicks.shared.repositories.comic_repository import ComicRow
from heroflicks.shared.repositories.engagement_repository import LikeRepository
from heroflicks.shared.repositories.tag_repository import TagFrequency, TagRepository
from heroflicks.shared.schemas.comic import ComicResponse, TagInfo, map_comic


@dataclass
class TopTags:
    """
    Most frequent tags across a user's liked comics.

    has_likes=False means the user has no likes at all, which callers treat
    differently from "likes, but none of them tagged".
    """

    has_likes: bool
    tags: list[TagFrequency] = field(default_factory=list)


class TagAggregator:
    """Tag lookups and aggregation on top of TagRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.tag_repo = TagRepository(session)
        self.like_repo = LikeRepository(session)

    async def tags_for_comic(self, comic_id: int) -> list[TagInfo]:
        """Tags of one comic sorted by name; empty when it has none."""
        return (await self.tags_for_comics([comic_id])).get(comic_id, [])

    async def tags_for_comics(self, comic_ids: Sequence[int]) -> dict[int, list[TagInfo]]:
        """Tags of many comics in one query, keyed by comic id."""
        grouped: dict[int, list[TagInfo]] = {comic_id: [] for comic_id in comic_ids}
        for row in await self.tag_repo.tags_for_comics(comic_ids):
            grouped.setdefault(row.comic_id, []).append(TagInfo(id=row.tag_id, name=row.tag_name))
        return grouped

    async def top_tags_for_user_likes(self, user_id: int, n: int = 2) -> TopTags:
        """
        The n most frequent tags over the user's liked comics.

        Ordering: frequency desc, then tag name asc, then tag id asc.
        """
        liked_ids = await self.like_repo.comic_ids_for_user(user_id)
        if not liked_ids:
            return TopTags(has_likes=False)
        tags = await self.tag_repo.top_tags_for_user_likes(user_id, n)
        return TopTags(has_likes=True, tags=tags)

    async def liked_tags(self, user_id: int) -> list[TagInfo]:
        """Distinct tags across the user's liked comics, by name."""
        return [TagInfo.model_validate(tag) for tag in await self.tag_repo.liked_tags(user_id)]

    # ═══════════════════════════════════════════════════════════════════════════
    # HYDRATION
    # ═══════════════════════════════════════════════════════════════════════════

    async def map_rows(self, rows: Sequence[ComicRow]) -> list[ComicResponse]:
        """Canonical representation of many comics, tags fetched in one batch."""
        tags = await self.tags_for_comics([row.comic.id for row in rows])
        return [
            map_comic(row.comic, tags.get(row.comic.id, []), row.likes_count, row.comments_count)
            for row in rows
        ]

    async def map_row(self, row: ComicRow) -> ComicResponse:
        tags = await self.tags_for_comic(row.comic.id)
        return map_comic(row.comic, tags, row.likes_count, row.comments_count)
