"""
Comic Repository

Every query that returns comics for the API lives here, together with the
derived like/comment counts.

Derived Counts:
===============
Counts are never stored. Each comic query selects two correlated scalar
sub-queries next to the Comic entity:

    SELECT comics.*,
           (SELECT count(*) FROM likes    WHERE likes.comic_id    = comics.id) AS likes_count,
           (SELECT count(*) FROM comments WHERE comments.comic_id = comics.id) AS comments_count
    FROM comics

Rows come back as ComicRow(comic, likes_count, comments_count), the input of
the response mapper.

Orderings:
==========
- Catalog, search, recommendations, lists: title ASC
- most_liked / popular_by_tag:             likes_count DESC, title ASC
- most_commented:                          comments_count DESC, title ASC
- recently_added:                          created_at DESC, title ASC
"""

from typing import NamedTuple, Optional, Sequence

from sqlalchemy import Select, String, cast, exists, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from heroflicks.shared.repositories.base import BaseRepository
from heroflicks.shared.models.comic import Comic
from heroflicks.shared.models.engagement import Comment, Like, PendingEntry
from heroflicks.shared.models.tag import ComicTag, Tag
from heroflicks.shared.models.user_list import UserListComic


class ComicRow(NamedTuple):
    """A comic with its derived counts."""

    comic: Comic
    likes_count: int
    comments_count: int


def likes_count_column():
    return (
        select(func.count(Like.id))
        .where(Like.comic_id == Comic.id)
        .correlate(Comic)
        .scalar_subquery()
        .label("likes_count")
    )


def comments_count_column():
    return (
        select(func.count(Comment.id))
        .where(Comment.comic_id == Comic.id)
        .correlate(Comic)
        .scalar_subquery()
        .label("comments_count")
    )


class ComicRepository(BaseRepository[Comic]):
    """
    Repository for Comic database operations.

    Plain CRUD comes from BaseRepository; the *_with_counts style methods
    return ComicRow tuples.
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Comic, session)

    # ═══════════════════════════════════════════════════════════════════════════
    # QUERY BUILDING
    # ═══════════════════════════════════════════════════════════════════════════

    def _select_with_counts(self) -> Select:
        return select(Comic, likes_count_column(), comments_count_column())

    async def _fetch(self, query: Select) -> list[ComicRow]:
        result = await self.session.execute(query)
        return [
            ComicRow(comic=row[0], likes_count=row[1] or 0, comments_count=row[2] or 0)
            for row in result.all()
        ]

    @staticmethod
    def _tagged_with(tag_ids: Sequence[int]):
        return Comic.id.in_(select(ComicTag.comic_id).where(ComicTag.tag_id.in_(tag_ids)))

    # ═══════════════════════════════════════════════════════════════════════════
    # SINGLE COMIC
    # ═══════════════════════════════════════════════════════════════════════════

    async def get_with_counts(self, comic_id: int) -> Optional[ComicRow]:
        """Get one comic with its counts, or None."""
        rows = await self._fetch(self._select_with_counts().where(Comic.id == comic_id))
        return rows[0] if rows else None

    # ═══════════════════════════════════════════════════════════════════════════
    # CATALOG
    # ═══════════════════════════════════════════════════════════════════════════

    async def list_with_counts(self, tag_id: Optional[int] = None) -> list[ComicRow]:
        """Full catalog by title, optionally restricted to one tag."""
        query = self._select_with_counts()
        if tag_id is not None:
            query = query.where(self._tagged_with([tag_id]))
        return await self._fetch(query.order_by(Comic.title.asc(), Comic.id.asc()))

    # ═══════════════════════════════════════════════════════════════════════════
    # RANKINGS
    # ═══════════════════════════════════════════════════════════════════════════

    async def most_liked(self, limit: int) -> list[ComicRow]:
        """
        Comics ordered by like count.

        SQL Generated:
            SELECT ... ORDER BY likes_count DESC, comics.title ASC LIMIT 5
        """
        likes = likes_count_column()
        query = (
            select(Comic, likes, comments_count_column())
            .order_by(likes.desc(), Comic.title.asc())
            .limit(limit)
        )
        return await self._fetch(query)

    async def most_commented(self, limit: int) -> list[ComicRow]:
        """Comics ordered by comment count, then title."""
        comments = comments_count_column()
        query = (
            select(Comic, likes_count_column(), comments)
            .order_by(comments.desc(), Comic.title.asc())
            .limit(limit)
        )
        return await self._fetch(query)

    async def recently_added(self, limit: int) -> list[ComicRow]:
        """Newest comics first, title as tie-break."""
        query = (
            self._select_with_counts()
            .order_by(Comic.created_at.desc(), Comic.title.asc())
            .limit(limit)
        )
        return await self._fetch(query)

    async def popular_by_tag(self, tag_id: int, limit: int) -> list[ComicRow]:
        """Comics carrying the tag, ordered by like count then title."""
        likes = likes_count_column()
        query = (
            select(Comic, likes, comments_count_column())
            .where(self._tagged_with([tag_id]))
            .order_by(likes.desc(), Comic.title.asc())
            .limit(limit)
        )
        return await self._fetch(query)

    # ═══════════════════════════════════════════════════════════════════════════
    # SEARCH & RECOMMENDATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def search(self, term: str) -> list[ComicRow]:
        """
        Case-insensitive substring search over title, editorial, family and tag names.

        LIKE wildcards in the term are escaped. A comic matching on several
        fields appears once, because matching is a WHERE over comics rather
        than a join.
        """
        tag_match = exists().where(
            ComicTag.comic_id == Comic.id,
            ComicTag.tag_id == Tag.id,
            Tag.name.icontains(term, autoescape=True),
        )
        query = (
            self._select_with_counts()
            .where(
                or_(
                    Comic.title.icontains(term, autoescape=True),
                    # The enum type would reject a free-text operand
                    cast(Comic.editorial, String).icontains(term, autoescape=True),
                    Comic.family.icontains(term, autoescape=True),
                    tag_match,
                )
            )
            .order_by(Comic.title.asc(), Comic.id.asc())
        )
        return await self._fetch(query)

    async def with_any_tag(self, tag_ids: Sequence[int]) -> list[ComicRow]:
        """Distinct comics carrying at least one of the tags, by title."""
        if not tag_ids:
            return []
        query = (
            self._select_with_counts()
            .where(self._tagged_with(tag_ids))
            .order_by(Comic.title.asc(), Comic.id.asc())
        )
        return await self._fetch(query)

    # ═══════════════════════════════════════════════════════════════════════════
    # PER-USER COLLECTIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def liked_by_user(self, user_id: int) -> list[ComicRow]:
        """Comics the user liked, most recent like first."""
        query = (
            self._select_with_counts()
            .join(Like, Like.comic_id == Comic.id)
            .where(Like.user_id == user_id)
            .order_by(Like.created_at.desc(), Comic.title.asc())
        )
        return await self._fetch(query)

    async def pending_for_user(self, user_id: int) -> list[ComicRow]:
        """Comics on the user's pending list, most recently added first."""
        query = (
            self._select_with_counts()
            .join(PendingEntry, PendingEntry.comic_id == Comic.id)
            .where(PendingEntry.user_id == user_id)
            .order_by(PendingEntry.created_at.desc(), Comic.title.asc())
        )
        return await self._fetch(query)

    async def in_user_list(self, list_id: int) -> list[ComicRow]:
        """Comics in a user list, most recently added first."""
        query = (
            self._select_with_counts()
            .join(UserListComic, UserListComic.comic_id == Comic.id)
            .where(UserListComic.list_id == list_id)
            .order_by(UserListComic.added_at.desc(), Comic.title.asc())
        )
        return await self._fetch(query)
