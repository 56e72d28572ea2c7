"""
Repository Pattern Implementations

Repositories encapsulate database queries and provide a clean API for data access.

Repository Hierarchy:
=====================
    BaseRepository[ModelType]           ← Generic CRUD + insert_ignore
         │
         ├── UserRepository             ← Token user lookup
         ├── ComicRepository            ← Catalog, rankings, search (with derived counts)
         ├── TagRepository              ← Tags, comic associations, tag aggregation
         ├── LikeRepository             ← (user, comic) likes
         ├── PendingEntryRepository     ← (user, comic) want-to-read entries
         ├── CommentRepository          ← Comments, ratings
         └── UserListRepository         ← Custom lists and their comics

Usage Example:
==============
    from heroflicks.shared.repositories import ComicRepository, TagRepository

    async def top_five(db: AsyncSession):
        rows = await ComicRepository(db).most_liked(limit=5)
        tags = await TagRepository(db).tags_for_comics([row.comic.id for row in rows])
"""

from heroflicks.shared.repositories.base import BaseRepository
from heroflicks.shared.repositories.user_repository import UserRepository
from heroflicks.shared.repositories.comic_repository import ComicRepository, ComicRow
from heroflicks.shared.repositories.tag_repository import (
    ComicTagRow,
    TagFrequency,
    TagRepository,
)
from heroflicks.shared.repositories.engagement_repository import (
    CommentRepository,
    CommentWithAuthor,
    LikeRepository,
    PendingEntryRepository,
    RatingSummary,
)
from heroflicks.shared.repositories.user_list_repository import (
    UserListRepository,
    UserListWithCount,
)

__all__ = [
    # Base class
    "BaseRepository",
    # Entity-specific repositories
    "UserRepository",
    "ComicRepository",
    "TagRepository",
    "LikeRepository",
    "PendingEntryRepository",
    "CommentRepository",
    "UserListRepository",
    # Row types
    "ComicRow",
    "ComicTagRow",
    "TagFrequency",
    "CommentWithAuthor",
    "RatingSummary",
    "UserListWithCount",
]
