"""
HeroFlicks SQLAlchemy Models

Model Hierarchy:
================
    User
       ├── likes (Like[])
       ├── pending_entries (PendingEntry[])
       ├── comments (Comment[])
       └── user_lists (UserList[])
              └── user_list_comics (UserListComic[])

    Comic
       ├── comics_tags (ComicTag[]) ──► Tag
       ├── likes / pending_entries / comments
       └── uploader_id ──► User (SET NULL)

Usage:
======
    from heroflicks.shared.models import Comic, Tag, Like

    comic = await session.get(Comic, comic_id)
"""

from heroflicks.shared.models.base import Base, CreatedAtMixin, TimestampMixin
from heroflicks.shared.models.enums import Editorial, ListType
from heroflicks.shared.models.user import User
from heroflicks.shared.models.comic import Comic
from heroflicks.shared.models.tag import Tag, ComicTag
from heroflicks.shared.models.engagement import Like, PendingEntry, Comment
from heroflicks.shared.models.user_list import UserList, UserListComic

__all__ = [
    # Base classes and mixins
    "Base",
    "CreatedAtMixin",
    "TimestampMixin",
    # Enums
    "Editorial",
    "ListType",
    # Models
    "User",
    "Comic",
    "Tag",
    "ComicTag",
    "Like",
    "PendingEntry",
    "Comment",
    "UserList",
    "UserListComic",
]
