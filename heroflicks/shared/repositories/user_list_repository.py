"""
UserList Repository

Owned-list lookups, comic counts per list and membership changes.

Ownership:
==========
Every lookup takes the owner id. A list that exists but belongs to someone
else is reported the same way as a missing one.
"""

from typing import NamedTuple, Optional

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from heroflicks.shared.repositories.base import BaseRepository
from heroflicks.shared.models.enums import ListType
from heroflicks.shared.models.user_list import UserList, UserListComic


class UserListWithCount(NamedTuple):
    user_list: UserList
    comic_count: int


class UserListRepository(BaseRepository[UserList]):
    """Repository for UserList and UserListComic operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(UserList, session)

    async def get_owned(self, list_id: int, user_id: int) -> Optional[UserList]:
        result = await self.session.execute(
            select(UserList).where(UserList.id == list_id, UserList.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def name_taken(
        self,
        user_id: int,
        list_name: str,
        list_type: ListType,
        exclude_id: Optional[int] = None,
    ) -> bool:
        """Whether the user already has a list with this name and type."""
        query = select(UserList.id).where(
            UserList.user_id == user_id,
            UserList.list_name == list_name,
            UserList.list_type == list_type,
        )
        if exclude_id is not None:
            query = query.where(UserList.id != exclude_id)
        result = await self.session.execute(query.limit(1))
        return result.first() is not None

    async def list_for_user(
        self, user_id: int, list_type: Optional[ListType] = None
    ) -> list[UserListWithCount]:
        """
        The user's lists with the number of comics in each, by name.

        SQL Generated:
            SELECT user_lists.*,
                   (SELECT count(*) FROM user_list_comics
                    WHERE user_list_comics.list_id = user_lists.id) AS comic_count
            FROM user_lists
            WHERE user_id = 12 [AND list_type = 'pending']
            ORDER BY list_name
        """
        comic_count = (
            select(func.count())
            .select_from(UserListComic)
            .where(UserListComic.list_id == UserList.id)
            .correlate(UserList)
            .scalar_subquery()
            .label("comic_count")
        )
        query = select(UserList, comic_count).where(UserList.user_id == user_id)
        if list_type is not None:
            query = query.where(UserList.list_type == list_type)
        query = query.order_by(UserList.list_name.asc(), UserList.id.asc())

        result = await self.session.execute(query)
        return [UserListWithCount(row[0], row[1] or 0) for row in result.all()]

    async def count_comics(self, list_id: int) -> int:
        return await BaseRepository(UserListComic, self.session).count({"list_id": list_id})

    async def add_comic(self, list_id: int, comic_id: int) -> bool:
        """Ensure the comic is in the list. Returns False if it already was."""
        return await BaseRepository(UserListComic, self.session).insert_ignore(
            list_id=list_id, comic_id=comic_id
        )

    async def remove_comic(self, list_id: int, comic_id: int) -> bool:
        result = await self.session.execute(
            delete(UserListComic).where(
                UserListComic.list_id == list_id,
                UserListComic.comic_id == comic_id,
            )
        )
        return (result.rowcount or 0) > 0
