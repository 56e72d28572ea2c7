"""
User List Service

Custom lists owned by the authenticated user.

A list that belongs to another user is reported as not found, so list ids
cannot be probed.
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from heroflicks.shared.core.exceptions import (
    ComicNotFoundError,
    DuplicateResourceError,
    NotFoundError,
    UserListNotFoundError,
)
from heroflicks.shared.core.logging import logger
from heroflicks.shared.models.enums import ListType
from heroflicks.shared.models.user_list import UserList
from heroflicks.shared.repositories.comic_repository import ComicRepository
from heroflicks.shared.repositories.user_list_repository import UserListRepository
from heroflicks.shared.schemas.user_list import (
    UserListComicsResponse,
    UserListCreate,
    UserListResponse,
    UserListUpdate,
)
from heroflicks.shared.services.tag_aggregator import TagAggregator


DUPLICATE_LIST_MESSAGE = "Ya tienes una lista de este tipo con el mismo nombre."


def to_list_response(user_list: UserList, comic_count: int = 0) -> UserListResponse:
    return UserListResponse(
        id=user_list.id,
        user_id=user_list.user_id,
        list_name=user_list.list_name,
        list_type=user_list.list_type,
        comic_count=comic_count,
        created_at=user_list.created_at,
        updated_at=user_list.updated_at,
    )


class UserListService:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.list_repo = UserListRepository(session)
        self.comic_repo = ComicRepository(session)
        self.aggregator = TagAggregator(session)

    async def _owned(self, user_id: int, list_id: int) -> UserList:
        user_list = await self.list_repo.get_owned(list_id, user_id)
        if user_list is None:
            raise UserListNotFoundError(list_id)
        return user_list

    async def create_list(self, user_id: int, data: UserListCreate) -> UserListResponse:
        if await self.list_repo.name_taken(user_id, data.list_name, data.list_type):
            raise DuplicateResourceError(DUPLICATE_LIST_MESSAGE)
        user_list = await self.list_repo.create(
            user_id=user_id,
            list_name=data.list_name,
            list_type=data.list_type,
        )
        logger.info("User list created", list_id=user_list.id, user_id=user_id)
        return to_list_response(user_list)

    async def get_lists(
        self, user_id: int, list_type: Optional[ListType] = None
    ) -> list[UserListResponse]:
        return [
            to_list_response(item.user_list, item.comic_count)
            for item in await self.list_repo.list_for_user(user_id, list_type)
        ]

    async def get_list_comics(self, user_id: int, list_id: int) -> UserListComicsResponse:
        user_list = await self._owned(user_id, list_id)
        rows = await self.comic_repo.in_user_list(list_id)
        return UserListComicsResponse(
            list_info=to_list_response(user_list, len(rows)),
            comics=await self.aggregator.map_rows(rows),
        )

    async def add_comic(self, user_id: int, list_id: int, comic_id: int) -> None:
        await self._owned(user_id, list_id)
        if not await self.comic_repo.exists(comic_id):
            raise ComicNotFoundError(comic_id)
        await self.list_repo.add_comic(list_id, comic_id)

    async def remove_comic(self, user_id: int, list_id: int, comic_id: int) -> None:
        await self._owned(user_id, list_id)
        if not await self.list_repo.remove_comic(list_id, comic_id):
            raise NotFoundError("Comic in list", comic_id)

    async def update_list(self, user_id: int, list_id: int, data: UserListUpdate) -> UserListResponse:
        user_list = await self._owned(user_id, list_id)
        new_name = data.list_name or user_list.list_name
        new_type = data.list_type or user_list.list_type
        if await self.list_repo.name_taken(user_id, new_name, new_type, exclude_id=list_id):
            raise DuplicateResourceError(DUPLICATE_LIST_MESSAGE)
        updated = await self.list_repo.update(list_id, list_name=new_name, list_type=new_type)
        return to_list_response(updated, await self.list_repo.count_comics(list_id))

    async def delete_list(self, user_id: int, list_id: int) -> None:
        await self._owned(user_id, list_id)
        await self.list_repo.delete(list_id)
        logger.info("User list deleted", list_id=list_id, user_id=user_id)
