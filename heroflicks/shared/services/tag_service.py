"""
Tag Service

Tag CRUD. Names are unique; deleting a tag removes its comic associations.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from heroflicks.shared.core.exceptions import DuplicateResourceError, TagNotFoundError
from heroflicks.shared.core.logging import logger
from heroflicks.shared.repositories.tag_repository import TagRepository
from heroflicks.shared.schemas.comic import TagInfo


class TagService:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.tag_repo = TagRepository(session)

    async def list_tags(self) -> list[TagInfo]:
        return [TagInfo.model_validate(tag) for tag in await self.tag_repo.list_by_name()]

    async def get_tag(self, tag_id: int) -> TagInfo:
        tag = await self.tag_repo.get(tag_id)
        if tag is None:
            raise TagNotFoundError(tag_id)
        return TagInfo.model_validate(tag)

    async def create_tag(self, name: str) -> TagInfo:
        """
        Raises:
            DuplicateResourceError: If a tag with this name exists
        """
        if await self.tag_repo.name_taken(name):
            raise DuplicateResourceError("Tag name already exists", details={"name": name})
        tag = await self.tag_repo.create(name=name)
        logger.info("Tag created", tag_id=tag.id, name=name)
        return TagInfo.model_validate(tag)

    async def update_tag(self, tag_id: int, name: str) -> TagInfo:
        if not await self.tag_repo.exists(tag_id):
            raise TagNotFoundError(tag_id)
        if await self.tag_repo.name_taken(name, exclude_id=tag_id):
            raise DuplicateResourceError("Tag name already exists", details={"name": name})
        tag = await self.tag_repo.update(tag_id, name=name)
        return TagInfo.model_validate(tag)

    async def delete_tag(self, tag_id: int) -> None:
        if not await self.tag_repo.delete(tag_id):
            raise TagNotFoundError(tag_id)
        logger.info("Tag deleted", tag_id=tag_id)
