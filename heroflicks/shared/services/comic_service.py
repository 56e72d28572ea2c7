"""
Comic Service

Comic CRUD, PDF lookup and comic/tag association management.

Usage:
======
    service = ComicService(db)
    comic = await service.get_comic(42)
    await service.add_tag(42, 3)   # idempotent
"""

from pathlib import Path
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from heroflicks.shared.adapters.file_storage import LocalFileStorage
from heroflicks.shared.core.exceptions import ComicNotFoundError, NotFoundError
from heroflicks.shared.core.logging import logger
from heroflicks.shared.repositories.comic_repository import ComicRepository
from heroflicks.shared.repositories.tag_repository import TagRepository
from heroflicks.shared.schemas.comic import ComicCreate, ComicResponse, ComicUpdate
from heroflicks.shared.services.tag_aggregator import TagAggregator


class ComicService:
    """Business logic for individual comics."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.comic_repo = ComicRepository(session)
        self.tag_repo = TagRepository(session)
        self.aggregator = TagAggregator(session)

    async def get_comic(self, comic_id: int) -> ComicResponse:
        """
        Raises:
            ComicNotFoundError: If the comic does not exist
        """
        row = await self.comic_repo.get_with_counts(comic_id)
        if row is None:
            raise ComicNotFoundError(comic_id)
        return await self.aggregator.map_row(row)

    async def create_comic(self, data: ComicCreate, uploader_id: Optional[int] = None) -> ComicResponse:
        """Create a comic from metadata whose files are already in place."""
        comic = await self.comic_repo.create(
            title=data.title,
            editorial=data.editorial,
            pdf_path=data.pdf_path,
            is_collection=data.is_collection,
            family=data.family,
            cover_image=data.image_url,
            uploader_id=uploader_id,
        )
        logger.info("Comic created", comic_id=comic.id, uploader_id=uploader_id)
        return await self.get_comic(comic.id)

    async def update_comic(self, comic_id: int, data: ComicUpdate) -> ComicResponse:
        changes = data.model_dump(exclude_unset=True)
        if "image_url" in changes:
            changes["cover_image"] = changes.pop("image_url")
        comic = await self.comic_repo.update(comic_id, **changes)
        if comic is None:
            raise ComicNotFoundError(comic_id)
        logger.info("Comic updated", comic_id=comic_id, fields=sorted(changes))
        return await self.get_comic(comic_id)

    async def delete_comic(self, comic_id: int) -> None:
        if not await self.comic_repo.delete(comic_id):
            raise ComicNotFoundError(comic_id)
        logger.info("Comic deleted", comic_id=comic_id)

    async def pdf_file(self, comic_id: int) -> Path:
        """
        Path of the comic's PDF on disk.

        Raises:
            ComicNotFoundError: Unknown comic
            NotFoundError: No path recorded, or the file is gone
        """
        comic = await self.comic_repo.get(comic_id)
        if comic is None:
            raise ComicNotFoundError(comic_id)
        if not comic.pdf_path:
            raise NotFoundError("PDF path for comic", comic_id)
        path = LocalFileStorage.resolve(comic.pdf_path)
        if path is None:
            logger.warning("PDF missing on disk", comic_id=comic_id, pdf_path=comic.pdf_path)
            raise NotFoundError("PDF file for comic", comic_id)
        return path

    # ═══════════════════════════════════════════════════════════════════════════
    # TAG ASSOCIATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def add_tag(self, comic_id: int, tag_id: int) -> bool:
        """
        Ensure the comic carries the tag. Calling twice leaves one association.

        Returns:
            True if the association was created, False if it already existed

        Raises:
            NotFoundError: If the comic or the tag does not exist
        """
        if not await self.comic_repo.exists(comic_id) or not await self.tag_repo.exists(tag_id):
            raise NotFoundError("Comic or Tag")
        return await self.tag_repo.add_to_comic(comic_id, tag_id)

    async def remove_tag(self, comic_id: int, tag_id: int) -> None:
        if not await self.tag_repo.remove_from_comic(comic_id, tag_id):
            raise NotFoundError("Tag association for this comic")
