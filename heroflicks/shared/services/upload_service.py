"""
Upload Service

Transactional comic upload: metadata + PDF + optional cover + tag associations.

Flow:
=====
┌─────────────────────────────────────────────────────────────────────────────┐
│ 1. Validate metadata        → MissingFieldsError / ValidationError (400)    │
│ 2. Validate primary file    → MissingFileError (400)                        │
│ 3. Check media types        → InvalidFileTypeError (400)                    │
│ 4. Place files on disk      → FileTooLargeError (413)                       │
│ 5. One transaction:                                                         │
│      INSERT comic                                                           │
│      INSERT comic/tag pairs ON CONFLICT DO NOTHING                          │
│    failure → ROLLBACK, placed files deleted, UploadFailedError (500)        │
│ 6. COMMIT                                                                   │
│ 7. Re-read comic with tags and counts                                       │
│    failure → logged CRITICAL, PostCommitReadError (500), no rollback        │
└─────────────────────────────────────────────────────────────────────────────┘

Every session is opened with "async with", so it is released on all paths.
"""

from dataclasses import dataclass
from typing import Optional

from fastapi import UploadFile
from sqlalchemy.exc import SQLAlchemyError

from heroflicks.config.settings import settings
from heroflicks.shared.adapters.file_storage import LocalFileStorage, StoredFile
from heroflicks.shared.core.exceptions import (
    MissingFieldsError,
    MissingFileError,
    PostCommitReadError,
    UploadFailedError,
    ValidationError,
)
from heroflicks.shared.core.logging import get_logger
from heroflicks.shared.db.session import Database
from heroflicks.shared.models.enums import Editorial
from heroflicks.shared.repositories.comic_repository import ComicRepository
from heroflicks.shared.repositories.tag_repository import TagRepository
from heroflicks.shared.schemas.comic import ComicDetailResponse, ComicResponse
from heroflicks.shared.services.tag_aggregator import TagAggregator
from heroflicks.shared.utils.tag_ids import TagIdsInput, parse_tag_ids


logger = get_logger("heroflicks.upload")

TRUE_VALUES = {"true", "1", "yes", "on"}
FALSE_VALUES = {"false", "0", "no", "off"}


@dataclass
class UploadForm:
    """Raw multipart metadata, before validation."""

    title: Optional[str] = None
    editorial: Optional[str] = None
    is_collection: Optional[str] = None
    family: Optional[str] = None
    image_url: Optional[str] = None
    tag_ids: Optional[TagIdsInput] = None


@dataclass
class ValidatedUpload:
    title: str
    editorial: Editorial
    is_collection: bool
    family: str
    image_url: Optional[str]
    tag_ids: list[int]


def _blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _has_file(upload: Optional[UploadFile]) -> bool:
    return upload is not None and bool(upload.filename)


class UploadService:
    """
    Comic upload workflow.

    Holds the Database rather than a request session: the upload runs its own
    dedicated transaction.
    """

    def __init__(self, database: Database, storage: LocalFileStorage) -> None:
        self.database = database
        self.storage = storage

    # ═══════════════════════════════════════════════════════════════════════════
    # VALIDATION
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def validate(form: UploadForm) -> ValidatedUpload:
        """
        Check required metadata and normalize it.

        Raises:
            MissingFieldsError: title, editorial, isCollection or family missing
            ValidationError: Unknown editorial or unparseable isCollection
        """
        missing = [
            name
            for name, value in (
                ("title", form.title),
                ("editorial", form.editorial),
                ("isCollection", form.is_collection),
                ("family", form.family),
            )
            if _blank(value)
        ]
        if missing:
            raise MissingFieldsError(missing)

        try:
            editorial = Editorial(form.editorial.strip())
        except ValueError:
            raise ValidationError(
                "Editorial must be one of: " + ", ".join(e.value for e in Editorial),
                details={"field": "editorial"},
            )

        flag = form.is_collection.strip().lower()
        if flag in TRUE_VALUES:
            is_collection = True
        elif flag in FALSE_VALUES:
            is_collection = False
        else:
            raise ValidationError(
                "isCollection must be a boolean",
                details={"field": "isCollection"},
            )

        image_url = None if _blank(form.image_url) else form.image_url.strip()

        return ValidatedUpload(
            title=form.title.strip(),
            editorial=editorial,
            is_collection=is_collection,
            family=form.family.strip(),
            image_url=image_url,
            tag_ids=parse_tag_ids(form.tag_ids),
        )

    # ═══════════════════════════════════════════════════════════════════════════
    # WORKFLOW
    # ═══════════════════════════════════════════════════════════════════════════

    async def upload_comic(
        self,
        form: UploadForm,
        pdf: Optional[UploadFile],
        cover: Optional[UploadFile] = None,
        uploader_id: Optional[int] = None,
    ) -> ComicDetailResponse:
        """
        Store a new comic with its files and tags.

        Returns:
            ComicDetailResponse with the hydrated comic

        Raises:
            MissingFieldsError, MissingFileError, ValidationError,
            InvalidFileTypeError, FileTooLargeError: Client errors, nothing written
            UploadFailedError: Database failure, transaction rolled back
            PostCommitReadError: Comic saved but could not be re-read
        """
        data = self.validate(form)

        if not _has_file(pdf):
            raise MissingFileError("pdf")
        if not _has_file(cover):
            cover = None

        # Reject bad media types before anything touches the disk
        self.storage.ensure_allowed(pdf)
        if cover is not None:
            self.storage.ensure_allowed(cover)

        placed = await self._place_files(pdf, cover)
        if cover is not None:
            cover_path = placed[1].path
        else:
            cover_path = data.image_url or settings.DEFAULT_COVER_PATH

        comic_id = await self._persist(data, placed[0].path, cover_path, uploader_id, placed)

        logger.info(
            "Comic uploaded",
            comic_id=comic_id,
            uploader_id=uploader_id,
            tag_ids=data.tag_ids,
        )

        comic = await self._hydrate(comic_id)
        return ComicDetailResponse(message="Cómic subido exitosamente.", comic=comic)

    async def _place_files(
        self, pdf: UploadFile, cover: Optional[UploadFile]
    ) -> list[StoredFile]:
        placed: list[StoredFile] = []
        try:
            placed.append(await self.storage.save(pdf))
            if cover is not None:
                placed.append(await self.storage.save(cover))
        except Exception:
            await self._discard(placed)
            raise
        return placed

    async def _persist(
        self,
        data: ValidatedUpload,
        pdf_path: str,
        cover_path: str,
        uploader_id: Optional[int],
        placed: list[StoredFile],
    ) -> int:
        """Insert the comic and its tag associations in one transaction."""
        try:
            async with self.database.session() as session:
                async with session.begin():
                    fields = dict(
                        title=data.title,
                        editorial=data.editorial,
                        pdf_path=pdf_path,
                        is_collection=data.is_collection,
                        family=data.family,
                        cover_image=cover_path,
                    )
                    if uploader_id is not None:
                        fields["uploader_id"] = uploader_id
                    comic = await ComicRepository(session).create(**fields)

                    tag_repo = TagRepository(session)
                    for tag_id in data.tag_ids:
                        await tag_repo.add_to_comic(comic.id, tag_id)
                    return comic.id
        except Exception as e:
            logger.error(
                "Upload transaction rolled back",
                title=data.title,
                uploader_id=uploader_id,
                tag_ids=data.tag_ids,
                error=str(e),
                exc_info=True,
            )
            await self._discard(placed)
            if isinstance(e, SQLAlchemyError):
                raise UploadFailedError() from e
            raise

    async def _hydrate(self, comic_id: int) -> ComicResponse:
        """Re-read the committed comic. Nothing is rolled back from here on."""
        try:
            async with self.database.session() as session:
                row = await ComicRepository(session).get_with_counts(comic_id)
                if row is None:
                    raise PostCommitReadError(comic_id)
                return await TagAggregator(session).map_row(row)
        except (SQLAlchemyError, PostCommitReadError) as e:
            logger.critical(
                "Comic committed but could not be re-read",
                comic_id=comic_id,
                error=str(e),
                exc_info=True,
            )
            if isinstance(e, PostCommitReadError):
                raise
            raise PostCommitReadError(comic_id) from e

    async def _discard(self, placed: list[StoredFile]) -> None:
        for stored in placed:
            try:
                await self.storage.delete(stored.path)
            except OSError as e:
                logger.warning("Could not remove placed file", path=stored.path, error=str(e))
