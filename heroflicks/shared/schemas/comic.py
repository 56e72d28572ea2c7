"""
Comic Schemas

Request bodies for comic CRUD and the canonical comic representation.

Canonical Comic JSON:
=====================
    {
        "id": "42",
        "title": "Amazing Spider-Man #1",
        "editorial": "Marvel",
        "pdfPath": "public/comics/asm1-1760869800000-123456789.pdf",
        "isCollection": false,
        "family": "Spider-Man",
        "imageUrl": "public/comics/default_cover.jpg",
        "createdAt": "2026-10-19T10:30:00.000Z",
        "likesCount": 3,
        "commentsCount": 1,
        "tags": [{"id": 1, "name": "Acción"}]
    }

map_comic() is the only place that builds this shape; every endpoint that
returns comics goes through it.
"""

from datetime import datetime, timezone
from typing import Any, Optional, Sequence

from pydantic import Field, field_validator

from heroflicks.shared.models.enums import Editorial
from heroflicks.shared.schemas.common import CamelSchema, SuccessResponse


# ═══════════════════════════════════════════════════════════════════════════════
# RESPONSE SHAPES
# ═══════════════════════════════════════════════════════════════════════════════


class TagInfo(CamelSchema):
    """Tag as embedded in comic responses."""

    id: int
    name: str


class ComicResponse(CamelSchema):
    """Canonical comic representation."""

    id: str
    title: str
    editorial: str
    pdf_path: str
    is_collection: bool
    family: str
    image_url: Optional[str] = None
    created_at: Optional[str] = None
    likes_count: int = 0
    comments_count: int = 0
    tags: list[TagInfo] = Field(default_factory=list)


class ComicListResponse(SuccessResponse):
    comics: list[ComicResponse] = Field(default_factory=list)
    message: Optional[str] = None


class RecommendationResponse(ComicListResponse):
    """Comics for you, plus the tags that drove the recommendation."""

    # Snake case on the wire, as mobile clients already read it
    recommended_based_on_tags: list[TagInfo] = Field(
        default_factory=list, serialization_alias="recommended_based_on_tags"
    )


class ComicDetailResponse(SuccessResponse):
    comic: ComicResponse
    message: Optional[str] = None


class LikedTagsResponse(SuccessResponse):
    tags: list[TagInfo] = Field(default_factory=list)


# ═══════════════════════════════════════════════════════════════════════════════
# REQUEST BODIES
# ═══════════════════════════════════════════════════════════════════════════════


class ComicCreate(CamelSchema):
    """JSON body for POST /api/comics (metadata only, files already placed)."""

    title: str = Field(min_length=1, max_length=255)
    editorial: Editorial
    pdf_path: str = Field(min_length=1, max_length=255)
    is_collection: bool
    family: str = Field(min_length=1, max_length=100)
    image_url: Optional[str] = Field(default=None, max_length=255)

    @field_validator("title", "family", "pdf_path")
    @classmethod
    def strip_text(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value


class ComicUpdate(CamelSchema):
    """JSON body for PUT /api/comics/{id}. Omitted fields are left unchanged."""

    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    editorial: Optional[Editorial] = None
    pdf_path: Optional[str] = Field(default=None, min_length=1, max_length=255)
    is_collection: Optional[bool] = None
    family: Optional[str] = Field(default=None, min_length=1, max_length=100)
    image_url: Optional[str] = Field(default=None, max_length=255)

    @field_validator("title", "family", "pdf_path")
    @classmethod
    def strip_text(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value


# ═══════════════════════════════════════════════════════════════════════════════
# MAPPER
# ═══════════════════════════════════════════════════════════════════════════════


def _as_count(value: Any) -> int:
    """Integer count; missing or non-numeric input counts as zero."""
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    """ISO-8601 in UTC with millisecond precision. Naive values are taken as UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def map_comic(
    comic: Any,
    tags: Optional[Sequence[Any]] = None,
    likes_count: Any = 0,
    comments_count: Any = 0,
) -> ComicResponse:
    """
    Build the canonical comic representation.

    Args:
        comic: Comic row (ORM instance or anything with the same attributes)
        tags: Tags as TagInfo, ORM Tag or {"id", "name"} mappings, used verbatim in order
        likes_count: Derived like count
        comments_count: Derived comment count

    Returns:
        ComicResponse
    """
    editorial = comic.editorial
    return ComicResponse(
        id=str(comic.id),
        title=comic.title,
        editorial=getattr(editorial, "value", editorial),
        pdf_path=comic.pdf_path,
        is_collection=bool(comic.is_collection),
        family=comic.family,
        image_url=comic.cover_image,
        created_at=format_timestamp(comic.created_at),
        likes_count=_as_count(likes_count),
        comments_count=_as_count(comments_count),
        tags=[TagInfo.model_validate(tag) for tag in (tags or [])],
    )
