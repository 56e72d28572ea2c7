"""
Comic Handler

Catalog, explore rankings, recommendations, search, upload and comic tags.

ARCHITECTURE:
=============
    Handler → Service → Repository → Model

Handlers should ONLY:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

Route order matters: the fixed paths (/most-liked, /search, /me/...) are
declared before /{comic_id}.
"""

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status
from fastapi.responses import FileResponse

from heroflicks.api.dependencies import CurrentUser, OptionalUser
from heroflicks.api.dependencies.services import (
    get_comic_service,
    get_ranking_service,
    get_recommendation_service,
    get_tag_aggregator,
    get_upload_service,
)
from heroflicks.config.settings import settings
from heroflicks.shared.schemas.comic import (
    ComicCreate,
    ComicDetailResponse,
    ComicListResponse,
    ComicUpdate,
    LikedTagsResponse,
    RecommendationResponse,
)
from heroflicks.shared.schemas.common import MessageResponse
from heroflicks.shared.services.comic_service import ComicService
from heroflicks.shared.services.ranking_service import RankingService
from heroflicks.shared.services.recommendation_service import RecommendationService
from heroflicks.shared.services.tag_aggregator import TagAggregator
from heroflicks.shared.services.upload_service import UploadForm, UploadService
from heroflicks.shared.utils.tag_ids import tag_ids_from_form


router = APIRouter()


def _limit(
    limit: int = Query(
        settings.RANKING_DEFAULT_LIMIT, ge=1, le=100, description="Maximum comics returned"
    ),
) -> int:
    return limit


# ═══════════════════════════════════════════════════════════════════════════════
# CATALOG
# ═══════════════════════════════════════════════════════════════════════════════


@router.get("", response_model=ComicListResponse)
async def list_comics(
    tag: Optional[str] = Query(None, description="Only comics carrying this tag name"),
    service: RankingService = Depends(get_ranking_service),
):
    """All comics ordered by title."""
    return await service.list_comics(tag)


@router.post(
    "",
    response_model=ComicDetailResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comic(
    data: ComicCreate,
    current_user: CurrentUser,
    service: ComicService = Depends(get_comic_service),
):
    """Register a comic whose files are already in place."""
    comic = await service.create_comic(data, uploader_id=current_user.id)
    return ComicDetailResponse(comic=comic, message="Comic created successfully")


@router.post(
    "/upload",
    response_model=ComicDetailResponse,
    status_code=status.HTTP_201_CREATED,
)
async def upload_comic(
    current_user: OptionalUser,
    title: Optional[str] = Form(None),
    editorial: Optional[str] = Form(None),
    is_collection: Optional[str] = Form(None, alias="isCollection"),
    family: Optional[str] = Form(None),
    image_url: Optional[str] = Form(None, alias="imageUrl"),
    tag_ids: Optional[list[str]] = Form(None, alias="tagIds"),
    pdf: Optional[UploadFile] = File(None),
    cover: Optional[UploadFile] = File(None),
    service: UploadService = Depends(get_upload_service),
):
    """
    Upload a comic: multipart metadata, a PDF and an optional cover image.

    tagIds may be sent once as "1,2" or repeated per id.
    """
    form = UploadForm(
        title=title,
        editorial=editorial,
        is_collection=is_collection,
        family=family,
        image_url=image_url,
        tag_ids=tag_ids_from_form(tag_ids),
    )
    return await service.upload_comic(
        form,
        pdf,
        cover,
        uploader_id=current_user.id if current_user is not None else None,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# EXPLORE
# ═══════════════════════════════════════════════════════════════════════════════


@router.get("/most-liked", response_model=ComicListResponse)
async def most_liked(
    limit: int = Depends(_limit),
    service: RankingService = Depends(get_ranking_service),
):
    return await service.most_liked(limit)


@router.get("/most-commented", response_model=ComicListResponse)
async def most_commented(
    limit: int = Depends(_limit),
    service: RankingService = Depends(get_ranking_service),
):
    return await service.most_commented(limit)


@router.get("/recently-added", response_model=ComicListResponse)
async def recently_added(
    limit: int = Depends(_limit),
    service: RankingService = Depends(get_ranking_service),
):
    return await service.recently_added(limit)


@router.get("/popular-by-tag", response_model=ComicListResponse)
async def popular_by_tag(
    tag_name: Optional[str] = Query(None, alias="tagName"),
    limit: int = Depends(_limit),
    service: RankingService = Depends(get_ranking_service),
):
    """
    Most liked comics with the named tag.

    An unknown tag is not an error: the list is empty and a message explains why.
    """
    return await service.popular_by_tag(tag_name, limit)


@router.get("/search", response_model=ComicListResponse)
async def search_comics(
    q: Optional[str] = Query(None, description="Matches title, editorial, family or tag"),
    service: RankingService = Depends(get_ranking_service),
):
    return await service.search(q)


@router.get("/for-you", response_model=RecommendationResponse)
async def comics_for_you(
    current_user: CurrentUser,
    service: RecommendationService = Depends(get_recommendation_service),
):
    """Comics sharing the two tags that appear most across the user's likes."""
    return await service.comics_for_you(current_user.id)


@router.get("/me/liked-comics-tags", response_model=LikedTagsResponse)
async def liked_comics_tags(
    current_user: CurrentUser,
    aggregator: TagAggregator = Depends(get_tag_aggregator),
):
    return LikedTagsResponse(tags=await aggregator.liked_tags(current_user.id))


# ═══════════════════════════════════════════════════════════════════════════════
# SINGLE COMIC
# ═══════════════════════════════════════════════════════════════════════════════


@router.get("/{comic_id}", response_model=ComicDetailResponse)
async def get_comic(
    comic_id: int,
    service: ComicService = Depends(get_comic_service),
):
    return ComicDetailResponse(comic=await service.get_comic(comic_id))


@router.get("/{comic_id}/pdf", response_class=FileResponse)
async def get_comic_pdf(
    comic_id: int,
    service: ComicService = Depends(get_comic_service),
):
    """Stream the stored PDF."""
    path = await service.pdf_file(comic_id)
    return FileResponse(path, media_type="application/pdf", filename=path.name)


@router.put("/{comic_id}", response_model=ComicDetailResponse)
async def update_comic(
    comic_id: int,
    data: ComicUpdate,
    current_user: CurrentUser,
    service: ComicService = Depends(get_comic_service),
):
    comic = await service.update_comic(comic_id, data)
    return ComicDetailResponse(comic=comic, message="Comic updated successfully")


@router.delete("/{comic_id}", response_model=MessageResponse)
async def delete_comic(
    comic_id: int,
    current_user: CurrentUser,
    service: ComicService = Depends(get_comic_service),
):
    await service.delete_comic(comic_id)
    return MessageResponse(message="Comic deleted successfully")


# ═══════════════════════════════════════════════════════════════════════════════
# COMIC TAGS
# ═══════════════════════════════════════════════════════════════════════════════


@router.post("/{comic_id}/tags/{tag_id}", response_model=MessageResponse)
async def add_tag_to_comic(
    comic_id: int,
    tag_id: int,
    current_user: CurrentUser,
    service: ComicService = Depends(get_comic_service),
):
    """Idempotent: adding an existing association succeeds and changes nothing."""
    created = await service.add_tag(comic_id, tag_id)
    message = "Tag added to comic" if created else "Tag already associated with comic"
    return MessageResponse(message=message)


@router.delete("/{comic_id}/tags/{tag_id}", response_model=MessageResponse)
async def remove_tag_from_comic(
    comic_id: int,
    tag_id: int,
    current_user: CurrentUser,
    service: ComicService = Depends(get_comic_service),
):
    await service.remove_tag(comic_id, tag_id)
    return MessageResponse(message="Tag removed from comic")
