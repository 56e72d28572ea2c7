"""
Like Handler

Mounted under /api. Liking and unliking are idempotent.
"""

from fastapi import APIRouter, Depends

from heroflicks.api.dependencies import CurrentUser
from heroflicks.api.dependencies.services import get_engagement_service
from heroflicks.shared.schemas.comic import ComicListResponse
from heroflicks.shared.schemas.comment import LikeCountResponse, LikeStatusResponse
from heroflicks.shared.schemas.common import MessageResponse
from heroflicks.shared.services.engagement_service import EngagementService


router = APIRouter()


@router.post("/comics/{comic_id}/like", response_model=MessageResponse)
async def like_comic(
    comic_id: int,
    current_user: CurrentUser,
    service: EngagementService = Depends(get_engagement_service),
):
    await service.like(current_user.id, comic_id)
    return MessageResponse(message="Comic liked successfully")


@router.delete("/comics/{comic_id}/like", response_model=MessageResponse)
async def unlike_comic(
    comic_id: int,
    current_user: CurrentUser,
    service: EngagementService = Depends(get_engagement_service),
):
    await service.unlike(current_user.id, comic_id)
    return MessageResponse(message="Comic unliked successfully")


@router.get("/comics/{comic_id}/like-status", response_model=LikeStatusResponse)
async def like_status(
    comic_id: int,
    current_user: CurrentUser,
    service: EngagementService = Depends(get_engagement_service),
):
    return LikeStatusResponse(liked=await service.is_liked(current_user.id, comic_id))


@router.get("/comics/{comic_id}/likes/count", response_model=LikeCountResponse)
async def like_count(
    comic_id: int,
    service: EngagementService = Depends(get_engagement_service),
):
    """Public like count."""
    return LikeCountResponse(like_count=await service.like_count(comic_id))


@router.get("/users/me/likes", response_model=ComicListResponse)
async def my_liked_comics(
    current_user: CurrentUser,
    service: EngagementService = Depends(get_engagement_service),
):
    return ComicListResponse(comics=await service.liked_comics(current_user.id))
