"""
Pending Handler

The user's "pendientes": comics saved to read later. Mounted under /api.
"""

from fastapi import APIRouter, Depends

from heroflicks.api.dependencies import CurrentUser
from heroflicks.api.dependencies.services import get_engagement_service
from heroflicks.shared.schemas.comic import ComicListResponse
from heroflicks.shared.schemas.comment import PendingStatusResponse
from heroflicks.shared.schemas.common import MessageResponse
from heroflicks.shared.services.engagement_service import EngagementService


router = APIRouter()


@router.post("/comics/{comic_id}/pendientes", response_model=MessageResponse)
async def add_pending(
    comic_id: int,
    current_user: CurrentUser,
    service: EngagementService = Depends(get_engagement_service),
):
    await service.add_pending(current_user.id, comic_id)
    return MessageResponse(message="Comic added to pendientes")


@router.delete("/comics/{comic_id}/pendientes", response_model=MessageResponse)
async def remove_pending(
    comic_id: int,
    current_user: CurrentUser,
    service: EngagementService = Depends(get_engagement_service),
):
    await service.remove_pending(current_user.id, comic_id)
    return MessageResponse(message="Comic removed from pendientes")


@router.get("/comics/{comic_id}/pendiente-status", response_model=PendingStatusResponse)
async def pending_status(
    comic_id: int,
    current_user: CurrentUser,
    service: EngagementService = Depends(get_engagement_service),
):
    return PendingStatusResponse(pendiente=await service.is_pending(current_user.id, comic_id))


@router.get("/users/me/pendientes", response_model=ComicListResponse)
async def my_pending_comics(
    current_user: CurrentUser,
    service: EngagementService = Depends(get_engagement_service),
):
    return ComicListResponse(comics=await service.pending_comics(current_user.id))
