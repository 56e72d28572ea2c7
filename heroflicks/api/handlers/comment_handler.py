"""
Comment Handler

Comments and ratings. Mounted under /api.

Reading comments and the average rating is public; writing requires a
token, and only the author may edit or delete a comment.
"""

from fastapi import APIRouter, Depends, status

from heroflicks.api.dependencies import CurrentUser, get_pagination
from heroflicks.api.dependencies.services import get_comment_service
from heroflicks.shared.schemas.comment import (
    CommentCreatedResponse,
    CommentPageResponse,
    CommentWrite,
    RatingResponse,
)
from heroflicks.shared.schemas.common import MessageResponse, PaginationParams
from heroflicks.shared.services.comment_service import CommentService


router = APIRouter()


@router.get("/comics/{comic_id}/comments", response_model=CommentPageResponse)
async def list_comments(
    comic_id: int,
    pagination: PaginationParams = Depends(get_pagination),
    service: CommentService = Depends(get_comment_service),
):
    """Newest first, ?page=&limit=."""
    return await service.list_comments(comic_id, pagination)


@router.post(
    "/comics/{comic_id}/comments",
    response_model=CommentCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(
    comic_id: int,
    data: CommentWrite,
    current_user: CurrentUser,
    service: CommentService = Depends(get_comment_service),
):
    comment = await service.add_comment(current_user.id, comic_id, data)
    return CommentCreatedResponse(message="Comment added successfully", comment=comment)


@router.get("/comics/{comic_id}/rating", response_model=RatingResponse)
async def comic_rating(
    comic_id: int,
    service: CommentService = Depends(get_comment_service),
):
    return await service.average_rating(comic_id)


@router.put("/comments/{comment_id}", response_model=MessageResponse)
async def update_comment(
    comment_id: int,
    data: CommentWrite,
    current_user: CurrentUser,
    service: CommentService = Depends(get_comment_service),
):
    await service.update_comment(current_user.id, comment_id, data)
    return MessageResponse(message="Comment updated successfully")


@router.delete("/comments/{comment_id}", response_model=MessageResponse)
async def delete_comment(
    comment_id: int,
    current_user: CurrentUser,
    service: CommentService = Depends(get_comment_service),
):
    await service.delete_comment(current_user.id, comment_id)
    return MessageResponse(message="Comment deleted successfully")
