"""
User List Handler

Custom lists of the authenticated user. Every route requires a token; a list
that belongs to someone else answers 404.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from heroflicks.api.dependencies import CurrentUser
from heroflicks.api.dependencies.services import get_list_service
from heroflicks.shared.models.enums import ListType
from heroflicks.shared.schemas.common import MessageResponse
from heroflicks.shared.schemas.user_list import (
    ListComicAdd,
    UserListComicsResponse,
    UserListCreate,
    UserListEnvelope,
    UserListsResponse,
    UserListUpdate,
)
from heroflicks.shared.services.list_service import UserListService


router = APIRouter()


@router.post("", response_model=UserListEnvelope, status_code=status.HTTP_201_CREATED)
async def create_list(
    data: UserListCreate,
    current_user: CurrentUser,
    service: UserListService = Depends(get_list_service),
):
    user_list = await service.create_list(current_user.id, data)
    return UserListEnvelope(message="Lista creada exitosamente.", list=user_list)


@router.get("", response_model=UserListsResponse)
async def get_lists(
    current_user: CurrentUser,
    list_type: Optional[ListType] = Query(None, alias="type"),
    service: UserListService = Depends(get_list_service),
):
    """Own lists by name, with their comic counts."""
    return UserListsResponse(lists=await service.get_lists(current_user.id, list_type))


@router.get("/{list_id}/comics", response_model=UserListComicsResponse)
async def get_list_comics(
    list_id: int,
    current_user: CurrentUser,
    service: UserListService = Depends(get_list_service),
):
    return await service.get_list_comics(current_user.id, list_id)


@router.post("/{list_id}/comics", response_model=MessageResponse)
async def add_comic_to_list(
    list_id: int,
    data: ListComicAdd,
    current_user: CurrentUser,
    service: UserListService = Depends(get_list_service),
):
    await service.add_comic(current_user.id, list_id, data.comic_id)
    return MessageResponse(message="Cómic añadido a la lista.")


@router.delete("/{list_id}/comics/{comic_id}", response_model=MessageResponse)
async def remove_comic_from_list(
    list_id: int,
    comic_id: int,
    current_user: CurrentUser,
    service: UserListService = Depends(get_list_service),
):
    await service.remove_comic(current_user.id, list_id, comic_id)
    return MessageResponse(message="Cómic eliminado de la lista.")


@router.put("/{list_id}", response_model=UserListEnvelope)
async def update_list(
    list_id: int,
    data: UserListUpdate,
    current_user: CurrentUser,
    service: UserListService = Depends(get_list_service),
):
    user_list = await service.update_list(current_user.id, list_id, data)
    return UserListEnvelope(message="Lista actualizada exitosamente.", list=user_list)


@router.delete("/{list_id}", response_model=MessageResponse)
async def delete_list(
    list_id: int,
    current_user: CurrentUser,
    service: UserListService = Depends(get_list_service),
):
    await service.delete_list(current_user.id, list_id)
    return MessageResponse(message="Lista eliminada exitosamente.")
