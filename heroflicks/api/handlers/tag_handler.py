"""
Tag Handler

Tag CRUD. Reads and writes are public, as in the catalog admin tooling.
"""

from fastapi import APIRouter, Depends, status

from heroflicks.api.dependencies.services import get_tag_service
from heroflicks.shared.schemas.common import MessageResponse
from heroflicks.shared.schemas.tag import TagListResponse, TagResponse, TagWrite
from heroflicks.shared.services.tag_service import TagService


router = APIRouter()


@router.get("", response_model=TagListResponse)
async def list_tags(service: TagService = Depends(get_tag_service)):
    """All tags ordered by name."""
    return TagListResponse(tags=await service.list_tags())


@router.get("/{tag_id}", response_model=TagResponse)
async def get_tag(tag_id: int, service: TagService = Depends(get_tag_service)):
    return TagResponse(tag=await service.get_tag(tag_id))


@router.post("", response_model=TagResponse, status_code=status.HTTP_201_CREATED)
async def create_tag(data: TagWrite, service: TagService = Depends(get_tag_service)):
    tag = await service.create_tag(data.name)
    return TagResponse(tag=tag, message="Tag created successfully")


@router.put("/{tag_id}", response_model=TagResponse)
async def update_tag(
    tag_id: int,
    data: TagWrite,
    service: TagService = Depends(get_tag_service),
):
    tag = await service.update_tag(tag_id, data.name)
    return TagResponse(tag=tag, message="Tag updated successfully")


@router.delete("/{tag_id}", response_model=MessageResponse)
async def delete_tag(tag_id: int, service: TagService = Depends(get_tag_service)):
    """Deleting a tag also removes it from every comic."""
    await service.delete_tag(tag_id)
    return MessageResponse(message="Tag deleted successfully")
