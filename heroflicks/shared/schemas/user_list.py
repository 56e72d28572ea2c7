"""
User List Schemas

List objects keep the snake_case keys the mobile client already reads
(list_name, list_type, comic_count); comics inside them use the canonical
comic shape.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from heroflicks.shared.models.enums import ListType
from heroflicks.shared.schemas.comic import ComicResponse
from heroflicks.shared.schemas.common import BaseSchema


class UserListCreate(BaseSchema):
    list_name: str = Field(max_length=100)
    list_type: ListType

    @field_validator("list_name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("list_name is required")
        return value


class UserListUpdate(BaseSchema):
    list_name: Optional[str] = Field(default=None, max_length=100)
    list_type: Optional[ListType] = None

    @field_validator("list_name")
    @classmethod
    def strip_name(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        value = value.strip()
        if not value:
            raise ValueError("list_name must not be blank")
        return value


class ListComicAdd(BaseSchema):
    comic_id: int


class UserListResponse(BaseSchema):
    id: int
    user_id: int
    list_name: str
    list_type: ListType
    comic_count: int = 0
    created_at: datetime
    updated_at: datetime


class UserListEnvelope(BaseSchema):
    success: bool = True
    message: Optional[str] = None
    list: UserListResponse


class UserListsResponse(BaseSchema):
    success: bool = True
    lists: list[UserListResponse] = Field(default_factory=list)


class UserListComicsResponse(BaseSchema):
    success: bool = True
    list_info: UserListResponse
    comics: list[ComicResponse] = Field(default_factory=list)
