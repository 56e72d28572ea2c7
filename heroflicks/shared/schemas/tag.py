"""
Tag Schemas
"""

from typing import Optional

from pydantic import Field, field_validator

from heroflicks.shared.schemas.comic import TagInfo
from heroflicks.shared.schemas.common import CamelSchema, SuccessResponse


class TagWrite(CamelSchema):
    """Body for creating or renaming a tag."""

    name: str = Field(max_length=50)

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Tag name is required")
        return value


class TagListResponse(SuccessResponse):
    tags: list[TagInfo] = Field(default_factory=list)


class TagResponse(SuccessResponse):
    tag: TagInfo
    message: Optional[str] = None
