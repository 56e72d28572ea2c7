"""
Comment and Engagement Schemas

Comments with optional 1..5 ratings, plus the small status payloads of the
like and pending endpoints.
"""

from typing import Optional

from pydantic import Field, field_validator

from heroflicks.shared.schemas.common import CamelSchema, SuccessResponse


class CommentWrite(CamelSchema):
    """Body for adding or editing a comment."""

    text: str
    rating: Optional[int] = Field(default=None, ge=1, le=5)

    @field_validator("text")
    @classmethod
    def strip_text(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Comment text is required")
        return value


class CommentResponse(CamelSchema):
    id: int
    user_id: int
    comic_id: int
    username: Optional[str] = None
    text: str
    rating: Optional[int] = None
    created_at: Optional[str] = None


class CommentCreatedResponse(SuccessResponse):
    message: str
    comment: CommentResponse


class CommentPageResponse(SuccessResponse):
    comments: list[CommentResponse] = Field(default_factory=list)
    current_page: int
    total_pages: int
    total_comments: int


class RatingResponse(SuccessResponse):
    average_rating: Optional[float] = None
    rating_count: int = 0


class LikeStatusResponse(SuccessResponse):
    liked: bool


class LikeCountResponse(SuccessResponse):
    like_count: int


class PendingStatusResponse(SuccessResponse):
    pendiente: bool
