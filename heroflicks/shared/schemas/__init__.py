"""
Pydantic Schemas

Request and response models for the API.

Schema Categories:
==================
- common: Base schemas, pagination, success/error envelopes
- comic: Canonical comic shape, map_comic(), comic request bodies
- tag: Tag bodies and envelopes
- comment: Comments, ratings, like/pending status payloads
- user_list: Custom user lists

Usage:
======
    from heroflicks.shared.schemas.comic import ComicListResponse, map_comic
    from heroflicks.shared.schemas.common import MessageResponse
"""

from heroflicks.shared.schemas.common import (
    BaseSchema,
    CamelSchema,
    PaginationParams,
    SuccessResponse,
    MessageResponse,
    ErrorResponse,
    HealthResponse,
    total_pages,
)
from heroflicks.shared.schemas.comic import (
    TagInfo,
    ComicResponse,
    ComicListResponse,
    RecommendationResponse,
    ComicDetailResponse,
    LikedTagsResponse,
    ComicCreate,
    ComicUpdate,
    format_timestamp,
    map_comic,
)
from heroflicks.shared.schemas.tag import TagWrite, TagListResponse, TagResponse
from heroflicks.shared.schemas.comment import (
    CommentWrite,
    CommentResponse,
    CommentCreatedResponse,
    CommentPageResponse,
    RatingResponse,
    LikeStatusResponse,
    LikeCountResponse,
    PendingStatusResponse,
)
from heroflicks.shared.schemas.user_list import (
    UserListCreate,
    UserListUpdate,
    ListComicAdd,
    UserListResponse,
    UserListEnvelope,
    UserListsResponse,
    UserListComicsResponse,
)

__all__ = [
    # Common
    "BaseSchema",
    "CamelSchema",
    "PaginationParams",
    "SuccessResponse",
    "MessageResponse",
    "ErrorResponse",
    "HealthResponse",
    "total_pages",
    # Comic
    "TagInfo",
    "ComicResponse",
    "ComicListResponse",
    "RecommendationResponse",
    "ComicDetailResponse",
    "LikedTagsResponse",
    "ComicCreate",
    "ComicUpdate",
    "format_timestamp",
    "map_comic",
    # Tag
    "TagWrite",
    "TagListResponse",
    "TagResponse",
    # Comment / engagement
    "CommentWrite",
    "CommentResponse",
    "CommentCreatedResponse",
    "CommentPageResponse",
    "RatingResponse",
    "LikeStatusResponse",
    "LikeCountResponse",
    "PendingStatusResponse",
    # User lists
    "UserListCreate",
    "UserListUpdate",
    "ListComicAdd",
    "UserListResponse",
    "UserListEnvelope",
    "UserListsResponse",
    "UserListComicsResponse",
]
