"""
Common Schemas

Shared schemas used across the application for consistent API responses.

Every body carries a success flag:

    {"success": true,  ...payload..., "message": "..."}
    {"success": false, "message": "...", "error": "NOT_FOUND", "details": {...}}

Schema Types:
=============
- BaseSchema: Base with common config (from_attributes, populate_by_name)
- CamelSchema: BaseSchema that serializes field names in camelCase
- Pagination: Query parameters and page metadata
- Standard Responses: SuccessResponse, MessageResponse, ErrorResponse, HealthResponse

Usage:
======
    from heroflicks.shared.schemas.common import CamelSchema, MessageResponse

    class LikeCountResponse(SuccessResponse):
        like_count: int  # serialized as likeCount

    return MessageResponse(message="Comic liked successfully")
"""

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """
    Base schema with common configuration.

    - from_attributes: Allow creating from ORM models
    - populate_by_name: Allow field population by name or alias
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
    )


class CamelSchema(BaseSchema):
    """Schema whose JSON field names are camelCase (pdfPath, likesCount, ...)."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# PAGINATION
# ═══════════════════════════════════════════════════════════════════════════════


class PaginationParams(BaseModel):
    """
    Pagination query parameters.

    Built by the get_pagination dependency from ?page=&limit=.
    """

    page: int = Field(default=1, ge=1, description="Page number (1-indexed)")
    limit: int = Field(default=10, ge=1, le=100, description="Items per page")

    @property
    def offset(self) -> int:
        """Calculate offset for database query."""
        return (self.page - 1) * self.limit


def total_pages(total: int, per_page: int) -> int:
    return (total + per_page - 1) // per_page if per_page > 0 else 0


# ═══════════════════════════════════════════════════════════════════════════════
# STANDARD RESPONSES
# ═══════════════════════════════════════════════════════════════════════════════


class SuccessResponse(CamelSchema):
    """Base for every successful response body."""

    success: bool = True


class MessageResponse(SuccessResponse):
    """Simple message response for success confirmations."""

    message: str


class ErrorResponse(BaseModel):
    """
    Standard error response schema.

    Example:
        {
            "success": false,
            "message": "Comic with id '7' not found",
            "error": "NOT_FOUND"
        }
    """

    success: bool = False
    message: str
    error: str = Field(description="Machine-readable error code")
    details: Optional[dict[str, Any]] = Field(
        default=None,
        description="Additional error context",
    )


# ═══════════════════════════════════════════════════════════════════════════════
# HEALTH CHECK
# ═══════════════════════════════════════════════════════════════════════════════


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = "healthy"
    service: str = "heroflicks"
    version: str = "1.0.0"
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
