"""
API Handlers

Route handlers for the HeroFlicks API.

Handlers follow the pattern:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

All business logic is delegated to the service layer; errors are raised as
HeroFlicksException subclasses and rendered by the error handler.
"""

from heroflicks.api.handlers import (
    comic_handler,
    comment_handler,
    health_handler,
    like_handler,
    list_handler,
    pending_handler,
    tag_handler,
)

__all__ = [
    "comic_handler",
    "comment_handler",
    "health_handler",
    "like_handler",
    "list_handler",
    "pending_handler",
    "tag_handler",
]
