"""
Core Module

Provides core functionality shared across the application:
- Structured logging
- Custom exceptions

Usage:
======
    from heroflicks.shared.core.logging import logger, get_logger
    from heroflicks.shared.core.exceptions import HeroFlicksException, ComicNotFoundError

    logger.info("Comic liked", user_id=user_id, comic_id=comic_id)
"""

from heroflicks.shared.core.logging import (
    logger,
    get_logger,
    log_context,
    clear_log_context,
)
from heroflicks.shared.core.exceptions import (
    HeroFlicksException,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ComicNotFoundError,
    TagNotFoundError,
    CommentNotFoundError,
    UserListNotFoundError,
    ValidationError,
    MissingFieldsError,
    MissingFileError,
    InvalidFileTypeError,
    FileTooLargeError,
    ConflictError,
    DuplicateResourceError,
    UploadFailedError,
    PostCommitReadError,
)

__all__ = [
    # Logging
    "logger",
    "get_logger",
    "log_context",
    "clear_log_context",
    # Exceptions
    "HeroFlicksException",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ComicNotFoundError",
    "TagNotFoundError",
    "CommentNotFoundError",
    "UserListNotFoundError",
    "ValidationError",
    "MissingFieldsError",
    "MissingFileError",
    "InvalidFileTypeError",
    "FileTooLargeError",
    "ConflictError",
    "DuplicateResourceError",
    "UploadFailedError",
    "PostCommitReadError",
]
