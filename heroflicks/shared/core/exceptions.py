"""
Custom Exceptions

Application-specific exceptions with HTTP status codes and error codes.

Exception Hierarchy:
====================
    HeroFlicksException (base)
       │
       ├── AuthenticationError (401)      ← Missing/invalid bearer token, unknown user
       ├── AuthorizationError (403)       ← Acting on another user's comment
       ├── NotFoundError (404)            ← Resource not found
       │      ├── ComicNotFoundError
       │      ├── TagNotFoundError
       │      ├── CommentNotFoundError
       │      └── UserListNotFoundError
       ├── ValidationError (400)          ← Invalid input data
       │      ├── MissingFieldsError      ← Upload without required metadata
       │      ├── MissingFileError        ← Upload without the primary PDF
       │      └── InvalidFileTypeError    ← Neither PDF nor image
       ├── FileTooLargeError (413)
       ├── ConflictError (409)            ← Unique name already taken
       ├── UploadFailedError (500)        ← Transaction rolled back
       └── PostCommitReadError (500)      ← Data persisted, response not hydrated

Usage:
======
    from heroflicks.shared.core.exceptions import ComicNotFoundError

    raise ComicNotFoundError(comic_id)
    # {"success": false, "message": "Comic with id '7' not found", "error": "NOT_FOUND"}

Exception Handling:
===================
    Exceptions are caught by the error handler middleware and converted to JSON:
    {
        "success": false,
        "message": "Comic with id '7' not found",
        "error": "NOT_FOUND",
        "details": {...}          ← only when there are details
    }
"""

from typing import Any, Optional


class HeroFlicksException(Exception):
    """
    Base exception for all HeroFlicks application errors.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (default 500)
        error_code: Machine-readable error code
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.error_code = error_code or "INTERNAL_ERROR"
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to dictionary for API response.

        Returns:
            Dictionary matching the API error body
        """
        body: dict[str, Any] = {
            "success": False,
            "message": self.message,
            "error": self.error_code,
        }
        if self.details:
            body["details"] = self.details
        return body


# ═══════════════════════════════════════════════════════════════════════════════
# AUTHENTICATION & AUTHORIZATION ERRORS (401, 403)
# ═══════════════════════════════════════════════════════════════════════════════


class AuthenticationError(HeroFlicksException):
    """Authentication failed error (401 Unauthorized)."""

    def __init__(
        self,
        message: str = "Authentication required",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=401,
            error_code="AUTHENTICATION_ERROR",
            details=details,
        )


class AuthorizationError(HeroFlicksException):
    """
    Authorization failed error (403 Forbidden).

    Raised when the user is authenticated but the resource belongs to someone else.
    """

    def __init__(
        self,
        message: str = "Access denied",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=403,
            error_code="AUTHORIZATION_ERROR",
            details=details,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# NOT FOUND ERRORS (404)
# ═══════════════════════════════════════════════════════════════════════════════


class NotFoundError(HeroFlicksException):
    """
    Resource not found error (404 Not Found).

    Example:
        raise NotFoundError("Comic", "7")
        # Message: "Comic with id '7' not found"
    """

    def __init__(
        self,
        resource: str,
        resource_id: Optional[Any] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        message = f"{resource} not found"
        if resource_id is not None:
            message = f"{resource} with id '{resource_id}' not found"
        super().__init__(
            message=message,
            status_code=404,
            error_code="NOT_FOUND",
            details=details,
        )


class ComicNotFoundError(NotFoundError):
    """Comic not found error."""

    def __init__(self, comic_id: Any) -> None:
        super().__init__(resource="Comic", resource_id=comic_id)


class TagNotFoundError(NotFoundError):
    """Tag not found error."""

    def __init__(self, tag_id: Any) -> None:
        super().__init__(resource="Tag", resource_id=tag_id)


class CommentNotFoundError(NotFoundError):
    """Comment not found error."""

    def __init__(self, comment_id: Any) -> None:
        super().__init__(resource="Comment", resource_id=comment_id)


class UserListNotFoundError(NotFoundError):
    """List not found, or it belongs to another user."""

    def __init__(self, list_id: Any) -> None:
        super().__init__(resource="List", resource_id=list_id)


# ═══════════════════════════════════════════════════════════════════════════════
# VALIDATION & CONFLICT ERRORS (400, 409, 413)
# ═══════════════════════════════════════════════════════════════════════════════


class ValidationError(HeroFlicksException):
    """
    Validation error (400 Bad Request).

    Raised when input data fails validation.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        details: Optional[dict[str, Any]] = None,
        error_code: str = "VALIDATION_ERROR",
    ) -> None:
        super().__init__(
            message=message,
            status_code=400,
            error_code=error_code,
            details=details,
        )


class MissingFieldsError(ValidationError):
    """One or more required fields were not provided."""

    def __init__(self, fields: list[str]) -> None:
        super().__init__(
            message=f"Missing required fields: {', '.join(fields)}",
            details={"fields": fields},
            error_code="MISSING_FIELDS",
        )


class MissingFileError(ValidationError):
    """A required file part was not attached."""

    def __init__(self, field: str) -> None:
        super().__init__(
            message=f"File '{field}' is required",
            details={"field": field},
            error_code="MISSING_FILE",
        )


class InvalidFileTypeError(ValidationError):
    """Uploaded file is neither a PDF nor an image."""

    def __init__(self, content_type: Optional[str]) -> None:
        super().__init__(
            message="Formato de archivo no permitido. Solo se aceptan PDFs e imágenes.",
            details={"content_type": content_type},
            error_code="INVALID_FILE_TYPE",
        )


class FileTooLargeError(HeroFlicksException):
    """Uploaded file exceeds the configured size limit (413)."""

    def __init__(self, max_bytes: int) -> None:
        super().__init__(
            message=f"File exceeds the maximum size of {max_bytes} bytes",
            status_code=413,
            error_code="FILE_TOO_LARGE",
            details={"max_bytes": max_bytes},
        )


class ConflictError(HeroFlicksException):
    """
    Resource conflict error (409 Conflict).

    Example:
        raise ConflictError("Tag name already exists")
    """

    def __init__(
        self,
        message: str = "Resource conflict",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=409,
            error_code="CONFLICT",
            details=details,
        )


class DuplicateResourceError(ConflictError):
    """Specific case of conflict when trying to create a duplicate resource."""

    def __init__(
        self,
        message: str = "Resource already exists",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message=message, details=details)


# ═══════════════════════════════════════════════════════════════════════════════
# UPLOAD WORKFLOW ERRORS (500)
# ═══════════════════════════════════════════════════════════════════════════════


class UploadFailedError(HeroFlicksException):
    """
    The upload transaction failed and was rolled back.

    Nothing from the upload is visible in the store afterwards.
    """

    def __init__(self, message: str = "Failed to upload comic") -> None:
        super().__init__(
            message=message,
            status_code=500,
            error_code="UPLOAD_FAILED",
        )


class PostCommitReadError(HeroFlicksException):
    """
    The upload committed but re-reading the comic failed.

    The comic is persisted; only the response could not be built.
    """

    def __init__(self, comic_id: int) -> None:
        super().__init__(
            message="Comic was saved but could not be loaded",
            status_code=500,
            error_code="POST_COMMIT_READ_FAILED",
            details={"comic_id": str(comic_id)},
        )
