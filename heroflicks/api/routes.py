"""
Route Registration

Centralizes all route registration for the FastAPI application.

Route Hierarchy:
================
    /health, /ready, /live      → Health check endpoints
    /api/comics                 → Catalog, explore, upload, comic tags
    /api/tags                   → Tag CRUD
    /api/comics/{id}/like...    → Likes            (+ /api/users/me/likes)
    /api/comics/{id}/pendiente… → Pending entries  (+ /api/users/me/pendientes)
    /api/comics/{id}/comments   → Comments, ratings (+ /api/comments/{id})
    /api/lists                  → Custom user lists

Usage:
======
    from heroflicks.api.routes import register_routes

    app = FastAPI()
    register_routes(app)
"""

from typing import Any

from fastapi import FastAPI

from heroflicks.api.handlers import (
    comic_handler,
    comment_handler,
    health_handler,
    like_handler,
    list_handler,
    pending_handler,
    tag_handler,
)
from heroflicks.shared.schemas.common import ErrorResponse


API_PREFIX = "/api"

# Error bodies documented in OpenAPI for every /api route
ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Validation failed"},
    401: {"model": ErrorResponse, "description": "Missing or invalid bearer token"},
    404: {"model": ErrorResponse, "description": "Resource not found"},
    500: {"model": ErrorResponse, "description": "Unexpected server error"},
}


def register_routes(app: FastAPI) -> None:
    """
    Register all API routes.

    Args:
        app: FastAPI application instance
    """
    # Health check endpoints (no prefix, root level)
    app.include_router(
        health_handler.router,
        tags=["Health"],
    )

    app.include_router(
        comic_handler.router,
        prefix=f"{API_PREFIX}/comics",
        responses=ERROR_RESPONSES,
        tags=["Comics"],
    )

    app.include_router(
        tag_handler.router,
        prefix=f"{API_PREFIX}/tags",
        responses=ERROR_RESPONSES,
        tags=["Tags"],
    )

    # Engagement routers carry their own /comics/... and /users/me/... paths
    app.include_router(
        like_handler.router,
        prefix=API_PREFIX,
        responses=ERROR_RESPONSES,
        tags=["Likes"],
    )

    app.include_router(
        pending_handler.router,
        prefix=API_PREFIX,
        responses=ERROR_RESPONSES,
        tags=["Pendientes"],
    )

    app.include_router(
        comment_handler.router,
        prefix=API_PREFIX,
        responses=ERROR_RESPONSES,
        tags=["Comments"],
    )

    app.include_router(
        list_handler.router,
        prefix=f"{API_PREFIX}/lists",
        responses=ERROR_RESPONSES,
        tags=["Lists"],
    )
