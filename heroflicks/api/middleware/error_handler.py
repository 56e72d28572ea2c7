"""
Error Handler Middleware

Global exception handling for the API.

Every failure leaves the API in the same shape:

    {
        "success": false,
        "message": "Comic with id '7' not found",
        "error": "NOT_FOUND",
        "details": {}            ← only when there are details
    }

Exception Handling:
===================
1. HeroFlicksException subclasses → their status_code and to_dict()
2. Request / Pydantic validation errors → 400 VALIDATION_ERROR
3. Other exceptions → 500 with a generic message (details hidden)

Usage:
======
    from heroflicks.api.middleware.error_handler import setup_exception_handlers

    app = FastAPI()
    setup_exception_handlers(app)
"""

from typing import Any, Sequence

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from heroflicks.shared.core.exceptions import HeroFlicksException
from heroflicks.shared.core.logging import logger


def _error_list(errors: Sequence[Any]) -> list[dict[str, Any]]:
    # ctx may hold exception instances, which are not JSON serializable
    return [
        {
            "loc": [str(part) for part in error.get("loc", ())],
            "msg": error.get("msg"),
            "type": error.get("type"),
        }
        for error in errors
    ]


def _validation_response(errors: Sequence[Any]) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={
            "success": False,
            "message": "Request validation failed",
            "error": "VALIDATION_ERROR",
            "details": {"errors": _error_list(errors)},
        },
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Set up global exception handlers.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(HeroFlicksException)
    async def heroflicks_exception_handler(
        request: Request,
        exc: HeroFlicksException,
    ) -> JSONResponse:
        """
        Handle application exceptions.

        Client errors are logged as warnings, server errors as errors.
        """
        log = logger.error if exc.status_code >= 500 else logger.warning
        log(
            "Application error",
            error_code=exc.error_code,
            message=exc.message,
            status_code=exc.status_code,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_dict(),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Body, query or path parameters that do not match the route signature."""
        logger.warning(
            "Request validation error",
            errors=_error_list(exc.errors()),
            path=request.url.path,
        )
        return _validation_response(exc.errors())

    @app.exception_handler(ValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: ValidationError,
    ) -> JSONResponse:
        logger.warning(
            "Validation error",
            errors=_error_list(exc.errors()),
            path=request.url.path,
        )
        return _validation_response(exc.errors())

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Handle unexpected exceptions.

        Full error details are logged but not exposed to clients.
        """
        logger.error(
            "Unexpected error",
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path,
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content={
                "success": False,
                "message": "An unexpected error occurred",
                "error": "INTERNAL_ERROR",
            },
        )
