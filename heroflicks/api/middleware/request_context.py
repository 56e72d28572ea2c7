"""
Request Context Middleware

Binds a request id to the log context for the lifetime of each request and
logs one "Request completed" line per request. The id is taken from an
incoming X-Request-ID header when the client sends one and is echoed back
on the response.
"""

import time
import uuid
from typing import Awaitable, Callable

from fastapi import FastAPI, Request, Response

from heroflicks.shared.core.logging import clear_log_context, log_context, logger


REQUEST_ID_HEADER = "X-Request-ID"


def setup_request_logging(app: FastAPI) -> None:
    @app.middleware("http")
    async def request_context(
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        clear_log_context()
        log_context(request_id=request_id, method=request.method, path=request.url.path)
        started = time.perf_counter()
        try:
            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = request_id
            logger.info(
                "Request completed",
                status_code=response.status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 1),
            )
            return response
        finally:
            clear_log_context()
