"""
API Middleware

Components:
===========
- error_handler: Exception → JSON error body mapping
- request_context: Per-request log context (request_id) and access log line

Usage:
======
    from heroflicks.api.middleware import setup_exception_handlers, setup_request_logging

    app = FastAPI()
    setup_request_logging(app)
    setup_exception_handlers(app)
"""

from heroflicks.api.middleware.error_handler import setup_exception_handlers
from heroflicks.api.middleware.request_context import setup_request_logging

__all__ = [
    "setup_exception_handlers",
    "setup_request_logging",
]
