"""
Logging Configuration

structlog on top of the standard logging module. Every HeroFlicks log line is
an event name plus key/value context:

    logger.info("Comic liked", user_id=3, comic_id=42)

APP_ENV=development renders colored console lines; any other environment
emits one JSON object per line. Values bound with log_context() (the request
middleware binds request_id, method and path) are merged into every line
logged while that request is handled.
"""

import logging
import sys
from typing import Any, Optional

import structlog
from structlog.typing import Processor

from heroflicks.config.settings import settings


def setup_logging() -> None:
    """Route stdlib logging to stdout and configure the structlog pipeline."""
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.LOG_LEVEL.upper()),
    )

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]
    if settings.is_development:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """Named logger, e.g. get_logger("heroflicks.upload")."""
    return structlog.get_logger(name)


def log_context(**kwargs: Any) -> None:
    """Bind values to every line logged from the current context."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_log_context() -> None:
    structlog.contextvars.clear_contextvars()


setup_logging()

logger = get_logger("heroflicks")
