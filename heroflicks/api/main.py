"""
HeroFlicks API Application Entry Point

    uvicorn heroflicks.api.main:app --host 0.0.0.0 --port 3007 --reload

Request path:

    request_context (request_id, access log)
      → CORS
        → exception handlers (HeroFlicksException / validation / 500)
          → routers: health, comics, tags, likes, pendientes, comments, lists

Shared objects live on app.state:

    database       Database (engine + session factory)
    file_storage   LocalFileStorage for uploaded PDFs and covers

Tests build their own application with create_application(database, storage)
so that nothing touches the configured DATABASE_URL or UPLOAD_DIR.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from heroflicks.api.middleware import setup_exception_handlers, setup_request_logging
from heroflicks.api.routes import register_routes
from heroflicks.config.settings import settings
from heroflicks.shared.adapters.file_storage import LocalFileStorage
from heroflicks.shared.core.logging import logger
from heroflicks.shared.db.session import Database


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Open the database on startup and dispose of it on shutdown.

    With DATABASE_AUTO_CREATE set, missing tables are created from the
    models instead of waiting for `alembic upgrade head`.
    """
    logger.info(
        "Starting HeroFlicks API",
        version=settings.APP_VERSION,
        environment=settings.APP_ENV,
        upload_dir=settings.UPLOAD_DIR,
    )

    if app.state.database is None:
        app.state.database = Database(settings.DATABASE_URL)
    database: Database = app.state.database

    await database.init()
    if settings.DATABASE_AUTO_CREATE:
        await database.create_schema()

    logger.info("HeroFlicks API ready", port=settings.PORT)

    yield

    await database.close()
    logger.info("HeroFlicks API stopped")


def create_application(
    database: Optional[Database] = None,
    storage: Optional[LocalFileStorage] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        database: Database to serve from; built from DATABASE_URL at startup when omitted
        storage: Upload storage; defaults to UPLOAD_DIR capped at UPLOAD_MAX_BYTES per file
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description="Comic catalog: explore rankings, recommendations, engagement and uploads",
        version=settings.APP_VERSION,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        lifespan=lifespan,
    )

    app.state.database = database
    app.state.file_storage = storage or LocalFileStorage(
        settings.UPLOAD_DIR, settings.UPLOAD_MAX_BYTES
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    # Added last so it wraps CORS and sees every response
    setup_request_logging(app)

    setup_exception_handlers(app)
    register_routes(app)

    return app


app = create_application()


def run() -> None:
    """Serve on settings.HOST:settings.PORT (the heroflicks-api console script)."""
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
