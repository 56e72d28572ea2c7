"""
Database Dependency

Request-scoped sessions drawn from the Database object on app.state.

The Database is built once by create_application() / the lifespan handler;
this dependency never creates engines of its own. Each session is committed
on success, rolled back on error and always closed.

Usage:
======
    from heroflicks.api.dependencies.database import DbSession

    @router.get("/tags")
    async def list_tags(db: DbSession):
        return await TagService(db).list_tags()
"""

from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from heroflicks.shared.db.session import Database


def get_database(request: Request) -> Database:
    return request.app.state.database


async def get_db(
    database: Annotated[Database, Depends(get_database)],
) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency for database sessions.

    Yields:
        AsyncSession: Database session for the current request
    """
    async for session in database.get_db():
        yield session


# Type alias for cleaner route signatures
DbSession = Annotated[AsyncSession, Depends(get_db)]
