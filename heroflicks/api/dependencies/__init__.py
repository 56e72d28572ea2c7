"""
API Dependencies

FastAPI dependencies for injection into route handlers.

Dependencies:
=============
- Database: get_db(), DbSession
- Authentication: get_current_user(), CurrentUser, OptionalUser
- Pagination: get_pagination()
- Services: get_*_service() functions (see services.py)

Type aliases keep route signatures short:

    async def handler(db: DbSession, user: CurrentUser):
        ...
"""

from heroflicks.api.dependencies.database import (
    get_database,
    get_db,
    DbSession,
)
from heroflicks.api.dependencies.auth import (
    get_current_user,
    get_current_user_token,
    get_optional_user,
    CurrentUser,
    OptionalUser,
)
from heroflicks.api.dependencies.pagination import get_pagination

__all__ = [
    # Database
    "get_database",
    "get_db",
    "DbSession",
    # Authentication
    "get_current_user",
    "get_current_user_token",
    "get_optional_user",
    "CurrentUser",
    "OptionalUser",
    # Pagination
    "get_pagination",
]
