"""
Shared fixtures.

Each test gets its own SQLite file (aiosqlite, foreign keys on), an explicitly
constructed Database, an upload directory under tmp_path and an httpx client
talking to the ASGI app in-process.
"""

from datetime import datetime, timedelta, timezone
from typing import Iterable, Optional

import pytest
from httpx import ASGITransport, AsyncClient

from heroflicks.api.main import create_application
from heroflicks.config.settings import settings
from heroflicks.shared.adapters.file_storage import LocalFileStorage
from heroflicks.shared.db.session import Database
from heroflicks.shared.models import Comic, ComicTag, Comment, Editorial, Like, Tag, User
from heroflicks.shared.utils.security import SecurityUtils


DEFAULT_TAGS = (
    "Superhéroes",
    "Marvel",
    "DC",
    "Acción",
    "Aventura",
    "Ciencia Ficción",
    "Drama",
    "Misterio",
    "Individual",
    "Equipo",
)

BASE_TIME = datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

TEST_MAX_BYTES = 1024 * 1024


# ═══════════════════════════════════════════════════════════════════════════════
# INFRASTRUCTURE
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.fixture
async def database(tmp_path):
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'heroflicks.db'}", echo=False)
    await db.create_schema()
    yield db
    await db.close()


@pytest.fixture
def upload_dir(tmp_path):
    return tmp_path / "comics"


@pytest.fixture
def storage(upload_dir):
    return LocalFileStorage(str(upload_dir), max_bytes=TEST_MAX_BYTES)


@pytest.fixture
def app(database, storage):
    return create_application(database=database, storage=storage)


@pytest.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


# ═══════════════════════════════════════════════════════════════════════════════
# SEED HELPERS
# ═══════════════════════════════════════════════════════════════════════════════


def auth_headers(user: User) -> dict[str, str]:
    token = SecurityUtils.create_access_token(
        data={"user_id": user.id, "username": user.username},
        secret_key=settings.SECRET_KEY,
    )
    return {"Authorization": f"Bearer {token}"}


async def add_user(database: Database, username: str) -> User:
    async with database.session() as session:
        user = User(username=username, email=f"{username}@example.com", password="x")
        session.add(user)
        await session.commit()
        return user


async def add_tags(database: Database, names: Iterable[str]) -> list[Tag]:
    async with database.session() as session:
        tags = [Tag(name=name) for name in names]
        session.add_all(tags)
        await session.commit()
        return tags


async def add_comic(
    database: Database,
    title: str,
    *,
    editorial: Editorial = Editorial.MARVEL,
    family: str = "Familia",
    tag_ids: Iterable[int] = (),
    created_at: Optional[datetime] = None,
    pdf_path: Optional[str] = None,
) -> Comic:
    async with database.session() as session:
        comic = Comic(
            title=title,
            editorial=editorial,
            family=family,
            is_collection=False,
            pdf_path=pdf_path or f"public/comics/{title}.pdf",
            cover_image="public/comics/default_cover.jpg",
            created_at=created_at or BASE_TIME,
        )
        session.add(comic)
        await session.flush()
        session.add_all(ComicTag(comic_id=comic.id, tag_id=tag_id) for tag_id in tag_ids)
        await session.commit()
        return comic


async def add_likes(database: Database, user: User, comics: Iterable[Comic]) -> None:
    async with database.session() as session:
        session.add_all(Like(user_id=user.id, comic_id=comic.id) for comic in comics)
        await session.commit()


async def add_comment(
    database: Database,
    user: User,
    comic: Comic,
    text: str = "Buen cómic",
    rating: Optional[int] = None,
    created_at: Optional[datetime] = None,
) -> Comment:
    async with database.session() as session:
        comment = Comment(
            user_id=user.id,
            comic_id=comic.id,
            text=text,
            rating=rating,
            created_at=created_at or BASE_TIME,
        )
        session.add(comment)
        await session.commit()
        return comment


def minutes(n: int) -> datetime:
    return BASE_TIME + timedelta(minutes=n)


# ═══════════════════════════════════════════════════════════════════════════════
# SEED FIXTURES
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.fixture
async def tags(database):
    """The ten default tags; ids 1..10 in DEFAULT_TAGS order."""
    created = await add_tags(database, DEFAULT_TAGS)
    return {tag.name: tag for tag in created}


@pytest.fixture
async def alice(database):
    return await add_user(database, "alice")


@pytest.fixture
async def bob(database):
    return await add_user(database, "bob")
