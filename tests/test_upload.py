"""Transactional comic upload: POST /api/comics/upload."""

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from heroflicks.config.settings import settings
from heroflicks.shared.models import Comic, ComicTag
from heroflicks.shared.repositories.comic_repository import ComicRepository

from conftest import TEST_MAX_BYTES, auth_headers


PDF = ("test-one.pdf", b"%PDF-1.4 fake comic", "application/pdf")
COVER = ("cover.png", b"\x89PNG fake cover", "image/png")


def form(**overrides):
    data = {
        "title": "Test One",
        "editorial": "Marvel",
        "isCollection": "false",
        "family": "TestFam",
        "tagIds": "1,2",
    }
    data.update(overrides)
    return {key: value for key, value in data.items() if value is not None}


async def comic_count(database):
    async with database.session() as session:
        return (await session.execute(select(func.count(Comic.id)))).scalar()


def placed_files(upload_dir):
    return list(upload_dir.iterdir()) if upload_dir.exists() else []


async def test_upload_happy_path(client, database, tags, alice, upload_dir):
    response = await client.post(
        "/api/comics/upload",
        data=form(),
        files={"pdf": PDF},
        headers=auth_headers(alice),
    )

    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Cómic subido exitosamente."
    comic = body["comic"]
    assert comic["title"] == "Test One"
    assert comic["editorial"] == "Marvel"
    assert comic["isCollection"] is False
    assert comic["family"] == "TestFam"
    assert comic["likesCount"] == 0
    assert comic["commentsCount"] == 0
    assert sorted(tag["id"] for tag in comic["tags"]) == [1, 2]
    assert comic["imageUrl"] == settings.DEFAULT_COVER_PATH
    assert comic["createdAt"].endswith("Z")

    assert comic["pdfPath"].startswith(str(upload_dir))
    assert comic["pdfPath"].endswith(".pdf")
    assert len(placed_files(upload_dir)) == 1

    async with database.session() as session:
        stored = await session.get(Comic, int(comic["id"]))
    assert stored.uploader_id == alice.id


async def test_upload_with_cover_and_repeated_tag_fields(client, database, tags, upload_dir):
    response = await client.post(
        "/api/comics/upload",
        data=form(tagIds=["3", "4", "3", "junk"]),
        files={"pdf": PDF, "cover": COVER},
    )

    assert response.status_code == 201
    comic = response.json()["comic"]
    assert comic["imageUrl"].endswith(".png")
    assert sorted(tag["id"] for tag in comic["tags"]) == [3, 4]
    assert len(placed_files(upload_dir)) == 2


async def test_anonymous_upload_has_no_uploader(client, database, tags):
    response = await client.post("/api/comics/upload", data=form(), files={"pdf": PDF})

    assert response.status_code == 201
    async with database.session() as session:
        stored = await session.get(Comic, int(response.json()["comic"]["id"]))
    assert stored.uploader_id is None


async def test_image_url_used_when_no_cover(client, tags):
    response = await client.post(
        "/api/comics/upload",
        data=form(imageUrl="https://example.com/cover.jpg", tagIds=None),
        files={"pdf": PDF},
    )

    comic = response.json()["comic"]
    assert comic["imageUrl"] == "https://example.com/cover.jpg"
    assert comic["tags"] == []


async def test_invalid_token_is_rejected(client, database, tags):
    response = await client.post(
        "/api/comics/upload",
        data=form(),
        files={"pdf": PDF},
        headers={"Authorization": "Bearer not-a-token"},
    )

    assert response.status_code == 401
    assert await comic_count(database) == 0


# ═══════════════════════════════════════════════════════════════════════════════
# CLIENT ERRORS
# ═══════════════════════════════════════════════════════════════════════════════


async def test_missing_fields(client, database, upload_dir):
    response = await client.post(
        "/api/comics/upload",
        data={"title": "Only Title"},
        files={"pdf": PDF},
    )

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["error"] == "MISSING_FIELDS"
    assert body["details"]["fields"] == ["editorial", "isCollection", "family"]
    assert await comic_count(database) == 0
    assert placed_files(upload_dir) == []


async def test_invalid_editorial(client, database):
    response = await client.post(
        "/api/comics/upload", data=form(editorial="Image"), files={"pdf": PDF}
    )

    assert response.status_code == 400
    assert response.json()["error"] == "VALIDATION_ERROR"


async def test_missing_pdf(client, database, upload_dir):
    response = await client.post(
        "/api/comics/upload", data=form(), files={"cover": COVER}
    )

    assert response.status_code == 400
    assert response.json()["error"] == "MISSING_FILE"
    assert placed_files(upload_dir) == []


async def test_unsupported_file_type(client, database, upload_dir):
    response = await client.post(
        "/api/comics/upload",
        data=form(),
        files={"pdf": ("notes.txt", b"plain text", "text/plain")},
    )

    assert response.status_code == 400
    assert response.json()["error"] == "INVALID_FILE_TYPE"
    assert placed_files(upload_dir) == []
    assert await comic_count(database) == 0


async def test_oversize_file(client, database, upload_dir):
    big = ("big.pdf", b"x" * (TEST_MAX_BYTES + 1), "application/pdf")

    response = await client.post("/api/comics/upload", data=form(), files={"pdf": big})

    assert response.status_code == 413
    assert response.json()["error"] == "FILE_TOO_LARGE"
    assert placed_files(upload_dir) == []
    assert await comic_count(database) == 0


async def test_oversize_cover_discards_placed_pdf(client, database, upload_dir):
    big_cover = ("big.png", b"x" * (TEST_MAX_BYTES + 1), "image/png")

    response = await client.post(
        "/api/comics/upload", data=form(), files={"pdf": PDF, "cover": big_cover}
    )

    assert response.status_code == 413
    assert placed_files(upload_dir) == []


# ═══════════════════════════════════════════════════════════════════════════════
# ATOMICITY
# ═══════════════════════════════════════════════════════════════════════════════


async def test_failed_tag_insert_rolls_back_everything(client, database, tags, upload_dir):
    response = await client.post(
        "/api/comics/upload",
        data=form(tagIds="1,999"),
        files={"pdf": PDF, "cover": COVER},
    )

    assert response.status_code == 500
    body = response.json()
    assert body == {"success": False, "message": "Failed to upload comic", "error": "UPLOAD_FAILED"}

    assert await comic_count(database) == 0
    async with database.session() as session:
        links = (await session.execute(select(func.count()).select_from(ComicTag))).scalar()
    assert links == 0
    assert placed_files(upload_dir) == []


async def test_post_commit_read_failure_keeps_comic(
    client, database, tags, upload_dir, monkeypatch
):
    async def broken_read(self, comic_id):
        raise SQLAlchemyError("connection lost")

    monkeypatch.setattr(ComicRepository, "get_with_counts", broken_read)

    response = await client.post("/api/comics/upload", data=form(), files={"pdf": PDF})

    assert response.status_code == 500
    body = response.json()
    assert body["error"] == "POST_COMMIT_READ_FAILED"
    comic_id = int(body["details"]["comic_id"])

    async with database.session() as session:
        stored = await session.get(Comic, comic_id)
    assert stored is not None
    assert stored.title == "Test One"
    assert len(placed_files(upload_dir)) == 1


@pytest.mark.parametrize("tag_ids", ["1,1,2", "2,1"])
async def test_duplicate_tag_ids_collapse(client, database, tags, tag_ids):
    response = await client.post(
        "/api/comics/upload", data=form(tagIds=tag_ids), files={"pdf": PDF}
    )

    assert response.status_code == 201
    async with database.session() as session:
        links = (await session.execute(select(func.count()).select_from(ComicTag))).scalar()
    assert links == 2
