"""Comic CRUD, PDF download and comic/tag associations."""

from sqlalchemy import func, select

from heroflicks.shared.models import ComicTag, User

from conftest import add_comic, auth_headers


async def association_count(database, comic_id):
    async with database.session() as session:
        result = await session.execute(
            select(func.count()).select_from(ComicTag).where(ComicTag.comic_id == comic_id)
        )
        return result.scalar()


async def test_get_unknown_comic(client):
    response = await client.get("/api/comics/9999")

    assert response.status_code == 404
    assert response.json() == {
        "success": False,
        "message": "Comic with id '9999' not found",
        "error": "NOT_FOUND",
    }


async def test_non_numeric_id_is_a_validation_error(client):
    response = await client.get("/api/comics/abc")

    assert response.status_code == 400
    assert response.json()["error"] == "VALIDATION_ERROR"


async def test_create_update_delete(client, alice):
    headers = auth_headers(alice)
    payload = {
        "title": "  Hellboy  ",
        "editorial": "Otros",
        "pdfPath": "public/comics/hellboy.pdf",
        "isCollection": True,
        "family": "Hellboy",
    }

    created = await client.post("/api/comics", json=payload, headers=headers)

    assert created.status_code == 201
    comic = created.json()["comic"]
    assert comic["title"] == "Hellboy"
    assert comic["isCollection"] is True
    assert comic["imageUrl"] is None

    updated = await client.put(
        f"/api/comics/{comic['id']}",
        json={"title": "Hellboy: Semilla", "imageUrl": "public/comics/hb.jpg"},
        headers=headers,
    )
    assert updated.status_code == 200
    assert updated.json()["comic"]["title"] == "Hellboy: Semilla"
    assert updated.json()["comic"]["imageUrl"] == "public/comics/hb.jpg"
    assert updated.json()["comic"]["family"] == "Hellboy"

    deleted = await client.delete(f"/api/comics/{comic['id']}", headers=headers)
    assert deleted.json() == {"success": True, "message": "Comic deleted successfully"}
    assert (await client.get(f"/api/comics/{comic['id']}")).status_code == 404
    assert (await client.delete(f"/api/comics/{comic['id']}", headers=headers)).status_code == 404


async def test_create_requires_token(client):
    response = await client.post("/api/comics", json={"title": "x"})

    assert response.status_code == 401


async def test_create_rejects_unknown_editorial(client, alice):
    response = await client.post(
        "/api/comics",
        json={
            "title": "Spawn",
            "editorial": "Image",
            "pdfPath": "public/comics/spawn.pdf",
            "isCollection": False,
            "family": "Spawn",
        },
        headers=auth_headers(alice),
    )

    assert response.status_code == 400


async def test_update_rejects_blank_text(client, database, alice):
    comic = await add_comic(database, "Kept Title", family="Kept Family")

    response = await client.put(
        f"/api/comics/{comic.id}",
        json={"title": "   ", "family": "  "},
        headers=auth_headers(alice),
    )

    assert response.status_code == 400
    assert response.json()["error"] == "VALIDATION_ERROR"
    body = (await client.get(f"/api/comics/{comic.id}")).json()
    assert body["comic"]["title"] == "Kept Title"
    assert body["comic"]["family"] == "Kept Family"


async def test_update_strips_text(client, database, alice):
    comic = await add_comic(database, "Old")

    response = await client.put(
        f"/api/comics/{comic.id}",
        json={"title": "  New  ", "pdfPath": " public/comics/new.pdf "},
        headers=auth_headers(alice),
    )

    assert response.status_code == 200
    assert response.json()["comic"]["title"] == "New"
    assert response.json()["comic"]["pdfPath"] == "public/comics/new.pdf"


async def test_token_for_deleted_user_is_rejected(client, database):
    ghost = User(id=4242, username="ghost", email="ghost@example.com", password="x")

    response = await client.get("/api/users/me/likes", headers=auth_headers(ghost))

    assert response.status_code == 401
    assert response.json()["message"] == "User not found"


# ═══════════════════════════════════════════════════════════════════════════════
# PDF
# ═══════════════════════════════════════════════════════════════════════════════


async def test_pdf_download(client, database, tmp_path):
    pdf = tmp_path / "stored.pdf"
    pdf.write_bytes(b"%PDF-1.4 content")
    comic = await add_comic(database, "Readable", pdf_path=str(pdf))

    response = await client.get(f"/api/comics/{comic.id}/pdf")

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert response.content == b"%PDF-1.4 content"


async def test_pdf_missing_on_disk(client, database, tmp_path):
    comic = await add_comic(database, "Lost", pdf_path=str(tmp_path / "gone.pdf"))

    response = await client.get(f"/api/comics/{comic.id}/pdf")

    assert response.status_code == 404
    assert response.json()["error"] == "NOT_FOUND"


async def test_pdf_unknown_comic(client):
    assert (await client.get("/api/comics/123/pdf")).status_code == 404


# ═══════════════════════════════════════════════════════════════════════════════
# TAG ASSOCIATIONS
# ═══════════════════════════════════════════════════════════════════════════════


async def test_add_tag_is_idempotent(client, database, tags, alice):
    comic = await add_comic(database, "Tagged")
    headers = auth_headers(alice)
    url = f"/api/comics/{comic.id}/tags/{tags['Drama'].id}"

    first = await client.post(url, headers=headers)
    second = await client.post(url, headers=headers)

    assert first.status_code == 200
    assert second.status_code == 200
    assert first.json()["message"] == "Tag added to comic"
    assert second.json()["message"] == "Tag already associated with comic"
    assert await association_count(database, comic.id) == 1


async def test_add_tag_unknown_comic_or_tag(client, database, tags, alice):
    comic = await add_comic(database, "Tagged")
    headers = auth_headers(alice)

    missing_tag = await client.post(f"/api/comics/{comic.id}/tags/999", headers=headers)
    missing_comic = await client.post(f"/api/comics/999/tags/{tags['Drama'].id}", headers=headers)

    assert missing_tag.status_code == 404
    assert missing_comic.status_code == 404
    assert missing_tag.json()["message"] == "Comic or Tag not found"


async def test_remove_tag(client, database, tags, alice):
    comic = await add_comic(database, "Tagged", tag_ids=[tags["Drama"].id])
    headers = auth_headers(alice)
    url = f"/api/comics/{comic.id}/tags/{tags['Drama'].id}"

    assert (await client.delete(url, headers=headers)).status_code == 200
    assert await association_count(database, comic.id) == 0
    assert (await client.delete(url, headers=headers)).status_code == 404


async def test_deleting_comic_cascades_associations(client, database, tags, alice):
    comic = await add_comic(database, "Doomed", tag_ids=[tags["Drama"].id, tags["Acción"].id])

    await client.delete(f"/api/comics/{comic.id}", headers=auth_headers(alice))

    assert await association_count(database, comic.id) == 0
