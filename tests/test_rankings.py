"""Explore rankings: most liked, most commented, recently added, popular by tag."""

from heroflicks.shared.models.enums import Editorial

from conftest import add_comic, add_comment, add_likes, add_user, minutes


def titles(body):
    return [comic["title"] for comic in body["comics"]]


async def test_most_liked_orders_by_likes_then_title(client, database, alice, bob):
    carol = await add_user(database, "carol")
    zeta = await add_comic(database, "Zeta")
    alpha = await add_comic(database, "Alpha")
    beta = await add_comic(database, "Beta")
    await add_comic(database, "Gamma")
    await add_likes(database, alice, [zeta, alpha, beta])
    await add_likes(database, bob, [zeta, alpha])
    await add_likes(database, carol, [zeta])

    response = await client.get("/api/comics/most-liked")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert titles(body) == ["Zeta", "Alpha", "Beta", "Gamma"]
    assert [comic["likesCount"] for comic in body["comics"]] == [3, 2, 1, 0]


async def test_ties_are_broken_by_title(client, database, alice):
    for title in ("Charlie", "Alpha", "Bravo"):
        comic = await add_comic(database, title)
        await add_likes(database, alice, [comic])

    response = await client.get("/api/comics/most-liked")

    assert titles(response.json()) == ["Alpha", "Bravo", "Charlie"]


async def test_default_limit_is_five(client, database):
    for i in range(7):
        await add_comic(database, f"Comic {i}")

    body = (await client.get("/api/comics/most-liked")).json()
    assert len(body["comics"]) == 5

    body = (await client.get("/api/comics/most-liked", params={"limit": 2})).json()
    assert len(body["comics"]) == 2


async def test_limit_out_of_range_is_rejected(client):
    response = await client.get("/api/comics/most-liked", params={"limit": 0})

    assert response.status_code == 400
    assert response.json()["error"] == "VALIDATION_ERROR"


async def test_most_commented(client, database, alice, bob):
    quiet = await add_comic(database, "Quiet")
    loud = await add_comic(database, "Loud")
    await add_comment(database, alice, loud)
    await add_comment(database, bob, loud)
    await add_comment(database, alice, quiet)

    body = (await client.get("/api/comics/most-commented")).json()

    assert titles(body) == ["Loud", "Quiet"]
    assert [comic["commentsCount"] for comic in body["comics"]] == [2, 1]


async def test_recently_added(client, database):
    await add_comic(database, "Old", created_at=minutes(0))
    await add_comic(database, "New B", created_at=minutes(10))
    await add_comic(database, "New A", created_at=minutes(10))

    body = (await client.get("/api/comics/recently-added")).json()

    assert titles(body) == ["New A", "New B", "Old"]


async def test_counts_are_derived_per_comic(client, database, alice, bob):
    comic = await add_comic(database, "Counted")
    other = await add_comic(database, "Other")
    await add_likes(database, alice, [comic, other])
    await add_likes(database, bob, [comic])
    await add_comment(database, alice, comic)
    await add_comment(database, alice, comic)
    await add_comment(database, bob, comic)

    body = (await client.get(f"/api/comics/{comic.id}")).json()

    assert body["comic"]["likesCount"] == 2
    assert body["comic"]["commentsCount"] == 3


# ═══════════════════════════════════════════════════════════════════════════════
# POPULAR BY TAG
# ═══════════════════════════════════════════════════════════════════════════════


async def test_popular_by_tag(client, database, tags, alice, bob):
    accion = tags["Acción"].id
    liked = await add_comic(database, "Liked", tag_ids=[accion])
    await add_comic(database, "Unliked", tag_ids=[accion])
    untagged = await add_comic(database, "Untagged")
    await add_likes(database, alice, [liked, untagged])
    await add_likes(database, bob, [untagged])

    response = await client.get("/api/comics/popular-by-tag", params={"tagName": "Acción"})

    body = response.json()
    assert response.status_code == 200
    assert titles(body) == ["Liked", "Unliked"]
    assert body["comics"][0]["tags"] == [{"id": accion, "name": "Acción"}]


async def test_popular_by_unknown_tag_is_empty_success(client, tags):
    response = await client.get("/api/comics/popular-by-tag", params={"tagName": "Unknown"})

    body = response.json()
    assert response.status_code == 200
    assert body["success"] is True
    assert body["comics"] == []
    assert "no fue encontrada" in body["message"]


async def test_popular_by_tag_without_comics(client, tags):
    response = await client.get("/api/comics/popular-by-tag", params={"tagName": "Drama"})

    body = response.json()
    assert response.status_code == 200
    assert body["comics"] == []
    assert "Drama" in body["message"]


async def test_popular_by_tag_requires_name(client):
    for params in ({}, {"tagName": "   "}):
        response = await client.get("/api/comics/popular-by-tag", params=params)

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "message": "El parámetro 'tagName' es requerido.",
            "error": "VALIDATION_ERROR",
        }


# ═══════════════════════════════════════════════════════════════════════════════
# CATALOG
# ═══════════════════════════════════════════════════════════════════════════════


async def test_catalog_by_title_with_tag_filter(client, database, tags):
    await add_comic(database, "Batman", editorial=Editorial.DC, tag_ids=[tags["DC"].id])
    await add_comic(database, "Avengers", tag_ids=[tags["Marvel"].id, tags["Equipo"].id])

    body = (await client.get("/api/comics")).json()
    assert titles(body) == ["Avengers", "Batman"]
    avengers = body["comics"][0]
    assert [tag["name"] for tag in avengers["tags"]] == ["Equipo", "Marvel"]

    body = (await client.get("/api/comics", params={"tag": "DC"})).json()
    assert titles(body) == ["Batman"]
    assert body["comics"][0]["editorial"] == "DC"

    body = (await client.get("/api/comics", params={"tag": "Nope"})).json()
    assert body["comics"] == []
