from conftest import add_comic, add_comment, auth_headers, minutes


async def test_add_and_list_comments(client, database, alice, bob):
    comic = await add_comic(database, "Discussed")

    created = await client.post(
        f"/api/comics/{comic.id}/comments",
        json={"text": "  Me encantó  ", "rating": 5},
        headers=auth_headers(alice),
    )

    assert created.status_code == 201
    comment = created.json()["comment"]
    assert comment["text"] == "Me encantó"
    assert comment["rating"] == 5
    assert comment["username"] == "alice"
    assert comment["userId"] == alice.id
    assert comment["comicId"] == comic.id

    await client.post(
        f"/api/comics/{comic.id}/comments",
        json={"text": "Regular"},
        headers=auth_headers(bob),
    )

    body = (await client.get(f"/api/comics/{comic.id}/comments")).json()
    assert body["totalComments"] == 2
    assert body["currentPage"] == 1
    assert body["totalPages"] == 1
    assert [c["username"] for c in body["comments"]] == ["bob", "alice"]


async def test_comments_are_paginated_newest_first(client, database, alice):
    comic = await add_comic(database, "Busy")
    for i in range(5):
        await add_comment(database, alice, comic, text=f"c{i}", created_at=minutes(i))

    body = (
        await client.get(f"/api/comics/{comic.id}/comments", params={"page": 2, "limit": 2})
    ).json()

    assert [c["text"] for c in body["comments"]] == ["c2", "c1"]
    assert body["totalPages"] == 3
    assert body["totalComments"] == 5


async def test_comment_validation(client, database, alice):
    comic = await add_comic(database, "Strict")
    headers = auth_headers(alice)

    for payload in ({"text": "   "}, {"text": "ok", "rating": 6}, {"text": "ok", "rating": 0}, {}):
        response = await client.post(
            f"/api/comics/{comic.id}/comments", json=payload, headers=headers
        )
        assert response.status_code == 400
        assert response.json()["error"] == "VALIDATION_ERROR"


async def test_comment_on_unknown_comic(client, alice):
    response = await client.post(
        "/api/comics/999/comments", json={"text": "hola"}, headers=auth_headers(alice)
    )

    assert response.status_code == 404


async def test_only_author_can_edit_or_delete(client, database, alice, bob):
    comic = await add_comic(database, "Owned")
    comment = await add_comment(database, alice, comic, text="original", rating=3)

    forbidden = await client.put(
        f"/api/comments/{comment.id}", json={"text": "hacked"}, headers=auth_headers(bob)
    )
    assert forbidden.status_code == 403
    assert forbidden.json()["error"] == "AUTHORIZATION_ERROR"
    assert (
        await client.delete(f"/api/comments/{comment.id}", headers=auth_headers(bob))
    ).status_code == 403

    edited = await client.put(
        f"/api/comments/{comment.id}",
        json={"text": "edited", "rating": 4},
        headers=auth_headers(alice),
    )
    assert edited.status_code == 200
    body = (await client.get(f"/api/comics/{comic.id}/comments")).json()
    assert body["comments"][0]["text"] == "edited"
    assert body["comments"][0]["rating"] == 4

    deleted = await client.delete(f"/api/comments/{comment.id}", headers=auth_headers(alice))
    assert deleted.status_code == 200
    assert (
        await client.delete(f"/api/comments/{comment.id}", headers=auth_headers(alice))
    ).status_code == 404


async def test_average_rating(client, database, alice, bob):
    comic = await add_comic(database, "Rated")
    await add_comment(database, alice, comic, rating=5)
    await add_comment(database, bob, comic, rating=4)
    await add_comment(database, bob, comic, rating=4)
    await add_comment(database, alice, comic, text="sin nota")

    body = (await client.get(f"/api/comics/{comic.id}/rating")).json()

    assert body == {"success": True, "averageRating": 4.3, "ratingCount": 3}


async def test_average_rating_without_ratings(client, database):
    comic = await add_comic(database, "Unrated")

    body = (await client.get(f"/api/comics/{comic.id}/rating")).json()

    assert body == {"success": True, "averageRating": None, "ratingCount": 0}
