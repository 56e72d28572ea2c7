from heroflicks.shared.models.enums import Editorial

from conftest import add_comic


async def search(client, q):
    response = await client.get("/api/comics/search", params={"q": q})
    assert response.status_code == 200
    return response.json()


async def test_blank_term_prompts_without_results(client):
    for q in ("", "   "):
        body = await search(client, q)

        assert body["success"] is True
        assert body["comics"] == []
        assert body["message"] == "Por favor, introduce un término de búsqueda."


async def test_missing_term_prompts(client):
    response = await client.get("/api/comics/search")

    assert response.status_code == 200
    assert response.json()["comics"] == []


async def test_matches_title_family_editorial_and_tag(client, database, tags):
    await add_comic(database, "Spiderman: Número Uno", family="Spiderman")
    await add_comic(database, "Watchmen", editorial=Editorial.DC, family="Alan Moore")
    await add_comic(
        database,
        "Saga",
        editorial=Editorial.OTROS,
        family="Image",
        tag_ids=[tags["Ciencia Ficción"].id],
    )

    assert [c["title"] for c in (await search(client, "SPIDER"))["comics"]] == [
        "Spiderman: Número Uno"
    ]
    assert [c["title"] for c in (await search(client, "moore"))["comics"]] == ["Watchmen"]
    assert [c["title"] for c in (await search(client, "dc"))["comics"]] == ["Watchmen"]
    assert [c["title"] for c in (await search(client, "ficción"))["comics"]] == ["Saga"]


async def test_comic_matching_several_fields_appears_once(client, database, tags):
    await add_comic(
        database,
        "Marvel Team-Up",
        family="Marvel",
        tag_ids=[tags["Marvel"].id, tags["Superhéroes"].id],
    )
    await add_comic(database, "Another Marvel", family="Other")

    body = await search(client, "marvel")

    assert [c["title"] for c in body["comics"]] == ["Another Marvel", "Marvel Team-Up"]


async def test_like_wildcards_are_literal(client, database):
    await add_comic(database, "100% Spiderman")
    await add_comic(database, "Batman")

    assert [c["title"] for c in (await search(client, "%"))["comics"]] == ["100% Spiderman"]
    assert (await search(client, "_"))["comics"] == []


async def test_no_match_message(client, database):
    await add_comic(database, "Batman")

    body = await search(client, "zzz")

    assert body["comics"] == []
    assert body["message"] == 'No se encontraron cómics para "zzz".'
