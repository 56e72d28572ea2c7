from conftest import add_comic


async def test_list_tags_by_name(client, tags):
    body = (await client.get("/api/tags")).json()

    names = [tag["name"] for tag in body["tags"]]
    assert body["success"] is True
    assert names == sorted(names)
    assert len(names) == 10


async def test_tag_crud(client):
    created = await client.post("/api/tags", json={"name": "  Noir  "})
    assert created.status_code == 201
    tag = created.json()["tag"]
    assert tag["name"] == "Noir"

    fetched = await client.get(f"/api/tags/{tag['id']}")
    assert fetched.json()["tag"] == tag

    renamed = await client.put(f"/api/tags/{tag['id']}", json={"name": "Neo-Noir"})
    assert renamed.json()["tag"]["name"] == "Neo-Noir"

    deleted = await client.delete(f"/api/tags/{tag['id']}")
    assert deleted.status_code == 200
    assert (await client.get(f"/api/tags/{tag['id']}")).status_code == 404


async def test_tag_validation_and_conflicts(client, tags):
    assert (await client.post("/api/tags", json={"name": "   "})).status_code == 400

    duplicate = await client.post("/api/tags", json={"name": "Drama"})
    assert duplicate.status_code == 409

    clash = await client.put(f"/api/tags/{tags['Acción'].id}", json={"name": "Drama"})
    assert clash.status_code == 409

    # Renaming a tag to its own name is not a conflict
    same = await client.put(f"/api/tags/{tags['Drama'].id}", json={"name": "Drama"})
    assert same.status_code == 200

    assert (await client.put("/api/tags/999", json={"name": "Nada"})).status_code == 404
    assert (await client.delete("/api/tags/999")).status_code == 404


async def test_deleting_tag_removes_it_from_comics(client, database, tags):
    comic = await add_comic(database, "Tagged", tag_ids=[tags["Drama"].id, tags["Acción"].id])

    await client.delete(f"/api/tags/{tags['Drama'].id}")

    body = (await client.get(f"/api/comics/{comic.id}")).json()
    assert body["comic"]["tags"] == [{"id": tags["Acción"].id, "name": "Acción"}]
