from unittest.mock import AsyncMock

from sqlalchemy.exc import OperationalError


async def test_health(client):
    body = (await client.get("/health")).json()

    assert body["status"] == "healthy"
    assert body["service"] == "heroflicks"


async def test_ready_runs_a_query(client):
    response = await client.get("/ready")

    assert response.status_code == 200
    assert response.json() == {"status": "ready"}


async def test_not_ready_when_database_fails(client, database, monkeypatch):
    monkeypatch.setattr(
        database, "ping", AsyncMock(side_effect=OperationalError("SELECT 1", {}, Exception("down")))
    )

    response = await client.get("/ready")

    assert response.status_code == 503


async def test_live(client):
    assert (await client.get("/live")).json() == {"status": "alive"}


async def test_unknown_route_is_404(client):
    assert (await client.get("/api/nothing-here")).status_code == 404


async def test_request_id_is_echoed(client):
    response = await client.get("/live", headers={"X-Request-ID": "abc123"})

    assert response.headers["X-Request-ID"] == "abc123"


async def test_request_id_is_generated(client):
    response = await client.get("/live")

    assert len(response.headers["X-Request-ID"]) == 32


async def test_error_body_documented_in_openapi(client):
    schema = (await client.get("/openapi.json")).json()

    assert "ErrorResponse" in schema["components"]["schemas"]
    like = schema["paths"]["/api/comics/{comic_id}/like"]["post"]
    assert like["responses"]["404"]["content"]["application/json"]["schema"] == {
        "$ref": "#/components/schemas/ErrorResponse"
    }
