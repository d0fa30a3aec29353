"""Country routes: HTTP status codes and envelopes through the ASGI app.

Tests cover:
    - POST array -> 201 with generated ids; non-array -> 400; bad JSON -> 400 INVALID_JSON
    - Field failures listed in full
    - GET/PUT/DELETE on missing ids -> 404
    - DELETE -> 204 empty body, second DELETE -> 404
    - /paginated envelope and invalid query params -> 400
"""

import pytest

from tests.services.factories import country_payload


async def _create(client, *payloads) -> list[dict]:
    res = await client.post("/api/v1/countries", json=list(payloads))
    assert res.status_code == 201
    return res.json()


async def test_create_returns_201_with_ids(client):
    created = await _create(client, country_payload(), country_payload(name="Uganda"))
    assert len(created) == 2
    assert all(c["id"] for c in created)
    assert created[1]["name"] == "Uganda"


async def test_create_rejects_object_body(client):
    res = await client.post("/api/v1/countries", json=country_payload())
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_create_rejects_malformed_json(client):
    res = await client.post(
        "/api/v1/countries",
        content=b"[{not json",
        headers={"content-type": "application/json"},
    )
    assert res.status_code == 400
    body = res.json()
    assert body["error"]["code"] == "INVALID_JSON"
    assert "invalid request body format" in body["error"]["message"]


async def test_create_lists_every_field_failure(client):
    bad = country_payload(area=-1, population=-1)
    res = await client.post("/api/v1/countries", json=[bad])
    assert res.status_code == 400
    fields = {d["field"] for d in res.json()["error"]["details"]}
    assert any(f.endswith("area") for f in fields)
    assert any(f.endswith("population") for f in fields)


async def test_get_round_trip(client):
    [created] = await _create(client, country_payload())
    res = await client.get(f"/api/v1/countries/{created['id']}")
    assert res.status_code == 200
    assert res.json()["name"] == "Kenya"
    assert res.json()["id"] == created["id"]


async def test_get_missing_is_404(client):
    res = await client.get("/api/v1/countries/nope")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_update_replaces_record(client):
    [created] = await _create(client, country_payload())
    res = await client.put(
        f"/api/v1/countries/{created['id']}",
        json=country_payload(name="Kenya (updated)", id="ignored"),
    )
    assert res.status_code == 200
    assert res.json()["name"] == "Kenya (updated)"
    assert res.json()["id"] == created["id"]


async def test_update_missing_is_404(client):
    res = await client.put("/api/v1/countries/nope", json=country_payload())
    assert res.status_code == 404


async def test_delete_twice(client):
    [created] = await _create(client, country_payload())
    first = await client.delete(f"/api/v1/countries/{created['id']}")
    second = await client.delete(f"/api/v1/countries/{created['id']}")
    assert first.status_code == 204
    assert first.content == b""
    assert second.status_code == 404


async def test_list_returns_all(client):
    await _create(client, country_payload(name="A"), country_payload(name="B"))
    res = await client.get("/api/v1/countries")
    assert res.status_code == 200
    assert {c["name"] for c in res.json()} == {"A", "B"}


async def test_paginated_envelope(client):
    await _create(client, *(country_payload(name=f"C{i:02d}") for i in range(25)))
    res = await client.get(
        "/api/v1/countries/paginated", params={"page": "2", "limit": "10"},
    )
    assert res.status_code == 200
    body = res.json()
    assert body["message"] == "Country list"
    data = body["data"]
    assert len(data["list"]) == 10
    assert data["has_next"] is True
    assert data["has_prev"] is True
    assert data["pages"] == 3
    assert data["list"][0]["name"] == "C10"


async def test_paginated_search_without_matches(client):
    await _create(client, country_payload())
    res = await client.get("/api/v1/countries/paginated", params={"search": "zzz"})
    data = res.json()["data"]
    assert data["total"] == 0
    assert data["list"] == []
    assert data["has_next"] is False
    assert data["has_prev"] is False


async def test_paginated_rejects_non_numeric_page(client):
    res = await client.get("/api/v1/countries/paginated", params={"page": "two"})
    assert res.status_code == 400
    assert res.json()["error"]["details"][0]["field"] == "page"


@pytest.mark.parametrize("page", ["²", "9" * 5000])
async def test_paginated_rejects_digit_like_page(client, page):
    res = await client.get("/api/v1/countries/paginated", params={"page": page})
    assert res.status_code == 400
    body = res.json()["error"]
    assert body["code"] == "VALIDATION_ERROR"
    assert body["details"][0]["field"] == "page"
