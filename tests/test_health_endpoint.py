from __future__ import annotations


async def test_health_endpoint(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


async def test_root_lists_endpoints(client):
    response = await client.get("/")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "OK"
    assert "/api/goals" in body["api_endpoints"]


async def test_request_id_is_echoed(client):
    response = await client.get("/health", headers={"X-Request-Id": "rid-123"})
    assert response.headers["X-Request-Id"] == "rid-123"

    generated = await client.get("/health")
    assert generated.headers["X-Request-Id"]


async def test_error_responses_carry_message_and_request_id(client):
    response = await client.get("/api/goals", headers={"X-Request-Id": "rid-401"})
    assert response.status_code == 401
    assert response.headers["X-Request-Id"] == "rid-401"
    assert set(response.json()) == {"message"}
