"""Health & readiness probes, plus the root greeting."""

import blogcart.infrastructure.database as db_module


async def test_root_says_hello(client):
    response = await client.get("/")
    assert response.status_code == 200
    assert response.text == "Hello, World!"


async def test_liveness(client):
    response = await client.get("/health/")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


async def test_readiness_with_database(client):
    response = await client.get("/health/ready")
    assert response.status_code == 200
    assert response.json()["checks"]["database"] == "healthy"


async def test_readiness_without_database(client, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    response = await client.get("/health/ready")
    assert response.status_code == 503
    assert response.json()["reason"] == "database_unavailable"
