"""Health Probes — liveness always 200, readiness follows the database."""

import taskflow.infrastructure.database as db_module


async def test_liveness(http_client):
    res = await http_client.get("/api/health")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"
    assert res.json()["service"] == "taskflow-api"


async def test_readiness_with_database(http_client):
    res = await http_client.get("/api/health/ready")
    assert res.status_code == 200
    assert res.json() == {"status": "ready", "checks": {"database": "healthy"}}


async def test_readiness_without_database(http_client, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)

    res = await http_client.get("/api/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"
