"""Health checks — liveness always 200, readiness depends on the DB handle."""

from learning_tracker.main import app


async def test_liveness(client):
    res = await client.get("/api/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_with_database(client):
    res = await client.get("/api/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"]["database"] == "healthy"


async def test_readiness_without_database(client):
    manager = app.state.db_manager
    app.state.db_manager = None
    try:
        res = await client.get("/api/health/ready")
    finally:
        app.state.db_manager = manager
    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"
