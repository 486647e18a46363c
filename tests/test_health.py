"""Tests for the /health endpoint."""

from fastapi.testclient import TestClient

from creature_sim.main import app


def test_health_returns_ok(client: TestClient) -> None:
    """GET /health should return 200 with status 'ok'."""
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["creatures"] == "0"


def test_health_counts_creatures(client: TestClient) -> None:
    """GET /health reports the number of registered creatures."""
    client.post("/creatures", json={"name": "Alice"})
    client.post("/creatures", json={"name": "Bob"})
    assert client.get("/health").json()["creatures"] == "2"


def test_health_without_service() -> None:
    """Without a SocialService the endpoint reports 'error'."""
    app.state.social_service = None
    response = TestClient(app).get("/health")
    assert response.json() == {"status": "error", "creatures": "unavailable"}
