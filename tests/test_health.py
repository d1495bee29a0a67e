"""Tests for health check endpoints."""

from fastapi.testclient import TestClient

from fitcoach.main import app


def test_health_check() -> None:
    """Test basic health check endpoint."""
    client = TestClient(app)
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "fitcoach-api"}


def test_root_endpoint() -> None:
    """Test root endpoint returns API info."""
    client = TestClient(app)
    response = client.get("/")
    assert response.status_code == 200

    data = response.json()
    assert data["name"] == "Fitcoach API"
    assert "version" in data
    assert data["docs"] == "/docs"


def test_request_id_echoed() -> None:
    """Test the request ID header is passed through or generated."""
    client = TestClient(app)

    response = client.get("/health", headers={"X-Request-ID": "abc-123"})
    assert response.headers["X-Request-ID"] == "abc-123"

    response = client.get("/health")
    assert response.headers["X-Request-ID"]


def test_unknown_route_uses_error_shape() -> None:
    """Test framework 404s are rendered with the error key."""
    client = TestClient(app)
    response = client.get("/does-not-exist")
    assert response.status_code == 404
    assert "error" in response.json()
