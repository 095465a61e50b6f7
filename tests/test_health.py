"""Health endpoint tests."""

import pytest
from falcon.asgi import App
from falcon.testing import TestClient

from perioscan import __version__
from perioscan.interfaces.api.app import add_health_routes
from perioscan.interfaces.api.resources.health import HealthResource


@pytest.fixture
def client() -> TestClient:
    """Create test client with health endpoints."""
    app = App()
    add_health_routes(app, HealthResource())
    return TestClient(app)


def test_health_liveness(client: TestClient) -> None:
    """GET /v1/health returns 200."""
    result = client.simulate_get("/v1/health")
    assert result.status_code == 200
    assert result.json == {"status": "ok", "version": __version__}


def test_health_ready(client: TestClient) -> None:
    """GET /v1/health/ready returns 200."""
    result = client.simulate_get("/v1/health/ready")
    assert result.status_code == 200
    assert result.json["status"] == "ready"
