"""Health endpoint tests."""

import pytest
from falcon.asgi import App
from falcon.testing import TestClient

from rolegate.interfaces.api.resources.health import HealthResource


@pytest.fixture
def client(uow_factory) -> TestClient:
    """Create test client with health endpoints."""
    app = App()
    health = HealthResource(uow_factory)
    app.add_route("/v1/health", health)
    app.add_route("/v1/health/ready", health, suffix="ready")
    return TestClient(app)


def test_health_liveness(client: TestClient) -> None:
    """GET /v1/health returns 200."""
    result = client.simulate_get("/v1/health")
    assert result.status_code == 200
    assert result.json["status"] == "ok"


def test_health_ready(client: TestClient) -> None:
    """GET /v1/health/ready returns 200 when the store answers."""
    result = client.simulate_get("/v1/health/ready")
    assert result.status_code == 200
    assert result.json["status"] == "ready"


class _UnreachableRoles:
    async def exists(self, role_id: str) -> bool:
        raise ConnectionError("store down")


class _UnreachableUnitOfWork:
    roles = _UnreachableRoles()


def test_health_ready_store_unreachable() -> None:
    """GET /v1/health/ready returns 503 when the role store fails."""
    from contextlib import asynccontextmanager

    @asynccontextmanager
    async def failing_factory():
        yield _UnreachableUnitOfWork()

    app = App()
    health = HealthResource(failing_factory)
    app.add_route("/v1/health", health)
    app.add_route("/v1/health/ready", health, suffix="ready")
    client = TestClient(app)

    assert client.simulate_get("/v1/health").status_code == 200
    result = client.simulate_get("/v1/health/ready")
    assert result.status_code == 503
    assert result.json["status"] == "unavailable"
