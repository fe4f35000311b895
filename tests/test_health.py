"""Health and readiness endpoint tests."""

import pytest
from falcon.asgi import App
from falcon.testing import TestClient

from calshare.infrastructure.persistence.memory import create_memory_uow_factory
from calshare.infrastructure.resilience import CircuitBreaker
from calshare.interfaces.api.resources.monitoring import (
    HealthResource,
    MetricsResource,
    StorageCheck,
)


class UnavailableUnitOfWork:
    """Unit of work whose storage connection always fails."""

    calls = 0

    async def __aenter__(self):
        UnavailableUnitOfWork.calls += 1
        raise ConnectionError("storage offline")

    async def __aexit__(self, *exc_info) -> None:
        return None


def build_client(uow_factory, breaker: CircuitBreaker) -> TestClient:
    check = StorageCheck(uow_factory, breaker, retries=2, delay_ms=0)
    app = App()
    health = HealthResource(check, "memory")
    app.add_route("/v1/health", health)
    app.add_route("/v1/health/ready", health, suffix="ready")
    app.add_route("/v1/metrics", MetricsResource(check))
    return TestClient(app)


@pytest.fixture
def client(store) -> TestClient:
    return build_client(create_memory_uow_factory(store), CircuitBreaker(name="storage"))


@pytest.fixture
def failing_client() -> TestClient:
    UnavailableUnitOfWork.calls = 0
    return build_client(UnavailableUnitOfWork, CircuitBreaker(failure_threshold=1, name="storage"))


def test_health_liveness(client: TestClient) -> None:
    """GET /v1/health returns 200."""
    result = client.simulate_get("/v1/health")
    assert result.status_code == 200
    assert result.json == {"status": "ok", "mode": "memory"}


def test_health_ready(client: TestClient) -> None:
    """GET /v1/health/ready returns 200 with a closed circuit."""
    result = client.simulate_get("/v1/health/ready")
    assert result.status_code == 200
    assert result.json["status"] == "ready"
    assert result.json["circuit"]["state"] == "closed"


def test_liveness_ignores_storage(failing_client: TestClient) -> None:
    assert failing_client.simulate_get("/v1/health").status_code == 200


def test_ready_degraded_when_storage_fails(failing_client: TestClient) -> None:
    result = failing_client.simulate_get("/v1/health/ready")

    assert result.status_code == 503
    assert result.json == {
        "message": "Storage unavailable",
        "reason": "storage offline",
        "status": "degraded",
    }
    assert UnavailableUnitOfWork.calls == 3


def test_open_circuit_skips_storage(failing_client: TestClient) -> None:
    failing_client.simulate_get("/v1/health/ready")
    calls = UnavailableUnitOfWork.calls

    result = failing_client.simulate_get("/v1/metrics")

    assert result.status_code == 503
    assert result.json["reason"] == "Circuit breaker open"
    assert result.json["message"] == "Metrics unavailable"
    assert UnavailableUnitOfWork.calls == calls
