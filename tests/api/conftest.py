"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from calshare.application.services.audit_service import AuditService
from calshare.infrastructure.auth.session_store import SessionStore
from calshare.interfaces.api.app import Container, create_app


@pytest.fixture
def container(uow_factory) -> Container:
    """Memory-backed collaborators shared by one test's requests."""
    return Container(
        unit_of_work_factory=uow_factory,
        audit_service=AuditService(uow_factory),
        session_store=SessionStore(),
        cors_origins=["http://localhost:3000"],
        health_retry_delay_ms=0,
    )


@pytest.fixture
def app(container):
    return create_app(container)


@pytest.fixture
def client(app) -> TestClient:
    """Falcon ASGI test client."""
    return TestClient(app)

