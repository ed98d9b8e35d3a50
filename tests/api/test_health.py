"""
Test suite for health endpoints on the assembled application.

System role: Verification of health HTTP API
"""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from envreg.api.deps import get_settings_dependency
from envreg.api.main import create_app
from envreg.boundary.db import get_async_db
from envreg.configs import Settings
from envreg.configs.llm_gateway import LLMGatewaySettings


@pytest.fixture
def app():
    """Create application instance."""
    return create_app()


@pytest.fixture
def client(app) -> TestClient:
    """Provide TestClient (lifespan not started)."""
    return TestClient(app)


def _override_db(session):
    async def _get_db():
        yield session
    return _get_db


def test_health_check(client: TestClient) -> None:
    response = client.get("/api/v1/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "message": "Server Healthy"}


def test_health_check_should_echo_correlation_id(client: TestClient) -> None:
    response = client.get("/api/v1/health", headers={"X-Correlation-ID": "abc-123"})

    assert response.headers["X-Correlation-ID"] == "abc-123"


def test_health_check_db_should_run_select(app, client: TestClient) -> None:
    # Arrange
    session = AsyncMock()
    app.dependency_overrides[get_async_db] = _override_db(session)

    # Act
    response = client.get("/api/v1/health/db")

    # Assert
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    session.execute.assert_awaited_once()


def test_health_check_db_failure_should_return_503(app, client: TestClient) -> None:
    session = AsyncMock()
    session.execute.side_effect = ConnectionRefusedError("connection refused")
    app.dependency_overrides[get_async_db] = _override_db(session)

    response = client.get("/api/v1/health/db")

    assert response.status_code == 503
    assert response.json()["status"] == "unhealthy"


def test_health_check_llm_without_key_should_be_degraded(app, client: TestClient) -> None:
    app.dependency_overrides[get_settings_dependency] = lambda: Settings(
        llm=LLMGatewaySettings(api_key=None)
    )

    response = client.get("/api/v1/health/llm")

    assert response.json() == {"status": "degraded", "message": "LLM_API_KEY is not configured"}


def test_health_check_llm_with_key_should_be_healthy(app, client: TestClient) -> None:
    app.dependency_overrides[get_settings_dependency] = lambda: Settings(
        llm=LLMGatewaySettings(api_key="key", model="google/gemini-2.5-flash")
    )

    response = client.get("/api/v1/health/llm")

    assert response.json()["status"] == "healthy"
    assert "google/gemini-2.5-flash" in response.json()["message"]
