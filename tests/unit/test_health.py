from __future__ import annotations

from unittest.mock import AsyncMock


def test_health_not_configured_is_healthy(client):
    response = client.get("/api/v1/health")
    data = response.json()
    assert data["status"] == "healthy"
    assert data["services"]["employee_api"] == "not_configured"


def test_health_reports_reachable_backend(managed_client):
    response = managed_client.get("/api/v1/health")
    data = response.json()
    assert data["status"] == "healthy"
    assert data["services"]["employee_api"] == "ok"


def test_health_degraded_when_backend_unreachable(managed_client, mock_sync_client):
    mock_sync_client.check_connection = AsyncMock(return_value=False)

    response = managed_client.get("/api/v1/health")
    data = response.json()
    assert data["status"] == "degraded"
    assert data["services"]["employee_api"] == "error"


def test_readiness_probe(client):
    response = client.get("/api/v1/health/ready")
    assert response.status_code == 200
    data = response.json()
    assert data["ready"] is True
