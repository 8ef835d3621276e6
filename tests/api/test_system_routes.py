"""API tests for host system routes.

Validates behavior of root and health endpoints, the docs toggle and the
trace header added to every response.
"""

import pytest
from fastapi.testclient import TestClient

from src.core.config import Settings
from src.core.enums import Environment
from src.main import app as default_app
from src.main import create_app


@pytest.mark.api
class TestSystemRoutes:
    """Test root and health endpoints."""

    def test_root_endpoint_returns_status_and_version(self, client, test_settings):
        """Root endpoint should return operational status and app version."""
        response = client.get("/")

        assert response.status_code == 200
        data = response.json()

        assert data["message"] == test_settings.app_name
        assert data["status"] == "operational"
        assert data["version"] == test_settings.app_version

    def test_health_endpoint_returns_healthy_status(self, client):
        """Health endpoint should return a healthy status indicator."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_module_level_app_serves_catalog(self):
        with TestClient(default_app) as client:
            assert client.get("/v1/catalog/ping").status_code == 200


@pytest.mark.api
class TestApiDocs:
    """Test API docs are exposed only in development."""

    def test_docs_disabled_outside_development(self, client):
        assert client.get("/docs").status_code == 404

    def test_docs_enabled_in_development(self):
        app = create_app(Settings(environment=Environment.DEVELOPMENT))

        with TestClient(app) as client:
            assert client.get("/docs").status_code == 200


@pytest.mark.api
class TestTraceHeader:
    """Test X-Trace-Id propagation."""

    def test_trace_id_generated(self, client):
        response = client.get("/health")

        assert response.headers["x-trace-id"]

    def test_incoming_trace_id_reused(self, client):
        response = client.get("/health", headers={"X-Trace-Id": "trace-123"})

        assert response.headers["x-trace-id"] == "trace-123"
