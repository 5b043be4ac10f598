"""Tests for health check endpoints."""

import pytest
from unittest.mock import patch, MagicMock
from fastapi.testclient import TestClient


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


class TestHealthEndpoints:
    """Tests for health check endpoints."""

    def test_health_check(self, client):
        """Health endpoint should return 200 with status."""
        response = client.get("/api/health")
        assert response.status_code == 200
        data = response.json()
        assert data == {"status": "healthy", "version": "0.1.0"}

    @patch("api.routes.health.get_settings")
    @patch("api.routes.health.get_supabase_client")
    def test_ready_when_configured(self, mock_db, mock_settings, client):
        mock_db.return_value = MagicMock()
        mock_settings.return_value.jwt_secret = "configured"

        response = client.get("/api/ready")

        assert response.status_code == 200
        assert response.json() == {"status": "ready", "database": "configured", "auth": "configured"}

    @patch("api.routes.health.get_settings")
    @patch("api.routes.health.get_supabase_client")
    def test_not_ready_without_database(self, mock_db, mock_settings, client):
        mock_db.side_effect = RuntimeError("Supabase configuration missing.")
        mock_settings.return_value.jwt_secret = "configured"

        response = client.get("/api/ready")

        assert response.status_code == 503
        assert response.json()["database"] == "unconfigured"

    @patch("api.routes.health.get_settings")
    @patch("api.routes.health.get_supabase_client")
    def test_not_ready_without_secret(self, mock_db, mock_settings, client):
        mock_db.return_value = MagicMock()
        mock_settings.return_value.jwt_secret = ""

        response = client.get("/api/ready")

        assert response.status_code == 503
        assert response.json()["auth"] == "unconfigured"
