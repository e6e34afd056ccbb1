"""
Integration tests for liveness, health and metrics endpoints.
"""

import pytest


@pytest.mark.integration
class TestCoreAPI:
    """Integration tests for core endpoints."""

    def test_root(self, client):
        """Test the liveness smoke test."""
        response = client.get("/")

        assert response.status_code == 200
        assert response.json() == {"hello": "world"}

    def test_health(self, client):
        """Test the health check."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"ok": True}

    def test_metrics(self, client, api_client, installed_repository):
        """Test that license metrics are exported."""
        api_client.post("/validate", {"email": "a@x.com"}, format="json")

        response = client.get("/metrics")

        assert response.status_code == 200
        body = response.content.decode()
        assert "license_validations_total" in body
        assert "http_requests_total" in body
