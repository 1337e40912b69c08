# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Integration tests for health endpoints."""

from unittest.mock import AsyncMock, patch

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.api.routes import health


@pytest.fixture
def health_client():
    """Create test client with only the health router."""
    app = FastAPI()
    app.include_router(health.router)
    return TestClient(app)


class TestHealthEndpoints:
    """Tests for health and readiness checks."""

    @patch(
        "src.infrastructure.database.connection.check_database_connection",
        new_callable=AsyncMock,
        return_value=True,
    )
    def test_health_ok(self, mock_check, health_client):
        """Test a reachable database reports healthy."""
        response = health_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["database"]["status"] == "healthy"

    @patch(
        "src.infrastructure.database.connection.check_database_connection",
        new_callable=AsyncMock,
        return_value=False,
    )
    def test_ready_fails_without_database(self, mock_check, health_client):
        """Test readiness is false when the database is unreachable."""
        response = health_client.get("/ready")

        assert response.status_code == 200
        assert response.json()["ready"] is False


class TestAppFactory:
    """Tests for the application factory."""

    def test_create_app_mounts_routers(self):
        """Test health and v1 routes are mounted on the app."""
        from src.api.app import create_app

        app = create_app()
        routes = [route.path for route in app.routes]

        assert "/health" in routes
        assert "/ready" in routes
        assert "/api/v1/domains" in routes
        assert "/api/v1/students/admit" in routes

    @patch(
        "src.infrastructure.database.connection.check_database_connection",
        new_callable=AsyncMock,
        return_value=True,
    )
    def test_request_id_echoed(self, mock_check):
        """Test the request id header is propagated to the response."""
        from src.api.app import create_app

        client = TestClient(create_app())

        response = client.get("/health", headers={"X-Request-ID": "req-42"})

        assert response.headers["X-Request-ID"] == "req-42"
