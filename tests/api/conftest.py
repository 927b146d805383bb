"""Shared fixtures for API tests."""

import pytest
from fastapi.testclient import TestClient

from nusaf_catalog.infrastructure.config import settings
from nusaf_catalog.main import app


@pytest.fixture
def client() -> TestClient:
    """Create test client without authentication."""
    return TestClient(app)


@pytest.fixture
def auth_client() -> TestClient:
    """Create test client with valid API key authentication."""
    return TestClient(
        app,
        headers={"Authorization": f"Bearer {settings.api_key}"},
    )
