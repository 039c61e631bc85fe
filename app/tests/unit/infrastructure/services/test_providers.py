"""
Unit tests for dependency injection providers.

Tests cover:
- get_settings() and get_texterify_client() caching behavior
- SettingsDep / TexterifyClientDep with FastAPI dependency injection
- Dependency override pattern for testing
"""

import pytest
from unittest.mock import MagicMock
from fastapi.testclient import TestClient
from fastapi import FastAPI

from infrastructure.clients.texterify import TexterifyClient
from infrastructure.configuration import Settings
from infrastructure.services import (
    SettingsDep,
    TexterifyClientDep,
    get_settings,
    get_texterify_client,
)


@pytest.fixture(autouse=True)
def cleanup_provider_cache():
    """Clear provider caches around each test."""
    get_settings.cache_clear()
    get_texterify_client.cache_clear()
    yield
    get_settings.cache_clear()
    get_texterify_client.cache_clear()


@pytest.mark.unit
class TestGetSettings:
    """Tests for get_settings() provider function."""

    def test_get_settings_returns_settings_instance(self):
        assert isinstance(get_settings(), Settings)

    def test_get_settings_returns_cached_instance(self):
        assert get_settings() is get_settings()

    def test_get_settings_cache_can_be_cleared(self):
        instance1 = get_settings()
        get_settings.cache_clear()
        assert get_settings() is not instance1


@pytest.mark.unit
class TestGetTexterifyClient:
    """Tests for get_texterify_client() provider function."""

    def test_client_uses_settings_from_environment(self, monkeypatch):
        monkeypatch.setenv("TEXTERIFY_API_BASE_URL", "http://texterify.local/api/")
        monkeypatch.setenv("TEXTERIFY_API_VERSION", "v2")

        client = get_texterify_client()

        assert isinstance(client, TexterifyClient)
        assert client.base_url == "http://texterify.local/api/v2"
        client.close()

    def test_client_is_shared(self):
        assert get_texterify_client() is get_texterify_client()


@pytest.mark.unit
class TestDependencyOverridePattern:
    """Tests for FastAPI dependency override pattern."""

    def test_settings_dep_with_dependency_override(self):
        app = FastAPI()

        @app.get("/version")
        def get_version(settings: SettingsDep) -> dict:
            return {"version": settings.GIT_SHA}

        mock_settings = MagicMock(spec=Settings)
        mock_settings.GIT_SHA = "abc123"
        app.dependency_overrides[get_settings] = lambda: mock_settings

        with TestClient(app) as client:
            response = client.get("/version")

        assert response.status_code == 200
        assert response.json() == {"version": "abc123"}
        app.dependency_overrides.clear()

    def test_client_dep_with_dependency_override(self):
        app = FastAPI()

        @app.get("/base-url")
        def base_url(client: TexterifyClientDep) -> dict:
            return {"base_url": client.base_url}

        fake_client = MagicMock(spec=TexterifyClient)
        fake_client.base_url = "http://fake/v1"
        app.dependency_overrides[get_texterify_client] = lambda: fake_client

        with TestClient(app) as client:
            response = client.get("/base-url")

        assert response.json() == {"base_url": "http://fake/v1"}
        app.dependency_overrides.clear()
