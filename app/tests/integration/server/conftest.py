"""Fixtures for server integration tests."""

from unittest.mock import MagicMock

import pytest

from infrastructure.clients.texterify import TexterifyClient


@pytest.fixture
def mock_texterify_client():
    """Mock TexterifyClient handed out by the lifespan provider."""
    return MagicMock(spec=TexterifyClient)


@pytest.fixture
def lifespan_providers(monkeypatch, settings, mock_texterify_client):
    """Point the lifespan at test settings and a mock client."""
    provider = MagicMock(return_value=mock_texterify_client)
    monkeypatch.setattr("server.lifespan.get_settings", lambda: settings)
    monkeypatch.setattr("server.lifespan.get_texterify_client", provider)
    return provider
