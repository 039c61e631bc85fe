"""Test fixtures for Texterify tool route integration tests."""

import pytest
from unittest.mock import Mock
from fastapi import FastAPI
from fastapi.testclient import TestClient

from api.dependencies.rate_limits import setup_rate_limiter
from infrastructure.clients.texterify import TexterifyClient
from infrastructure.operations import OperationResult


@pytest.fixture
def texterify_client():
    """TexterifyClient mock; every call succeeds with an empty list by default."""
    client = Mock(spec=TexterifyClient)
    empty = OperationResult.success(data={"data": [], "meta": {"total": 0}})
    for method in (
        "list_projects",
        "list_languages",
        "list_keys",
        "get_key",
        "create_key",
        "update_key",
        "delete_keys",
        "create_translation",
    ):
        getattr(client, method).return_value = empty
    return client


@pytest.fixture
def app(texterify_client, settings):
    """Create FastAPI app with the tools router and a registry on app.state."""
    from packages.texterify.registry import build_tool_registry
    from packages.texterify.routes import router

    app = FastAPI()
    setup_rate_limiter(app)
    app.include_router(router)
    app.state.tool_registry = build_tool_registry(texterify_client, settings)
    return app


@pytest.fixture
def client(app, no_rate_limit):
    """Create test client with rate limiting disabled."""
    with TestClient(app) as client:
        yield client
