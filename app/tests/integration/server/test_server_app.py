"""Integration tests for the assembled FastAPI application."""

import uuid

import pytest
from fastapi.testclient import TestClient

from infrastructure.services import get_settings
from server.server import CORRELATION_HEADER, handler


@pytest.fixture
def client(lifespan_providers, settings, no_rate_limit):
    handler.dependency_overrides[get_settings] = lambda: settings
    with TestClient(handler) as client:
        yield client
    handler.dependency_overrides.clear()


@pytest.mark.integration
def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.integration
def test_version_reports_git_sha(client, settings):
    response = client.get("/version")

    assert response.json() == {"version": settings.GIT_SHA}


@pytest.mark.integration
def test_tools_are_mounted(client):
    response = client.get("/tools")

    assert response.status_code == 200
    assert len(response.json()) == 9


@pytest.mark.integration
def test_correlation_id_is_echoed(client):
    response = client.get("/health", headers={CORRELATION_HEADER: "req-42"})

    assert response.headers[CORRELATION_HEADER] == "req-42"


@pytest.mark.integration
def test_correlation_id_is_generated(client):
    response = client.get("/health")

    uuid.UUID(response.headers[CORRELATION_HEADER])
