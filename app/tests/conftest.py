"""Shared fixtures for the Texterify tool server tests."""

import pytest

from infrastructure.configuration import Settings, TexterifySettings
from infrastructure.logging import configure_logging


@pytest.fixture(scope="session", autouse=True)
def quiet_logging():
    """Install the test logging configuration once for the session."""
    configure_logging()


@pytest.fixture
def make_settings(monkeypatch):
    """Factory building Settings independent of the process environment.

    Example:
        settings = make_settings(TEXTERIFY_PROJECT_ID=None)
    """
    for name in (
        "TEXTERIFY_AUTH_EMAIL",
        "TEXTERIFY_AUTH_SECRET",
        "TEXTERIFY_PROJECT_ID",
        "TEXTERIFY_API_BASE_URL",
        "TEXTERIFY_API_VERSION",
        "TEXTERIFY_REQUEST_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)

    def _make(**texterify_overrides):
        values = {
            "TEXTERIFY_AUTH_EMAIL": "dev@example.com",
            "TEXTERIFY_AUTH_SECRET": "s3cret",
            "TEXTERIFY_PROJECT_ID": "project-default",
        }
        values.update(texterify_overrides)
        return Settings(
            texterify=TexterifySettings(_env_file=None, **values),
        )

    return _make


@pytest.fixture
def settings(make_settings):
    return make_settings()
