"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the
Texterify tool server using Pydantic BaseSettings with domain-based
organization.

Exports:
    Settings: Main settings class
    ConfigurationError: Raised when required settings are missing
    TexterifySettings: Texterify API settings class
    ServerSettings: HTTP server settings class

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    base_url = settings.texterify.TEXTERIFY_API_BASE_URL
    if settings.is_production:
        # Production-specific logic...
    ```
"""

from infrastructure.configuration.settings import ConfigurationError, Settings
from infrastructure.configuration.integrations import TexterifySettings
from infrastructure.configuration.infrastructure import ServerSettings

__all__ = ["Settings", "ConfigurationError", "TexterifySettings", "ServerSettings"]
