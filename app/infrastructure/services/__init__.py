"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    SettingsDep,
    TexterifyClientDep,
)
from infrastructure.services.providers import (
    get_settings,
    get_texterify_client,
)

__all__ = [
    "SettingsDep",
    "TexterifyClientDep",
    "get_settings",
    "get_texterify_client",
]
