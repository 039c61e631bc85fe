"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common infrastructure dependencies.
"""

from typing import Annotated
from fastapi import Depends
from infrastructure.clients.texterify import TexterifyClient
from infrastructure.configuration import Settings
from infrastructure.services.providers import get_settings, get_texterify_client

# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Texterify API client dependency
TexterifyClientDep = Annotated[TexterifyClient, Depends(get_texterify_client)]

__all__ = [
    "SettingsDep",
    "TexterifyClientDep",
]
