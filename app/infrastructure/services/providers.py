"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
"""

from functools import lru_cache

from infrastructure.clients.texterify import TexterifyClient
from infrastructure.configuration import Settings


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The composition root (server lifespan, CLI entry point) calls this once and
    hands the instance to every component it builds. Components never import it
    themselves.

    Application code should use the DI type alias for testability:
        from infrastructure.services import SettingsDep
        @router.get("/version")
        def get_version(settings: SettingsDep):
            return {"version": settings.GIT_SHA}

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_texterify_client() -> TexterifyClient:
    """Provider for the shared Texterify API client.

    One client (and one pooled HTTP session) per process. The server lifespan
    closes it on shutdown and clears this cache.

    Returns:
        TexterifyClient: Client configured from application settings.
    """
    return TexterifyClient(get_settings())
