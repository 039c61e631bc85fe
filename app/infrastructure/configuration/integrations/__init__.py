"""Integration settings __init__ - exports all integration settings."""

from infrastructure.configuration.integrations.texterify import TexterifySettings

__all__ = [
    "TexterifySettings",
]
