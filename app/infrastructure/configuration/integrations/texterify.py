"""Texterify integration settings."""

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class TexterifySettings(IntegrationSettings):
    """Texterify API configuration.

    Environment Variables:
        TEXTERIFY_AUTH_EMAIL: Email of the account used to call the API (required)
        TEXTERIFY_AUTH_SECRET: Access token of that account (required)
        TEXTERIFY_PROJECT_ID: Default project used when a tool call omits project_id
        TEXTERIFY_API_BASE_URL: API base URL (default: https://app.texterify.com/api)
        TEXTERIFY_API_VERSION: API version path segment (default: v1)
        TEXTERIFY_REQUEST_TIMEOUT: Per-request deadline in seconds (default: 30)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        project_id = settings.texterify.TEXTERIFY_PROJECT_ID
        ```
    """

    TEXTERIFY_AUTH_EMAIL: str | None = Field(default=None, alias="TEXTERIFY_AUTH_EMAIL")
    TEXTERIFY_AUTH_SECRET: str | None = Field(
        default=None, alias="TEXTERIFY_AUTH_SECRET"
    )
    TEXTERIFY_PROJECT_ID: str | None = Field(default=None, alias="TEXTERIFY_PROJECT_ID")
    TEXTERIFY_API_BASE_URL: str = Field(
        default="https://app.texterify.com/api", alias="TEXTERIFY_API_BASE_URL"
    )
    TEXTERIFY_API_VERSION: str = Field(default="v1", alias="TEXTERIFY_API_VERSION")
    TEXTERIFY_REQUEST_TIMEOUT: float = Field(
        default=30, gt=0, alias="TEXTERIFY_REQUEST_TIMEOUT"
    )

    def missing_credentials(self) -> list[str]:
        """Return the names of required credential variables that are unset."""
        missing = []
        if not self.TEXTERIFY_AUTH_EMAIL:
            missing.append("TEXTERIFY_AUTH_EMAIL")
        if not self.TEXTERIFY_AUTH_SECRET:
            missing.append("TEXTERIFY_AUTH_SECRET")
        return missing
