"""Texterify tool server configuration settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

# Integration settings
from infrastructure.configuration.integrations import TexterifySettings

# Infrastructure settings
from infrastructure.configuration.infrastructure import ServerSettings


class ConfigurationError(Exception):
    """Raised when required configuration is missing at startup."""


class Settings(BaseSettings):
    """Tool server configuration settings - main aggregator.

    Aggregates all domain-specific settings into a single configuration object.
    Settings are organized by concern:

    - **Integrations**: External service configuration (Texterify API)
    - **Infrastructure**: Core system configuration (HTTP server)

    There is no module-level instance. The composition root obtains one from
    ``infrastructure.services.get_settings()`` and passes it explicitly to
    every component, so tests can build independent settings per case.

    Environment Variables:
        PREFIX: Environment prefix; empty means production
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        GIT_SHA: Git commit SHA for deployment tracking

    Example:
        ```python
        settings = Settings(
            texterify=TexterifySettings(
                TEXTERIFY_AUTH_EMAIL="dev@example.com",
                TEXTERIFY_AUTH_SECRET="secret",
            )
        )
        client = TexterifyClient(settings)
        ```
    """

    # Application-level settings
    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    GIT_SHA: str = "Unknown"

    # Integration settings
    texterify: TexterifySettings

    # Infrastructure settings
    server: ServerSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if PREFIX is empty (production), False otherwise.
        """
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            "texterify": TexterifySettings,
            "server": ServerSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    def validate_required(self) -> None:
        """Fail fast when required credentials are absent.

        Raises:
            ConfigurationError: naming every missing environment variable
        """
        missing = self.texterify.missing_credentials()
        if missing:
            raise ConfigurationError(
                f"Missing required environment variables: {', '.join(missing)}"
            )

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )
