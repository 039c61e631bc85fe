"""Server infrastructure settings."""

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class ServerSettings(InfrastructureSettings):
    """Tool server runtime configuration.

    Environment Variables:
        HOST: Interface the HTTP server binds to (default: 0.0.0.0)
        PORT: Port the HTTP server listens on (default: 8000)

    Example:
        ```python
        from infrastructure.services import get_settings

        port = get_settings().server.PORT
        ```
    """

    HOST: str = Field(default="0.0.0.0", alias="HOST")  # nosec B104
    PORT: int = Field(default=8000, alias="PORT")
