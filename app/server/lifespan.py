from contextlib import asynccontextmanager
from typing import AsyncIterator, TYPE_CHECKING

from fastapi import FastAPI
from structlog.stdlib import BoundLogger

from infrastructure.configuration import ConfigurationError
from infrastructure.logging import configure_logging
from infrastructure.services import get_settings, get_texterify_client
from packages.texterify.registry import build_tool_registry

if TYPE_CHECKING:
    from infrastructure.configuration import Settings


def _get_logger(settings: "Settings") -> BoundLogger:
    return configure_logging(settings=settings)


def _list_configs(settings: "Settings", logger: BoundLogger) -> None:
    config_settings: dict[str, list[object]] = {"settings": []}

    for key, value in settings.model_dump().items():
        if isinstance(value, dict):
            config_settings[key] = list(value.keys())
        else:
            config_settings["settings"].append({key: value})

    logger.info("configuration_initialized", base_settings=config_settings["settings"])
    for key, value in config_settings.items():
        if key != "settings":
            logger.info("configuration_loaded", config_setting=key, keys=value)


def _validate_settings(settings: "Settings", logger: BoundLogger) -> None:
    try:
        settings.validate_required()
    except ConfigurationError as exc:
        logger.error("configuration_invalid", error=str(exc))
        raise


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    logger = _get_logger(settings)

    app.state.settings = settings
    app.state.logger = logger

    logger.info("application_startup")
    _list_configs(settings, logger)
    _validate_settings(settings, logger)

    client = get_texterify_client()
    app.state.texterify_client = client
    app.state.tool_registry = build_tool_registry(client, settings)

    yield

    logger.info("application_shutdown")

    client.close()
    get_texterify_client.cache_clear()
    logger.info("texterify_client_closed")
