"""structlog configuration and module loggers.

Usage:
    from infrastructure.logging import configure_logging, get_module_logger

    # Once, at application startup
    configure_logging(settings=settings)

    # At module import time
    logger = get_module_logger()
    logger.info("language_codes_resolved", codes=["de", "en"])
"""

import inspect
import logging
import sys
from typing import TYPE_CHECKING, Any, List, Optional

import structlog
from structlog.stdlib import BoundLogger

from infrastructure.logging.formatters import (
    add_service_context,
    mask_sensitive_data,
    truncate_large_values,
)

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

APP_NAME = "texterify-tools"
RESPONSE_BODY_LIMIT = 1000


def _is_test_environment() -> bool:
    """True when running under pytest."""
    return "pytest" in sys.modules


def _silence_for_tests() -> BoundLogger:
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(
        format="%(message)s", level=logging.CRITICAL + 1, force=True
    )
    return structlog.stdlib.get_logger()


def build_processors(
    app_version: str, environment: str, json_output: bool
) -> List[Any]:
    """Return the processor chain, ending in a JSON or console renderer."""
    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer()
    )
    return [
        # correlation_id / tool / request_path bound per request
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        add_service_context(APP_NAME, app_version, environment),
        mask_sensitive_data(),
        truncate_large_values(max_length=RESPONSE_BODY_LIMIT),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        renderer,
    ]


def configure_logging(
    settings: Optional["Settings"] = None,
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog and the stdlib root logger.

    Production (empty PREFIX) renders JSON lines; any other environment
    renders for the console. Under pytest all output is suppressed.

    Args:
        settings: Provides LOG_LEVEL, GIT_SHA and PREFIX
        log_level: Overrides ``settings.LOG_LEVEL``
        is_production: Overrides ``settings.is_production``

    Returns:
        Configured logger instance
    """
    if _is_test_environment():
        return _silence_for_tests()

    if is_production is None:
        is_production = settings.is_production if settings is not None else False
    app_version = settings.GIT_SHA if settings is not None else "unknown"
    if is_production:
        environment = "production"
    else:
        environment = (settings.PREFIX if settings is not None else "") or "dev"

    structlog.configure(
        processors=build_processors(app_version, environment, is_production),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    level_name = log_level or (settings.LOG_LEVEL if settings else "INFO")
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level_name.upper(), logging.INFO),
        force=True,
    )
    return structlog.stdlib.get_logger()


def get_module_logger() -> BoundLogger:
    """Get a logger bound to the calling module.

    Binds ``component`` (last dotted segment) and ``module_path``. The
    logger is lazy, so creating it at import time before
    ``configure_logging`` runs is fine.

    Example:
        # in packages/texterify/registry.py
        logger = get_module_logger()
        # {"component": "registry", "module_path": "packages.texterify.registry"}
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    module = inspect.getmodule(caller) if caller is not None else None
    if module is None:
        return structlog.stdlib.get_logger(component="unknown")

    module_name = module.__name__
    return structlog.stdlib.get_logger(
        component=module_name.split(".")[-1],
        module_path=module_name,
    )
