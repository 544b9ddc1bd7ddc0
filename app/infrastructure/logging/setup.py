"""Structlog configuration for the lookup service.

Console output in development, one JSON object per line in production, and
silence under pytest.

Usage:
    from infrastructure.logging import configure_logging, get_module_logger

    configure_logging()

    logger = get_module_logger()
    logger.info("translations_loaded", root_count=2)
"""

import inspect
import logging
import sys
from typing import TYPE_CHECKING, Any, List, Optional

import structlog
from structlog.stdlib import BoundLogger

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

# Above CRITICAL, so nothing reaches a handler
SILENT_LEVEL = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    """Return True when running under pytest."""
    return "pytest" in sys.modules


def _shared_processors() -> List[Any]:
    return [
        # root_id / load_id bound while a workspace root is loading
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
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def _configure_silent() -> BoundLogger:
    logging.root.setLevel(SILENT_LEVEL)
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=SILENT_LEVEL, force=True)
    return structlog.stdlib.get_logger()


def configure_logging(
    settings: Optional["Settings"] = None,
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog and the standard library root logger.

    Args:
        settings: Settings to read LOG_LEVEL and is_production from. Defaults
            to the cached application settings.
        log_level: Overrides settings.LOG_LEVEL.
        is_production: Overrides settings.is_production; selects JSON output.

    Returns:
        A logger bound to the new configuration.
    """
    if _is_test_environment():
        return _configure_silent()

    if settings is None:
        from infrastructure.services.providers import get_settings

        settings = get_settings()

    json_output = settings.is_production if is_production is None else is_production
    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=_shared_processors() + [renderer],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    level_name = (log_level or settings.LOG_LEVEL).upper()
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level_name, logging.INFO),
    )

    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Return a logger bound to the calling module.

    The logger carries ``component`` (last dotted part of the module name)
    and ``module_path`` (full module name), e.g. "tree" and
    "infrastructure.i18n.tree".
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    module = inspect.getmodule(caller) if caller is not None else None
    if module is None:
        return logger.bind(component="unknown")

    return logger.bind(
        component=module.__name__.rsplit(".", 1)[-1],
        module_path=module.__name__,
    )
