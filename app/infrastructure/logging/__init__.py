"""Structured logging for the lookup service (structlog).

Call configure_logging() once at startup, take a module logger with
get_module_logger(), and wrap root (re)loads in bind_root_context() so that
every event emitted during the load carries root_id and load_id:

    logger = get_module_logger()

    with bind_root_context(root_id="shop"):
        logger.info("locale_file_loaded", file="config/locales/en.yml")
"""

from infrastructure.logging.setup import (
    configure_logging,
    get_module_logger,
)
from infrastructure.logging.context import (
    bind_root_context,
    get_load_id,
    clear_root_context,
)

__all__ = [
    "configure_logging",
    "get_module_logger",
    "bind_root_context",
    "get_load_id",
    "clear_root_context",
]
