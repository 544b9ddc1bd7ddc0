"""Load context binding for structured logging.

This module provides utilities for binding load-scoped context to logs,
so that every log entry emitted while a workspace root is (re)loaded
carries the root identifier and a load identifier.

Usage:
    from infrastructure.logging import bind_root_context

    with bind_root_context(root_id="shop"):
        # All logs within this block will include the context
        logger.info("locale_file_loaded")

Dependencies:
    - structlog.contextvars
"""

import uuid
from contextlib import contextmanager
from typing import Optional, Any, Generator
import structlog


@contextmanager
def bind_root_context(
    root_id: str,
    load_id: Optional[str] = None,
    **extra_context: Any,
) -> Generator[None, None, None]:
    """Bind root-scoped context to all logs within the context manager.

    Args:
        root_id: Workspace root identifier being loaded.
        load_id: Unique identifier of the load pass. Auto-generated if not provided.
        **extra_context: Additional key-value pairs to include in logs.

    Yields:
        None - context is automatically bound to structlog's context vars.

    Example:
        with bind_root_context(root_id="shop", trigger="file_changed"):
            service.reload_file(path)
    """
    context: dict[str, Any] = {
        "root_id": root_id,
        "load_id": load_id or str(uuid.uuid4()),
    }
    context.update(extra_context)

    structlog.contextvars.bind_contextvars(**context)
    try:
        yield
    finally:
        structlog.contextvars.unbind_contextvars(*context.keys())


def get_load_id() -> Optional[str]:
    """Get the current load ID from the logging context.

    Returns:
        The load ID if set, None otherwise.
    """
    ctx = structlog.contextvars.get_contextvars()
    return ctx.get("load_id")


def clear_root_context() -> None:
    """Clear all load-scoped context from the logging context."""
    structlog.contextvars.clear_contextvars()
