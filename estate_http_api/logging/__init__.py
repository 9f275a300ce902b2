# estate_http_api/logging/__init__.py

"""
Logging helpers for the Estate HTTP API.

API code obtains loggers through this module so it stays decoupled from the
concrete structlog setup:

    from estate_http_api.logging import get_logger

    log = get_logger(__name__)
    log.info("signature_created", signature_id=42)

``configure_logging`` in ``estate_http_api.logging.config`` must run once at
process startup (the application lifespan does this).
"""

from __future__ import annotations

from typing import Any, Optional

import structlog


DEFAULT_LOGGER_NAME = "estate_http_api"


def get_logger(name: Optional[str] = None, **initial_values: Any) -> Any:
    """
    Return a structlog bound logger.

    If ``name`` is omitted, the service-level default name is used.
    Extra keyword arguments are bound as permanent context on the logger.
    """
    return structlog.get_logger(name or DEFAULT_LOGGER_NAME, **initial_values)


__all__ = ["get_logger", "DEFAULT_LOGGER_NAME"]
