# estate_http_api/logging/config.py

"""
Configures structlog and the standard logging library to emit structured
JSON logs (production) or colored console logs (development).

Typical usage in the API entrypoint (``estate_http_api/main.py``)::

    from estate_http_api.logging.config import configure_logging

    configure_logging()
"""

from __future__ import annotations

import logging
import sys
from typing import Any, List, Optional

import structlog
from opentelemetry import trace

from estate_http_api.config import Settings, get_settings


def add_open_telemetry_spans(_: Any, __: str, event_dict: dict) -> dict:
    """
    Processor to inject the current TraceID and SpanID into the log entry.
    """
    span = trace.get_current_span()
    if not span.is_recording():
        event_dict["trace_id"] = None
        event_dict["span_id"] = None
        return event_dict

    ctx = span.get_span_context()
    event_dict["trace_id"] = format(ctx.trace_id, "032x")
    event_dict["span_id"] = format(ctx.span_id, "016x")
    return event_dict


def _parse_level(value: Optional[str]) -> int:
    """
    Map a level name (e.g. 'DEBUG', 'info') to a logging constant.
    Unknown names fall back to INFO.
    """
    if not value:
        return logging.INFO
    level = logging.getLevelName(value.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(settings: Optional[Settings] = None) -> None:
    """
    Initialize structlog for the service.

    Safe to call more than once; the latest call wins.
    """
    cfg = settings or get_settings()
    level = _parse_level(cfg.LOG_LEVEL)

    processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        add_open_telemetry_spans,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if cfg.LOG_FORMAT == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Uvicorn / SQLAlchemy use the standard library; keep their output on
    # the same stream at the same level.
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )


__all__ = ["configure_logging", "add_open_telemetry_spans"]
