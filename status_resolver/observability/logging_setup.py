"""Structured logging configuration and logger factories."""

from __future__ import annotations

import logging
import sys
from typing import Any, Literal

import structlog
from structlog.types import Processor

_LOGGER_NAMESPACE = "status_resolver"


def observability_configure_logging(
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO",
    log_format: Literal["console", "json"] = "console",
) -> None:
    """Configure structlog on top of stdlib logging for the whole process.

    Args:
        level: Minimum emitted log level.
        log_format: `console` for human-readable output, `json` for one JSON object per line.

    Returns:
        None: Configures global logging state as side effect.

    Raises:
        ValueError: Raised when level or format is unsupported.
    """

    normalized_level = level.upper()
    if normalized_level not in {"DEBUG", "INFO", "WARNING", "ERROR"}:
        raise ValueError(f"unsupported log level: {level}")
    if log_format not in {"console", "json"}:
        raise ValueError(f"unsupported log format: {log_format}")

    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(exception_formatter=structlog.dev.plain_traceback))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, normalized_level),
        force=True,
    )
    logging.getLogger(_LOGGER_NAMESPACE).setLevel(getattr(logging, normalized_level))


def observability_get_logger(name: str = _LOGGER_NAMESPACE) -> Any:
    """Return a structlog logger for one component.

    Args:
        name: Stdlib logger name backing the structlog logger.

    Returns:
        Any: Bound structlog logger.
    """

    return structlog.get_logger(name)


def _drop_every_event(_logger: Any, _method_name: str, _event_dict: Any) -> Any:
    raise structlog.DropEvent


def observability_create_null_logger() -> Any:
    """Return a structlog logger that discards every event.

    Returns:
        Any: Bound logger whose processor chain drops all events.
    """

    return structlog.wrap_logger(structlog.ReturnLogger(), processors=[_drop_every_event])
