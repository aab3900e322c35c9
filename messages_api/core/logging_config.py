"""Structlog loggers scoped to the ``messages_api`` logger tree.

Loggers are bound per name with ``structlog.wrap_logger`` so the global
structlog configuration of a host application is left alone. Nothing is
printed until ``configure_logging`` attaches a handler to the package logger;
the root logger is never touched.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any

import structlog
from structlog.types import EventDict, Processor

from .config import get_settings

PACKAGE_LOGGER = "messages_api"

_PROCESSORS: list[Processor] = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
    structlog.processors.format_exc_info,
    structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
]


def _render_line(_: Any, __: str, event_dict: EventDict) -> str:
    """Render ``timestamp [LEVEL] logger event key=value ...``."""

    head = [
        event_dict.pop("timestamp", ""),
        f"[{str(event_dict.pop('level', 'info')).upper()}]",
        event_dict.pop("logger", ""),
        event_dict.pop("event", ""),
    ]
    tail = [f"{key}={value}" for key, value in event_dict.items() if value is not None]
    return " ".join(part for part in head + tail if part)


def _formatter() -> structlog.stdlib.ProcessorFormatter:
    return structlog.stdlib.ProcessorFormatter(
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, _render_line],
    )


def configure_logging() -> logging.Logger:
    """Attach console (and optional file) output to the package logger once."""

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if package_logger.handlers:
        return package_logger

    settings = get_settings()
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]

    log_file = (settings.log_file or "").strip()
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(_formatter())
        package_logger.addHandler(handler)
    package_logger.setLevel(settings.log_level)
    package_logger.propagate = False
    return package_logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger bound to the stdlib logger ``name``."""

    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    )
