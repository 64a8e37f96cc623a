"""
Configures structured logging for seodoctor using structlog.
"""

from __future__ import annotations

import logging
import sys
from contextlib import AbstractContextManager, nullcontext
from typing import TYPE_CHECKING, Any, List, Mapping

import structlog

if TYPE_CHECKING:
    from seodoctor.config.config import MonitoringConfig


def configure_logging(config: MonitoringConfig) -> None:
    """
    Sets up structlog to handle all logging for the application.
    """
    shared_processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    log_renderer: Any
    if config.log_file:
        # Structured JSON logging for file output
        log_renderer = structlog.processors.JSONRenderer(ensure_ascii=False)
        handler: logging.Handler = logging.FileHandler(config.log_file, encoding="utf-8")
    else:
        # Console output goes to stderr so JSON reports on stdout stay clean
        log_renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
        handler = logging.StreamHandler(sys.stderr)

    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                log_renderer,
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(config.log_level.upper())

    structlog.configure(
        processors=shared_processors
        + [
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("seodoctor.logging")
    logger.debug("Logging configured", level=config.log_level, output=config.log_file or "console")


def entity_context(data: Any) -> AbstractContextManager[Any]:
    """
    Bind ``entity_id`` for every log record emitted while ``data`` is scored.

    The id is the first of ``id``, ``slug`` or ``name`` that is set; nothing
    is bound for unidentifiable input.
    """
    if isinstance(data, Mapping):
        for key in ("id", "slug", "name"):
            value = data.get(key)
            if value not in (None, ""):
                return structlog.contextvars.bound_contextvars(entity_id=str(value))
    return nullcontext()
