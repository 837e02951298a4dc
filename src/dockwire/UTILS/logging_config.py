"""Structured logging for dockwire."""

import logging
import sys
from typing import Any, List

import structlog
from structlog.types import Processor


def configure_logging(level: str = "INFO", json_output: bool = False) -> None:
    """
    Configure structlog for applications embedding dockwire.

    The library never calls this itself. Its loggers write to the stdlib
    ``dockwire`` logger, which stays silent until the application configures
    logging.

    :param level: Standard logging level name.
    :param json_output: Render events as JSON lines instead of console text.
    """
    processors: List[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=sys.stderr.isatty(),
                exception_formatter=structlog.dev.plain_traceback,
            )
        )

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
        level=getattr(logging, level.upper()),
    )


def get_logger(name: str) -> Any:
    """
    Get a structlog logger bound to the stdlib logger ``name``.

    Events run through the structlog processors in effect and are handed to
    stdlib logging, never printed directly.
    """
    return structlog.wrap_logger(logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger)
