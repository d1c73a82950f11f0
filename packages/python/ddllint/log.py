"""Structlog setup for ddllint.

Loggers are structlog wrappers around stdlib loggers under the ``ddllint``
namespace, so the host application's logging levels and handlers decide
what is shown. The CLI calls :func:`configure_logging`.
"""

from __future__ import annotations

import logging
import sys

import structlog
from structlog.stdlib import BoundLogger

ROOT_LOGGER = "ddllint"

_PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.format_exc_info,
    structlog.dev.ConsoleRenderer(colors=False),
]

logging.getLogger(ROOT_LOGGER).addHandler(logging.NullHandler())
_stderr_handler: logging.StreamHandler | None = None


def _level_for(verbosity: int) -> int:
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity >= 1:
        return logging.INFO
    return logging.WARNING


def configure_logging(verbosity: int = 0) -> None:
    """Send ddllint log records to stderr.

    Args:
        verbosity: 0 = WARNING, 1 = INFO, 2+ = DEBUG.
    """
    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(_level_for(verbosity))

    global _stderr_handler
    if _stderr_handler is None:
        _stderr_handler = logging.StreamHandler(sys.stderr)
        _stderr_handler.setFormatter(logging.Formatter("%(message)s"))
        root.addHandler(_stderr_handler)
    else:
        _stderr_handler.setStream(sys.stderr)


def get_logger(name: str) -> BoundLogger:
    """Get a structlog logger with the specified name."""
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_PROCESSORS,
        wrapper_class=BoundLogger,
    )
