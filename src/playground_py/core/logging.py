"""Structured logging configuration for playground-py.

Session handlers bind ``session_id`` through ``structlog.contextvars``, so
``merge_contextvars`` must stay first in the processor chain.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, TextIO

import structlog

if TYPE_CHECKING:
    from playground_py.config import PlaygroundConfig


def configure_logging(*, debug: bool = False, json_logs: bool = False, stream: TextIO | None = None) -> None:
    """Configure structured logging for playground sessions.

    Args:
        debug: Enable debug level logging (per-edit and selection events).
        json_logs: Output logs as JSON lines instead of the console renderer.
        stream: Where log lines are written. Defaults to stderr so command
            output on stdout stays machine readable.
    """
    processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if json_logs:
        processors.extend([structlog.processors.format_exc_info, structlog.processors.JSONRenderer()])
    else:
        processors.extend(
            [
                structlog.processors.ExceptionPrettyPrinter(),
                structlog.dev.ConsoleRenderer(colors=stream is None and sys.stderr.isatty()),
            ]
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG if debug else logging.INFO),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream or sys.stderr),
        cache_logger_on_first_use=False,
    )


def configure_from(config: PlaygroundConfig, *, debug: bool | None = None) -> None:
    """Configure logging from a session configuration.

    Args:
        config: The configuration supplying the debug and JSON flags.
        debug: Overrides ``config.debug`` when not None.
    """
    configure_logging(debug=config.debug if debug is None else debug, json_logs=config.json_logs)
