"""
Centralized structured logging configuration.
Import and call `setup_logging()` once at startup: the app.py lifespan
logs to stdout, the CLI logs to stderr so stdout carries only the
response envelope.
"""

from typing import TextIO

import structlog


def setup_logging(
    level: int = 20,
    json_output: bool = False,
    stream: TextIO | None = None,
) -> None:
    """
    Configure structlog for the bridge.

    Args:
        level: Minimum log level (10=DEBUG, 20=INFO, 30=WARNING).
        json_output: If True, emit machine-readable JSON logs (for production).
                     If False, emit human-readable console logs.
        stream: Where log lines are written. Defaults to stdout.
    """
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        # No ANSI colours when logs go to a redirected stream such as the CLI's stderr.
        colors = stream is None or stream.isatty()
        processors.append(structlog.dev.ConsoleRenderer(colors=colors))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
    )
