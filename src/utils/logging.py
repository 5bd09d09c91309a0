"""Structured logging setup using structlog.

The datasource logs to stderr only: ``lookup --json`` writes its result to
stdout, and a log line there would corrupt the JSON.  Callers that want the
records elsewhere (tests, an embedding service) pass their own ``stream``.

One processor chain is shared by structlog and by the stdlib ``logging``
bridge, so httpx's own records render the same way ours do.  The final
renderer is JSON when ``json_output`` is set or ``APP_ENV`` is
``"production"``, and a console renderer otherwise; colours are only used
when the stream is a terminal.
"""

import logging
import os
import sys
from typing import TextIO

import structlog


def _build_renderer(use_json: bool, stream: TextIO) -> structlog.types.Processor:
    if use_json:
        return structlog.processors.JSONRenderer()
    isatty = getattr(stream, "isatty", None)
    return structlog.dev.ConsoleRenderer(colors=bool(isatty and isatty()))


def configure_logging(
    log_level: str = "INFO",
    json_output: bool = False,
    stream: TextIO | None = None,
) -> structlog.BoundLogger:
    """Configure structlog and the stdlib root logger for the datasource.

    Args:
        log_level: Logging level string (DEBUG, INFO, WARNING, ERROR).
        json_output: Force JSON output.  When False, JSON is still used if
                     ``APP_ENV`` is ``"production"``.
        stream: Where records are written; ``sys.stderr`` when omitted.

    Returns:
        A configured structlog BoundLogger.
    """
    stream = stream or sys.stderr
    use_json = json_output or os.environ.get("APP_ENV", "development") == "production"
    level = logging.getLevelName(log_level.upper())

    # contextvars first so bound lookup context is visible to later processors.
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    renderer = _build_renderer(use_json, stream)

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *shared_processors,
            renderer,
        ],
    )
    handler = logging.StreamHandler(stream)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    return structlog.get_logger()


def get_logger(name: str) -> structlog.BoundLogger:
    """Return a structlog logger bound with ``logger_name``.

    Configures logging with defaults on first use.
    """
    if not structlog.is_configured():
        configure_logging()

    return structlog.get_logger(logger_name=name)
