"""structlog setup shared by the CLI and library callers.

Package loggers hand every event to a standard library logger of the same
name. Until ``configure_logging`` runs, the standard library defaults
therefore apply: debug events are dropped and warnings reach stderr, so
importing and calling the library never writes to stdout.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

__all__ = [
    "configure_logging",
    "get_logger",
]


def configure_logging(*, debug: bool = False, json_logs: bool = False) -> None:
    """Configure structured logging for stringmetrics.

    Log lines go to stderr so command output on stdout stays clean.

    Args:
        debug: Emit debug events (per-call scoring summaries).
        json_logs: Render events as JSON instead of colored console lines.
    """
    log_level = logging.DEBUG if debug else logging.WARNING

    # force, so a repeated CLI invocation rebinds to the current stderr
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=log_level,
        force=True,
    )

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if json_logs:
        renderers: list[structlog.types.Processor] = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        renderers = [
            structlog.dev.ConsoleRenderer(
                colors=sys.stderr.isatty(),
                exception_formatter=structlog.dev.plain_traceback,
            ),
        ]

    structlog.configure(
        processors=[*shared_processors, *renderers],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Get a logger backed by the standard library logger ``name``.

    Processors and level filtering come from ``configure_logging`` when it
    has run, and from structlog's defaults otherwise.

    Args:
        name: Logger name, usually the module name.
        **initial_values: Context bound to every event from this logger.

    Returns:
        Bound structlog logger.
    """
    return structlog.wrap_logger(logging.getLogger(name), **initial_values)
