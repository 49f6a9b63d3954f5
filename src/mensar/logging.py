"""structlog setup for mensar.

Everything is logged to stderr; stdout only ever carries the menu or the
facility list.
"""

import logging
import sys

import structlog


def setup_logging(json_output: bool = False, log_level: str = "WARNING") -> None:
    """Route mensar and library logs to stderr at ``log_level``.

    Args:
        json_output: Emit one JSON object per event (MENSAR_LOG_JSON).
        log_level: Level name from MENSAR_LOG_LEVEL; unknown names mean WARNING.
    """
    level = getattr(logging, log_level.upper(), logging.WARNING)

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )

    # requests/urllib3 use stdlib logging
    root = logging.getLogger()
    root.handlers = [logging.StreamHandler(sys.stderr)]
    root.setLevel(level)


def get_logger(name: str) -> structlog.BoundLogger:
    return structlog.get_logger(name)
