"""Structured logging setup."""

import logging
import sys

import structlog

_DEFAULT_LEVEL = "info"


def configure_logging(level: str | None = None) -> None:
    """Configure stdlib logging and structlog to emit JSON lines.

    Each entry carries ``ts``, ``level`` and ``event`` plus whatever context
    the caller bound. Key material and raw tokens are never passed in.
    """
    numeric_level = logging.getLevelNamesMapping().get(
        (level or _DEFAULT_LEVEL).upper(), logging.INFO
    )

    logging.basicConfig(
        level=numeric_level,
        handlers=[logging.StreamHandler(sys.stdout)],
        format="%(message)s",
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.TimeStamper(fmt="iso", key="ts"),
            structlog.stdlib.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        cache_logger_on_first_use=True,
    )
