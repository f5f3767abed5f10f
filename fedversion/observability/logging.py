"""Structured logging configuration using structlog.

The versioning helpers only emit debug-level decisions and startup errors;
the hosting controller decides where they end up by calling
``setup_logging`` once before building its comparison helper.
"""

from __future__ import annotations

import logging
import sys

import structlog


def setup_logging(level: str = "info", *, json_output: bool = True) -> None:
    """Configure structlog for JSON (or console) output to stderr."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    renderer: structlog.types.Processor
    if json_output:
        renderer = structlog.processors.JSONRenderer(sort_keys=True)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso", utc=True, key="ts"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(component: str) -> structlog.stdlib.BoundLogger:
    """Get a logger bound with a ``fedversion.<component>`` name."""
    return structlog.get_logger(component=f"fedversion.{component}")  # type: ignore[return-value]
