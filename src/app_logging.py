"""structlog configuration shared by the library and the CLI scripts."""

from __future__ import annotations

import logging
from typing import Any

import structlog

_VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def normalize_log_level(level: str | None) -> int:
    normalized = (level or "INFO").strip().upper()
    if normalized not in _VALID_LEVELS:
        raise ValueError(f"Unknown log level: {level!r}")
    return logging.getLevelName(normalized)


def configure_logging(level: str | None = "INFO", *, json: bool = False) -> None:
    """Configure structlog once for a process.

    JSON output is meant for log aggregation; the console renderer is the
    default for interactive CLI use.
    """
    resolved_level = normalize_log_level(level)
    logging.basicConfig(level=resolved_level)
    renderer: Any = (
        structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(resolved_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> Any:
    return structlog.get_logger(name)


__all__ = ["configure_logging", "get_logger", "normalize_log_level"]
