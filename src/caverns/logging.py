"""Logging configuration for Caverns."""

import sys
from pathlib import Path
from typing import Any

import structlog

from .engine.coordinates import Coordinate


def coordinate_processor(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Render Coordinate values (and lists of them) as "(row, col)" strings."""
    for key, value in event_dict.items():
        if isinstance(value, Coordinate):
            event_dict[key] = str(value)
        elif isinstance(value, (list, tuple)) and value and all(
            isinstance(item, Coordinate) for item in value
        ):
            event_dict[key] = [str(item) for item in value]
    return event_dict


def _level_to_int(level: str) -> int:
    levels = {
        "DEBUG": 10,
        "INFO": 20,
        "WARNING": 30,
        "ERROR": 40,
        "CRITICAL": 50,
    }
    return levels.get(level.upper(), 20)


def configure_logging(
    log_level: str = "INFO",
    log_file: Path | None = None,
    json_logs: bool = False,
) -> None:
    """Configure structured logging for the engine."""
    if log_file:
        output_stream = open(log_file, "a")
    else:
        output_stream = sys.stdout

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(
            fmt="iso" if json_logs else "%Y-%m-%d %H:%M:%S"
        ),
        coordinate_processor,
    ]

    if json_logs:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=output_stream.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(_level_to_int(log_level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=output_stream),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a logger instance for a module."""
    return structlog.get_logger(name)
