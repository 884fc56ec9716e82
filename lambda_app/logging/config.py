"""
Centralized logging configuration for the lambda demonstration.

This module provides standardized logging configuration using structlog
for all components. Log records are written to stderr by default so that
stdout carries only the demonstration output.
"""
import logging
import sys
from typing import Any, Optional, TextIO

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "WARNING",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None,
    stream: Optional[TextIO] = None,
    cache_logger_on_first_use: bool = True
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
        stream: Destination stream, defaults to stderr
        cache_logger_on_first_use: Freeze each logger's configuration on first
            use; disable when reconfiguring repeatedly (tests)
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=stream or sys.stderr,
        format="%(message)s",  # structlog will handle formatting
        force=True
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=cache_logger_on_first_use,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_demo_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound to the demonstration runner context.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for demonstration steps
    """
    return structlog.get_logger(name, subsystem="demo")


def log_step(
    logger: FilteringBoundLogger,
    section: str,
    step: int,
    output: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a completed demonstration step with standardized format.

    Args:
        logger: Structlog logger instance
        section: Name of the section the step belongs to
        step: One-based index of the printed line
        output: Line that was printed
        context: Additional context data
    """
    bound_logger = logger.bind(section=section, step=step, output=output)

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.debug("Demo step printed")
