"""
Module: logger.py
Description: Structured logging configuration for the SQS producer.

Configures structlog for JSON output so producer traces (batch
submissions, per-entry failures, retry scheduling) can be shipped to
CloudWatch Logs or any line-oriented log sink.

Key Components:
- JSON output with timestamp and level fields
- configure_logging() to apply a minimum level
- get_logger() helper function

Dependencies: structlog, logging, datetime
"""

import logging

import structlog
from datetime import datetime, timezone
from structlog.typing import FilteringBoundLogger


def _add_timestamp(logger, method_name, event_dict):
    """Add ISO 8601 UTC timestamp to log entries."""
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def _add_log_level(logger, method_name, event_dict):
    """Add upper-cased log level to the event dictionary."""
    event_dict["level"] = method_name.upper()
    return event_dict


def configure_logging(level: str = "INFO") -> None:
    """
    Configure structlog for the producer.

    Safe to call more than once; the last call wins. Loggers obtained
    before the call pick up the new configuration lazily.

    Args:
        level: Minimum level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Raises:
        ValueError: If level is not a known logging level
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    structlog.configure(
        processors=[
            _add_timestamp,
            _add_log_level,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.WriteLoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        cache_logger_on_first_use=False,
    )


configure_logging("DEBUG")


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Batch sent", queue_url="https://...", entries=10)
        {"queue_url": "https://...", "entries": 10, "event": "Batch sent", "timestamp": "...", "level": "INFO"}
    """
    return structlog.get_logger(name)
