"""Logging configuration and utilities."""

import logging
import sys
from typing import Optional
import structlog
from structlog.stdlib import LoggerFactory, ProcessorFormatter

from appa.config.settings import LoggingConfig, LOG_FORMATS
from appa.core.exceptions import ConfigurationError


TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Applied to structlog events and to plain stdlib records alike.
SHARED_PROCESSORS = [
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
]


def build_formatter(log_format: str) -> logging.Formatter:
    """
    Create the handler formatter for a log format.

    In json mode every record, whether it came from structlog or from a
    stdlib logger, is rendered as exactly one JSON object per line.
    """
    if log_format == "json":
        return ProcessorFormatter(
            processors=[
                ProcessorFormatter.remove_processors_meta,
                structlog.processors.JSONRenderer(),
            ],
            foreign_pre_chain=SHARED_PROCESSORS,
        )
    return logging.Formatter(TEXT_FORMAT)


def setup_logging(config: LoggingConfig):
    """
    Configure structured logging for the application.

    Diagnostics go to stderr (and optionally a file) so that stdout carries
    only the greeting.

    Args:
        config: Logging configuration

    Returns:
        structlog logger in json mode, otherwise the stdlib ``appa`` logger

    Raises:
        ConfigurationError: If the log format is not supported
    """
    if config.format not in LOG_FORMATS:
        raise ConfigurationError(
            "Unsupported log format",
            setting="APPA_LOG_FORMAT",
            value=config.format
        )

    log_level = logging.getLevelName(config.level.upper())
    if not isinstance(log_level, int):
        log_level = logging.WARNING

    formatter = build_formatter(config.format)
    handlers = [logging.StreamHandler(sys.stderr)]
    if config.file:
        config.file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(config.file))

    for handler in handlers:
        handler.setLevel(log_level)
        handler.setFormatter(formatter)

    logging.basicConfig(level=log_level, handlers=handlers)
    logging.getLogger("appa").setLevel(log_level)

    if config.format != "json":
        return logging.getLogger("appa")

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *SHARED_PROCESSORS,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    return structlog.get_logger("appa")


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the package logger, or a child of it when name is given."""
    return logging.getLogger(f"appa.{name}" if name else "appa")
