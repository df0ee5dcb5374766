"""
Configuration settings for the appa application.

Only diagnostics are configurable. The greeting itself never depends on
configuration; these settings control where and how much appa logs.
"""

import logging
import os
from typing import Optional
from pathlib import Path
from dataclasses import dataclass, field

from dotenv import load_dotenv


LOG_FORMATS = ("text", "json")


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "WARNING"
    format: str = "text"
    file: Optional[Path] = None

    def __post_init__(self):
        """Normalize configuration values."""
        self.level = self.level.strip().upper()
        self.format = self.format.strip().lower()

    @classmethod
    def from_env(cls) -> "LoggingConfig":
        """Create config from environment variables."""
        log_file = os.getenv("APPA_LOG_FILE", "")
        return cls(
            level=os.getenv("APPA_LOG_LEVEL", "WARNING"),
            format=os.getenv("APPA_LOG_FORMAT", "text"),
            file=Path(log_file) if log_file else None
        )


@dataclass
class AppConfig:
    """Main application configuration."""
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def load_config(cls) -> "AppConfig":
        """Load configuration from environment variables and .env file."""
        load_dotenv()

        return cls(
            logging=LoggingConfig.from_env()
        )

    def validate_config(self) -> list[str]:
        """Validate configuration and return any errors."""
        errors = []

        if not isinstance(logging.getLevelName(self.logging.level), int):
            errors.append(f"Unknown log level: {self.logging.level}")
        if self.logging.format not in LOG_FORMATS:
            errors.append(
                f"Unknown log format: {self.logging.format} "
                f"(expected one of: {', '.join(LOG_FORMATS)})"
            )

        return errors
