"""Configuration management for appa."""

from .settings import AppConfig, LoggingConfig

__all__ = ["AppConfig", "LoggingConfig"]
