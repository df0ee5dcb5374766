"""Core greeting logic and exceptions for appa."""

from .greeter import greet, DEFAULT_NAME, USAGE
from .exceptions import AppaError, ConfigurationError

__all__ = [
    "greet",
    "DEFAULT_NAME",
    "USAGE",
    "AppaError",
    "ConfigurationError",
]
