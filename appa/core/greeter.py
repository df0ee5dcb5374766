"""Greeting construction."""

from typing import Optional


GREETING_PREFIX = "Hello, "
GREETING_SUFFIX = "! Welcome to appa CLI tool."
DEFAULT_NAME = "world"
USAGE = "Usage: appa [name]"


def greet(name: Optional[str] = None) -> str:
    """
    Build the greeting for a name.

    An empty string is a present name and is used as-is; only ``None``
    falls back to the default greeting.

    Args:
        name: Name to greet, or None when no name was supplied

    Returns:
        Greeting text
    """
    if name is None:
        name = DEFAULT_NAME
    return f"{GREETING_PREFIX}{name}{GREETING_SUFFIX}"
