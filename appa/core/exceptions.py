"""Custom exceptions for appa."""

from typing import Optional, Dict, Any


class AppaError(Exception):
    """Base exception for appa; ``details`` holds structured context."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = dict(details or {})

    def __str__(self) -> str:
        if not self.details:
            return self.message
        context = ", ".join(f"{key}={value!r}" for key, value in self.details.items())
        return f"{self.message} ({context})"


class ConfigurationError(AppaError):
    """Raised when a setting has a value appa cannot use."""
    
    def __init__(self, message: str, setting: Optional[str] = None,
                 value: Optional[str] = None, **kwargs):
        """Initialize configuration error."""
        details = kwargs.get('details', {})
        if setting:
            details['setting'] = setting
        if value is not None:
            details['value'] = value
        super().__init__(message, details)
        self.setting = setting
        self.value = value
