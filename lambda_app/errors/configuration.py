"""Configuration error raised when a config file fails to load or validate."""

from typing import Any, Optional

from .base import LambdaAppError


class ConfigurationError(LambdaAppError):
    """Configuration file is unreadable or contains invalid values."""

    def __init__(self, message: str, errors: Optional[list[Any]] = None,
                 source: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []
        self.source = source
