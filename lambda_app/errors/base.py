"""Base exception for the lambda demonstration."""

from typing import Any, Dict, Optional


class LambdaAppError(Exception):
    """Base class for all application errors."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True
