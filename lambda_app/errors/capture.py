"""
Errors raised by frozen closure captures.

A captured local value is a read-only snapshot for the lifetime of the
capture; rebinding or deleting it is a programming error.
"""

from typing import Optional

from .base import LambdaAppError


class CaptureMutationError(LambdaAppError, AttributeError):
    """Attempt to rebind or delete a value held by a frozen capture."""

    def __init__(self, name: str, operation: str = "assign", message: Optional[str] = None, **kwargs):
        super().__init__(
            message or f"Cannot {operation} captured variable '{name}': captures are read-only",
            **kwargs
        )
        self.name = name
        self.operation = operation
        self.recoverable = False
