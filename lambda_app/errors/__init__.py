"""
Error classification for the lambda demonstration.

Domain operations are total and never raise; these exceptions cover
misuse of frozen captures and invalid configuration.
"""

from .base import LambdaAppError
from .capture import CaptureMutationError
from .configuration import ConfigurationError

__all__ = [
    "LambdaAppError",
    "CaptureMutationError",
    "ConfigurationError",
]
