"""
Logging configuration and utilities for the lambda demonstration.
"""
from .config import configure_logging, get_demo_logger, get_logger

__all__ = ["configure_logging", "get_demo_logger", "get_logger"]
