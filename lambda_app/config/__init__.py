"""
Configuration module.

Frozen dataclass defaults overridden by an optional YAML file.
"""
from .defaults import DefaultConfig, get_default_config
from .loader import ConfigLoader

__all__ = ["ConfigLoader", "DefaultConfig", "get_default_config"]
