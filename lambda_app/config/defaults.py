"""Default configuration parameters for the lambda demonstration."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class LoggingParams:
    """Logging output parameters."""
    level: str = "WARNING"
    format_json: bool = False
    include_timestamp: bool = True
    include_caller: bool = False


@dataclass(frozen=True)
class SharedStateParams:
    """Initial values of the process-wide shared state."""
    x: int = 10
    y: int = 20


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    logging: LoggingParams = field(default_factory=LoggingParams)
    shared_state: SharedStateParams = field(default_factory=SharedStateParams)


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig()
