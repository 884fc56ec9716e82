"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOGGING_KEYS = frozenset({"level", "format_json", "include_timestamp", "include_caller"})
SHARED_STATE_KEYS = frozenset({"x", "y"})


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = _unknown_keys("logging", params, LOGGING_KEYS)

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in VALID_LOG_LEVELS:
                errors.append(ValidationError(
                    field="logging.level",
                    message=f"Must be one of {', '.join(VALID_LOG_LEVELS)}",
                    value=value
                ))

        for flag in ("format_json", "include_timestamp", "include_caller"):
            if flag in params and not isinstance(params[flag], bool):
                errors.append(ValidationError(
                    field=f"logging.{flag}",
                    message="Must be a boolean",
                    value=params[flag]
                ))

        return errors

    @staticmethod
    def validate_shared_state_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate shared state initial values."""
        errors = _unknown_keys("shared_state", params, SHARED_STATE_KEYS)

        for name in ("x", "y"):
            if name in params:
                value = params[name]
                # bool is an int subclass
                if not isinstance(value, int) or isinstance(value, bool):
                    errors.append(ValidationError(
                        field=f"shared_state.{name}",
                        message="Must be an integer",
                        value=value
                    ))

        return errors

    @classmethod
    def validate_config(cls, config: dict[str, Any]) -> list[ValidationError]:
        """Validate a complete configuration dictionary."""
        errors = []

        unknown = set(config) - {"logging", "shared_state"}
        for section in sorted(unknown):
            errors.append(ValidationError(
                field=section,
                message="Unknown configuration section",
                value=config[section]
            ))

        for section, validator in (
            ("logging", cls.validate_logging_params),
            ("shared_state", cls.validate_shared_state_params),
        ):
            params = config.get(section, {})
            if not isinstance(params, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=params
                ))
                continue
            errors.extend(validator(params))

        return errors


def _unknown_keys(section: str, params: dict[str, Any], allowed: frozenset) -> list[ValidationError]:
    return [
        ValidationError(field=f"{section}.{key}", message="Unknown parameter", value=params[key])
        for key in sorted(set(params) - allowed)
    ]
