"""Configuration and input exceptions: settings files, env vars, result counts."""

from typing import Any

from .base import HeatMapError


class ConfigurationError(HeatMapError):
    """Base class for configuration-related errors."""

    pass


class InvalidConfigError(ConfigurationError):
    """Raised when configuration values are invalid."""

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration for {key}: {value}",
            details={"key": key, "value": str(value), "reason": reason},
        )
        self.key = key
        self.value = value
        self.reason = reason


class InvalidLimitError(ConfigurationError):
    """Raised when the number of results is missing, non-numeric or not positive."""

    exit_code = 2

    def __init__(self, value: Any, reason: str):
        super().__init__(
            f"Invalid number of results: {value!r}",
            details={"reason": reason},
        )
        self.value = value
        self.reason = reason
