"""Configuration exceptions."""

from typing import Any

from .base import OOMetricsError


class ConfigurationError(OOMetricsError):
    """Base class for configuration-related errors."""

    pass


class InvalidConfigError(ConfigurationError):
    """Raised when a configuration value is out of range or of the wrong kind."""

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration for {key}: {value}",
            details={"key": key, "value": str(value), "reason": reason},
        )
        self.key = key
        self.value = value
        self.reason = reason
