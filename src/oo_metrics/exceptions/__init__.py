"""Exception hierarchy for oo-metrics."""

from .base import OOMetricsError
from .config import ConfigurationError, InvalidConfigError
from .model import ModelError, ModelLoadError, UnknownCalculatorError, UnknownTypeError

__all__ = [
    "OOMetricsError",
    "ConfigurationError",
    "InvalidConfigError",
    "ModelError",
    "ModelLoadError",
    "UnknownTypeError",
    "UnknownCalculatorError",
]
