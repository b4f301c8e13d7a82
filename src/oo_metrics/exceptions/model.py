"""Model and calculation exceptions: loading, lookups, registry."""

from pathlib import Path
from typing import List, Optional, Union

from .base import OOMetricsError


class ModelError(OOMetricsError):
    """Base class for errors in the type model handed to calculators."""

    pass


class ModelLoadError(ModelError):
    """Raised when a model document cannot be read or is malformed."""

    def __init__(self, path: Optional[Union[str, Path]], reason: str):
        source = str(path) if path is not None else "<memory>"
        super().__init__(
            f"Cannot load type model from {source}",
            details={"path": source, "reason": reason},
        )
        self.path = path
        self.reason = reason


class UnknownTypeError(ModelError):
    """Raised when a qualified type name is not part of the codebase."""

    def __init__(self, name: str):
        super().__init__(f"Unknown type: {name}", details={"name": name})
        self.name = name


class UnknownCalculatorError(OOMetricsError):
    """Raised when a calculator name is not in the registry."""

    def __init__(self, name: str, available: List[str]):
        super().__init__(
            f"Unknown calculator: {name}",
            details={"name": name, "available": ", ".join(available)},
        )
        self.name = name
        self.available = available
