"""Configuration loading and management for oo-metrics.

Configuration sources are merged in priority order:
    1. Defaults (defined in MetricsConfig)
    2. Global config (~/.oo-metrics.toml)
    3. Project config (./oo-metrics.toml)
    4. Explicit config file
    5. Environment variables (OO_METRICS_* prefix)
    6. Keyword overrides (typically CLI flags)

Example:
    >>> config = load_config(decimal_places=2)
    >>> config.decimal_places
    2
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, Optional, Tuple, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]

ENV_PREFIX = "OO_METRICS_"
CONFIG_FILENAME = "oo-metrics.toml"


@dataclass(frozen=True)
class MetricsConfig:
    """Settings for a metrics run.

    Attributes:
        calculators: Registry names to run; empty means every registered calculator
        decimal_places: Display precision for non-integer metric values
        workers: Threads for batch runs; None runs sequentially
        verbosity: quiet / normal / verbose
    """

    calculators: Tuple[str, ...] = ()
    decimal_places: int = 4
    workers: Optional[int] = None
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        # TOML and env give lists; keep the dataclass hashable
        if not isinstance(self.calculators, tuple):
            object.__setattr__(self, "calculators", tuple(self.calculators))
        if not all(isinstance(name, str) for name in self.calculators):
            raise InvalidConfigError("calculators", self.calculators, "names must be strings")

        if not 0 <= self.decimal_places <= 12:
            raise InvalidConfigError(
                "decimal_places", self.decimal_places, "must be between 0 and 12"
            )
        if self.workers is not None and self.workers < 1:
            raise InvalidConfigError("workers", self.workers, "must be at least 1")
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError(
                "verbosity", self.verbosity, "must be quiet, normal or verbose"
            )


def load_config(config_file: Optional[Path] = None, **overrides: Any) -> MetricsConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides; ``verbose``/``quiet`` booleans map to verbosity

    Returns:
        Validated MetricsConfig instance

    Raises:
        ConfigurationError: If a config file is missing or invalid
    """
    merged: dict = {}

    global_config = Path.home() / f".{CONFIG_FILENAME}"
    if global_config.exists():
        merged.update(_load_toml_file(global_config))

    project_config = Path.cwd() / CONFIG_FILENAME
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())

    if "verbose" in overrides:
        if overrides.pop("verbose"):
            overrides["verbosity"] = "verbose"
    if "quiet" in overrides:
        if overrides.pop("quiet"):
            overrides["verbosity"] = "quiet"

    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return MetricsConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from OO_METRICS_* environment variables.

    Supported environment variables:
        OO_METRICS_CALCULATORS: comma-separated calculator names
        OO_METRICS_DECIMAL_PLACES: int
        OO_METRICS_WORKERS: int
        OO_METRICS_VERBOSITY: quiet/normal/verbose
    """
    type_hints = get_type_hints(MetricsConfig)
    result: dict[str, Any] = {}

    for field_name in MetricsConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue

        try:
            result[field_name] = _parse_env_value(env_value, type_hints[field_name])
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment string into the field's declared type."""
    args = getattr(type_hint, "__args__", ())
    origin = getattr(type_hint, "__origin__", None)

    # Optional[X] is Union[X, None]
    if type(None) in args:
        type_hint = next(t for t in args if t is not type(None))
        origin = getattr(type_hint, "__origin__", None)

    if origin is tuple:
        return tuple(part.strip() for part in value.split(",") if part.strip())
    if type_hint is int:
        return int(value)
    if type_hint is str or origin is Literal:
        return value

    raise ValueError(f"unsupported type {type_hint!r}")


def _load_toml_file(path: Path) -> dict:
    """Load a TOML file, reading the optional ``[oo-metrics]`` table if present.

    Raises:
        ConfigurationError: If TOML support is missing or parsing fails
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        try:
            # Fallback to tomli for Python 3.9-3.10
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ConfigurationError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}")

    return data.get("oo-metrics", data)
