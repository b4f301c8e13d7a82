"""Shared CLI helpers."""

from pathlib import Path
from typing import List, Optional

from rich.console import Console

from ..config import MetricsConfig, load_config

console = Console()


def resolve_config(
    config: Optional[Path] = None,
    calculators: Optional[List[str]] = None,
    workers: Optional[int] = None,
    decimal_places: Optional[int] = None,
    verbose: bool = False,
    quiet: bool = False,
) -> MetricsConfig:
    """Build configuration from CLI options."""
    overrides: dict = {"verbose": verbose, "quiet": quiet}
    if calculators:
        overrides["calculators"] = tuple(calculators)
    if workers is not None:
        overrides["workers"] = workers
    if decimal_places is not None:
        overrides["decimal_places"] = decimal_places
    return load_config(config_file=config, **overrides)
