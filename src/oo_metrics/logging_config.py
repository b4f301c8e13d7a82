"""
Logging configuration for oo-metrics.

Log records go through a rich handler on stderr so that stdout stays clean
for ``analyze --json``. The level comes from the ``verbosity`` setting of
:class:`~oo_metrics.config.MetricsConfig`.
"""

import logging
from typing import Dict, Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "oo_metrics"

LEVELS: Dict[str, int] = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}


def setup_logging(verbosity: str = "normal", log_file: Optional[str] = None) -> logging.Logger:
    """
    Install a rich stderr handler and set the oo_metrics level.

    Args:
        verbosity: One of ``quiet``, ``normal`` or ``verbose``
        log_file: Optional path; records are also appended there as plain text

    Returns:
        The oo_metrics package logger

    Raises:
        ValueError: If verbosity is not a known level name
    """
    try:
        level = LEVELS[verbosity]
    except KeyError:
        raise ValueError(f"Unknown verbosity {verbosity!r}, expected one of {sorted(LEVELS)}")

    debug = level == logging.DEBUG
    handlers: list[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            tracebacks_show_locals=debug,
            # type and method names contain brackets, e.g. "foo(int[])"
            markup=False,
            show_path=debug,
        )
    ]

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a")
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)-8s %(name)s: %(message)s")
        )
        handlers.append(file_handler)

    logging.basicConfig(level=level, format="%(message)s", datefmt="[%X]", handlers=handlers)

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger inside the oo_metrics namespace.

    Module names such as ``oo_metrics.model.loader`` are used as-is; bare names
    like ``calculators`` are prefixed.
    """
    if name is None or name == ROOT_LOGGER:
        return logging.getLogger(ROOT_LOGGER)
    if not name.startswith(f"{ROOT_LOGGER}."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
