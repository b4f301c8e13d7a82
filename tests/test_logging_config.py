"""Tests for logging setup."""

import logging
from contextlib import contextmanager

import pytest
from rich.logging import RichHandler

from oo_metrics.logging_config import get_logger, setup_logging


@contextmanager
def installed_handlers(**kwargs):
    """Run setup_logging on a handler-free root logger and yield what it installed."""
    root = logging.getLogger()
    saved = root.handlers[:]
    root.handlers.clear()
    try:
        setup_logging(**kwargs)
        installed = root.handlers[:]
        yield installed
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers[:] = saved


class TestSetupLogging:
    @pytest.mark.parametrize(
        "verbosity, level",
        [("verbose", logging.DEBUG), ("quiet", logging.ERROR), ("normal", logging.WARNING)],
    )
    def test_levels(self, verbosity, level):
        assert setup_logging(verbosity=verbosity).level == level
        setup_logging()

    def test_unknown_verbosity(self):
        with pytest.raises(ValueError, match="loud"):
            setup_logging(verbosity="loud")

    def test_uses_rich_handler(self):
        with installed_handlers() as handlers:
            assert any(isinstance(h, RichHandler) for h in handlers)

    def test_log_file(self, tmp_path):
        with installed_handlers(log_file=str(tmp_path / "run.log")) as handlers:
            assert any(isinstance(h, logging.FileHandler) for h in handlers)


class TestGetLogger:
    def test_root(self):
        assert get_logger().name == "oo_metrics"

    def test_prefixes_name(self):
        assert get_logger("calculators").name == "oo_metrics.calculators"
        assert get_logger("oo_metrics.model").name == "oo_metrics.model"
        assert get_logger("oo_metrics_extra").name == "oo_metrics.oo_metrics_extra"

    def test_module_loggers_share_namespace(self):
        from oo_metrics.calculators import inheritance, registry
        from oo_metrics.model import loader

        for module in (inheritance, registry, loader):
            assert module.logger.name.startswith("oo_metrics.")
