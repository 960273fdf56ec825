"""Tests for logging configuration."""

import logging
from collections.abc import Generator

import pytest

from slothkube.lib.logging_config import LOGGER_NAMESPACE, get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_logger() -> Generator[None]:
    """Restore the slothkube logger after each test."""
    logger = logging.getLogger(LOGGER_NAMESPACE)
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_default_level_info(self) -> None:
        """Default verbosity is INFO."""
        setup_logging()
        assert logging.getLogger(LOGGER_NAMESPACE).level == logging.INFO

    def test_verbose_enables_debug(self) -> None:
        """Verbose mode logs DEBUG."""
        setup_logging(verbose=True)
        assert logging.getLogger(LOGGER_NAMESPACE).level == logging.DEBUG

    def test_quiet_wins_over_verbose(self) -> None:
        """Quiet mode only shows warnings, even when verbose."""
        setup_logging(verbose=True, quiet=True)
        assert logging.getLogger(LOGGER_NAMESPACE).level == logging.WARNING

    def test_repeated_calls_single_handler(self) -> None:
        """Calling setup twice does not duplicate handlers."""
        setup_logging()
        setup_logging()
        assert len(logging.getLogger(LOGGER_NAMESPACE).handlers) == 1


class TestGetLogger:
    """Tests for get_logger."""

    def test_module_name_kept(self) -> None:
        """Package module names are used as-is."""
        assert get_logger("slothkube.ledger.state").name == "slothkube.ledger.state"

    def test_foreign_name_namespaced(self) -> None:
        """Other names are placed under the slothkube namespace."""
        assert get_logger("pipeline").name == "slothkube.pipeline"

    def test_namespace_itself(self) -> None:
        """The namespace root is returned unchanged."""
        assert get_logger(LOGGER_NAMESPACE).name == LOGGER_NAMESPACE
