"""Tests for arc_ai.logging_config module."""

import logging

from arc_ai.logging_config import LOGGER_NAME, configure_logging


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_default_level_is_warning(self):
        """Test that logging is quiet by default."""
        logger = configure_logging()

        assert logger.name == LOGGER_NAME
        assert logger.level == logging.WARNING

    def test_verbose_enables_debug(self):
        """Test that verbose mode enables DEBUG."""
        logger = configure_logging(verbose=True)

        assert logger.level == logging.DEBUG

    def test_handlers_do_not_accumulate(self):
        """Test that repeated calls keep a single handler."""
        configure_logging()
        logger = configure_logging(verbose=True)

        assert len(logger.handlers) == 1
        assert logger.propagate is False

    def test_module_loggers_are_children(self):
        """Test that package module loggers inherit the configuration."""
        configure_logging(verbose=True)

        child = logging.getLogger("arc_ai.llm.base")

        assert child.getEffectiveLevel() == logging.DEBUG
