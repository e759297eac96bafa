"""Tests for structured logging."""

import logging
import logging.handlers

from pitu.observability.logging import ContextLogger, setup_logging


def test_logging_setup():
    """Test logging configuration."""
    # Arrange & Act
    setup_logging(level="DEBUG")

    # Assert
    logger = logging.getLogger("pitu")
    assert logger.level == logging.DEBUG
    assert logger.propagate is False


def test_logging_setup_info_level():
    """Test logging setup with INFO level."""
    # Arrange & Act
    setup_logging(level="INFO")

    # Assert
    logger = logging.getLogger("pitu")
    assert logger.level == logging.INFO


def test_logging_setup_with_file(tmp_path):
    """Test that a log file adds a rotating JSON handler."""
    # Arrange
    log_file = tmp_path / "pitu.log"

    # Act
    setup_logging(level="INFO", log_file=str(log_file))
    logger = logging.getLogger("pitu")
    logger.info("hello file")
    for handler in logger.handlers:
        handler.flush()

    # Assert
    assert any(isinstance(h, logging.handlers.RotatingFileHandler) for h in logger.handlers)
    assert '"message": "hello file"' in log_file.read_text()

    for handler in logger.handlers:
        handler.close()


def test_context_logger():
    """Test ContextLogger with context."""
    # Arrange
    setup_logging(level="INFO")
    context_logger = ContextLogger("pitu.test")

    # Act
    adapter = context_logger.with_context(session_id="s1", node="main.welcome")

    # Assert
    assert isinstance(adapter, logging.LoggerAdapter)
    assert adapter.extra == {"session_id": "s1", "node": "main.welcome"}
