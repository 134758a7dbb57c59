"""
Tests for the logging module.
"""

import logging
from unittest.mock import patch

import pytest

from wclist.config import Config, LoggingConfig
from wclist.log import configure_logging, get_logger


def test_get_logger():
    """Test getting a logger."""
    logger = get_logger("test")

    assert isinstance(logger, logging.Logger)
    assert logger.name == "test"


@patch("wclist.log.logging.basicConfig")
def test_configure_logging_default(mock_basicConfig):
    """Test configuring logging with default settings."""
    configure_logging()

    mock_basicConfig.assert_called_once()
    args = mock_basicConfig.call_args[1]
    assert args["level"] == logging.INFO
    assert "format" in args
    assert "datefmt" in args


@patch("wclist.log.logging.basicConfig")
def test_configure_logging_with_config(mock_basicConfig):
    """Test configuring logging with custom config."""
    cfg = Config(logging=LoggingConfig(level="DEBUG"))

    configure_logging(cfg)

    assert mock_basicConfig.call_args[1]["level"] == logging.DEBUG


@patch("wclist.log.logging.basicConfig")
def test_configure_logging_level_override(mock_basicConfig):
    """Test that an explicit level wins over the configured one."""
    cfg = Config(logging=LoggingConfig(level="DEBUG"))

    configure_logging(cfg, "warning")

    assert mock_basicConfig.call_args[1]["level"] == logging.WARNING


def test_configure_logging_invalid_level():
    """Test configuring logging with an invalid level."""
    cfg = Config(logging=LoggingConfig(level="LOUD"))

    with pytest.raises(ValueError):
        configure_logging(cfg)
