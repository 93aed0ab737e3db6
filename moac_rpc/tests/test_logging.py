"""Test suite for `moac_rpc.logging` module."""

import logging

import pytest

from ..logging import DEFAULT_LOGGER_NAME, LogLevel, UTCFormatter, configure_logging, default_logger


@pytest.mark.parametrize(
    "value, expected",
    [("INFO", logging.INFO), ("debug", logging.DEBUG), ("30", 30), ("warning", logging.WARNING)],
)
def test_log_level_from_cli(value, expected):
    """Levels are parsed from names or numbers."""
    assert LogLevel.from_cli(value) == expected


def test_log_level_invalid():
    """Unknown level names are rejected."""
    with pytest.raises(ValueError, match="Invalid log level"):
        LogLevel.from_cli("chatty")


def test_default_logger_is_configured_once():
    """The default logger owns exactly one stderr handler."""
    logger = default_logger()
    assert logger.name == DEFAULT_LOGGER_NAME
    assert default_logger() is logger
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0].formatter, UTCFormatter)
    assert logger.isEnabledFor(logging.INFO)


def test_utc_formatter():
    """Timestamps are rendered in UTC with milliseconds."""
    record = logging.makeLogRecord({"msg": "hello", "created": 0.123})
    assert UTCFormatter().formatTime(record) == "1970-01-01 00:00:00.123+00:00"


def test_configure_logging_file(tmp_path):
    """A file handler is installed when a log file is requested."""
    root_logger = logging.getLogger()
    saved_handlers, saved_level = root_logger.handlers[:], root_logger.level
    try:
        log_file = tmp_path / "logs" / "moacrpc.log"
        file_handler = configure_logging("DEBUG", log_file=log_file)
        assert file_handler is not None
        assert root_logger.level == logging.DEBUG
        logging.getLogger("tests.configure").debug("written")
        file_handler.flush()
        assert "written" in log_file.read_text()
    finally:
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)
            handler.close()
        for handler in saved_handlers:
            root_logger.addHandler(handler)
        root_logger.setLevel(saved_level)
