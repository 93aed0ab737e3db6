"""
Logging helpers for the RPC client.

The client only writes to its logger when the debug flag is set, one line per
request/response exchange. `default_logger` provides a line logger writing to stderr
that is used when no logger is injected, and `configure_logging` sets up the root
logger for applications such as the `moacrpc` command.
"""

import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional, Protocol, Union

DEFAULT_LOGGER_NAME = "moac_rpc"
DEFAULT_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class Logger(Protocol):
    """Any sink accepting a formatted line, such as a `logging.Logger`."""

    def info(self, msg: object, *args: Any) -> None:
        """Log a line."""
        ...


def get_logger(name: str) -> logging.Logger:
    """Get a logger from the standard logging hierarchy."""
    return logging.getLogger(name)


class UTCFormatter(logging.Formatter):
    """Log formatter that formats UTC timestamps with milliseconds and +00:00 suffix."""

    def formatTime(self, record, datefmt=None):  # noqa: D102,N802  # camelcase required
        dt = datetime.fromtimestamp(record.created, tz=timezone.utc)
        return dt.strftime("%Y-%m-%d %H:%M:%S.%f")[:-3] + "+00:00"


class LogLevel:
    """Help parse a log-level provided on the command-line."""

    @classmethod
    def from_cli(cls, value: str) -> int:
        """
        Parse a logging level from CLI.

        Accepts standard level names (e.g. 'INFO', 'debug') or numeric values.
        """
        try:
            return int(value)
        except ValueError:
            pass

        level_name = value.upper()
        if level_name in logging._nameToLevel:
            return logging._nameToLevel[level_name]

        valid = ", ".join(logging._nameToLevel.keys())
        raise ValueError(f"Invalid log level '{value}'. Expected one of: {valid} or a number.")


def default_logger() -> logging.Logger:
    """
    Return the logger used by clients constructed without one.

    It writes every line to stderr on its own handler, so debug output is visible
    without any logging configuration.
    """
    logger = get_logger(DEFAULT_LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(UTCFormatter(fmt=DEFAULT_LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
        logger.propagate = False
    return logger


def configure_logging(
    log_level: Union[int, str] = "INFO",
    log_file: Optional[Union[str, Path]] = None,
    log_format: str = DEFAULT_LOG_FORMAT,
) -> Optional[logging.FileHandler]:
    """
    Configure the root logger with UTC timestamps.

    Args:
        log_level: The logging level to use (name or numeric value)
        log_file: Path to the log file (if None, no file logging is set up)
        log_format: The log format string

    Returns:
        The file handler if log_file is provided, otherwise None

    """
    root_logger = logging.getLogger()

    if isinstance(log_level, str):
        log_level = LogLevel.from_cli(log_level)
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    file_handler = None
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(exist_ok=True, parents=True)
        file_handler = logging.FileHandler(log_path, mode="w")
        file_handler.setFormatter(UTCFormatter(fmt=log_format))
        root_logger.addHandler(file_handler)

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(UTCFormatter(fmt=log_format))
    root_logger.addHandler(stream_handler)

    return file_handler
