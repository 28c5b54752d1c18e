"""Logging configuration for the imgflip client."""

import logging
import logging.handlers
import sys
from pathlib import Path

import colorlog

BASE_LOG_FORMAT = (
    "%(asctime)s %(levelname)8s %(message)s (%(name)s@%(filename)s:%(lineno)d)"
)
DATE_FORMAT = "%m-%d %H:%M:%S"

LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "red,bg_white",
}


def setup_logging(
    level: int | str = logging.INFO,
    use_colors: bool = True,
    enable_file_logging: bool = False,
    log_dir: Path | None = None,
    is_test_env: bool = False,
) -> None:
    """Configure root logging for applications embedding the client.

    Args:
        level: Logging level, either numeric or a name such as "DEBUG"
        use_colors: Whether console output is colored with colorlog
        enable_file_logging: Whether to also write a log file
        log_dir: Directory for log files (defaults to ./logs or ./logs/test)
        is_test_env: Whether this is a test run; test logs are overwritten
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    handlers = [_console_handler(use_colors)]

    if enable_file_logging:
        if log_dir is None:
            log_dir = Path("logs") / "test" if is_test_env else Path("logs")
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(_file_handler(log_dir, is_test_env))

    logging.basicConfig(level=level, handlers=handlers, force=True)


def _console_handler(use_colors: bool) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)

    if use_colors:
        formatter: logging.Formatter = colorlog.ColoredFormatter(
            "%(asctime)s %(log_color)s%(levelname)8s%(reset)s %(message)s "
            "\033[90m(%(name)s@%(filename)s:%(lineno)d)\033[0m",
            datefmt=DATE_FORMAT,
            log_colors=LOG_COLORS,
        )
    else:
        formatter = logging.Formatter(BASE_LOG_FORMAT, datefmt=DATE_FORMAT)

    handler.setFormatter(formatter)
    return handler


def _file_handler(log_dir: Path, is_test_env: bool) -> logging.Handler:
    if is_test_env:
        handler: logging.Handler = logging.FileHandler(log_dir / "test.log", mode="w")
    else:
        handler = logging.handlers.RotatingFileHandler(
            log_dir / "imgflip.log",
            maxBytes=1024 * 1024,
            backupCount=2,
            encoding="utf-8",
        )

    handler.setFormatter(logging.Formatter(BASE_LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance (typically for __name__)."""
    return logging.getLogger(name)


def setup_test_logging(level: int = logging.DEBUG) -> None:
    """Setup logging for the test suite, overwriting logs/test/test.log."""
    setup_logging(level=level, enable_file_logging=True, is_test_env=True)
