"""Centralized logging configuration for the scaffold package.

The library itself only creates module loggers; applications (and the
``python -m scaffold`` CLI) call ``setup_logging`` once at startup.
"""

import logging
import logging.handlers
import sys
from pathlib import Path

from scaffold._config import config


class ColorFormatter(logging.Formatter):
    """Colored console formatter for better readability."""

    # ANSI color codes
    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        # Color a copy so other handlers see the plain level name
        if record.levelname in self.COLORS:
            record = logging.makeLogRecord(record.__dict__)
            record.levelname = f"{self.COLORS[record.levelname]}{record.levelname}{self.RESET}"

        return super().format(record)


def setup_logging(
    level: str | None = None,
    log_file: str | Path | None = None,
    console: bool = True,
    colored: bool = True,
) -> None:
    """Set up centralized logging configuration.

    Args:
        level: Logging level name; defaults to LOG_LEVEL from configuration.
        log_file: Optional file path; defaults to LOG_FILE when LOG_TO_FILE is enabled.
        console: Whether to log to console
        colored: Whether to use colored console output
    """
    level = level or config.log_level
    if log_file is None and config.log_to_file:
        log_file = config.log_file

    numeric_level = getattr(logging, level.upper(), logging.INFO)

    # Clear any existing handlers
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(numeric_level)

    base_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    if console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(numeric_level)

        if colored and sys.stdout.isatty():
            formatter: logging.Formatter = ColorFormatter(base_format, date_format)
        else:
            formatter = logging.Formatter(base_format, date_format)

        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        # Rotate to keep log files bounded
        file_handler = logging.handlers.RotatingFileHandler(
            log_path, maxBytes=10 * 1024 * 1024, backupCount=5  # 10MB
        )
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(logging.Formatter(base_format, date_format))
        root_logger.addHandler(file_handler)

    logging.getLogger("scaffold").setLevel(numeric_level)


def get_logger(name: str) -> logging.Logger:
    """Get a properly configured logger.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)
