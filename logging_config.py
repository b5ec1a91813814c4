"""Logging configuration for sortable.

The library itself only emits DEBUG records (criterion resolution, lookup
misses); applications opt in to seeing them through setup_logging().
Uses % formatting in log calls.
"""

import logging
from pathlib import Path

import config

LEVEL_COLORS: dict[str, str] = {
    "DEBUG": "\033[96m",  # Cyan
    "INFO": "\033[92m",  # Green
    "WARNING": "\033[93m",  # Yellow
    "ERROR": "\033[91m",  # Red
    "CRITICAL": "\033[95m",  # Magenta
}
RESET: str = "\033[0m"


class ColoredFormatter(logging.Formatter):
    """Add ANSI colors to the level name."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors.

        The record is copied first so other handlers sharing it
        (e.g. a file handler) still see the plain level name.

        Args:
            record: Log record to format

        Returns:
            Formatted log message with color codes.
        """
        color = LEVEL_COLORS.get(record.levelname)
        if color is None:
            return super().format(record)
        colored = logging.makeLogRecord(record.__dict__)
        colored.levelname = f"{color}{record.levelname}{RESET}"
        return super().format(colored)


def setup_logging(
    verbose: bool = False,
    log_file: Path | None = None,
    use_colors: bool = True,
) -> logging.Logger:
    """Configure the package logger.

    Calling this more than once replaces the handlers installed by the
    previous call instead of stacking duplicates.

    Args:
        verbose: Enable DEBUG level (default: WARNING+ only)
        log_file: Optional file output path (always DEBUG)
        use_colors: Color the level name on the console

    Returns:
        The configured package logger.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logger = logging.getLogger(config.TOOL_NAME)
    logger.setLevel(logging.DEBUG if log_file else level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    formatter_class = ColoredFormatter if use_colors else logging.Formatter
    console_handler.setFormatter(formatter_class("%(levelname)s: %(message)s"))
    logger.addHandler(console_handler)

    # File handler
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get logger for module, nested under the package logger.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger instance for the module.
    """
    prefix = f"{config.TOOL_NAME}."
    if name == config.TOOL_NAME or name.startswith(prefix):
        return logging.getLogger(name)
    return logging.getLogger(prefix + name)
