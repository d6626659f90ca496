# habitforecast/helpers/_logger.py

# SECTION: MODULE DOCSTRING
"""Logging setup for habitforecast.

One named logger, a Rich console handler on stderr and an optional rotating
file handler. Adds a SUCCESS level between INFO and WARNING.
"""

# SECTION: IMPORTS
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

# --- Constants ---
LOGGER_NAME = "habitforecast"
LOG_FILENAME = "habitforecast.log"
LOG_FORMAT_FILE = "%(asctime)s - %(filename)s:%(lineno)d - %(levelname)s - %(message)s"
LOG_FORMAT_RICH = "%(message)s"
SUCCESS_LEVEL_NUM = 25

# --- Custom Success Level ---
logging.addLevelName(SUCCESS_LEVEL_NUM, "SUCCESS")


def success(self, message, *args, **kws):
    if self.isEnabledFor(SUCCESS_LEVEL_NUM):
        self._log(SUCCESS_LEVEL_NUM, message, args, **kws)


logging.Logger.success = success

error_console = Console(stderr=True)


# FUNC: setup_logging
def setup_logging(
    console_level: int | str = logging.WARNING,
    logger_name: str = LOGGER_NAME,
    log_dir: Path | None = None,
) -> logging.Logger:
    """Configures the package logger.

    Args:
        console_level: Level for the Rich console handler.
        logger_name: Name of the logger to configure.
        log_dir: If given, a rotating DEBUG file log is written there.

    Returns:
        The configured logger.
    """
    log = logging.getLogger(logger_name)
    log.setLevel(logging.DEBUG)

    # Clear existing handlers to prevent duplicates
    if log.hasHandlers():
        log.handlers.clear()

    rich_handler = RichHandler(console=error_console, show_path=False)
    rich_handler.setLevel(console_level)
    rich_handler.setFormatter(logging.Formatter(LOG_FORMAT_RICH))
    log.addHandler(rich_handler)

    if log_dir:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(log_dir / LOG_FILENAME, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT_FILE))
        log.addHandler(file_handler)

    log.propagate = False
    return log


_log_instance: logging.Logger | None = None


# FUNC: get_logger
def get_logger() -> logging.Logger:
    global _log_instance
    if _log_instance is None:
        _log_instance = setup_logging()
    return _log_instance


log = get_logger()


def configure_third_party_loggers():
    """Keeps chatty third-party loggers at WARNING."""
    for logger_name in ("urllib3", "asyncio"):
        logger = logging.getLogger(logger_name)
        logger.setLevel(logging.WARNING)


configure_third_party_loggers()
