"""
Infrastructure layer - logging.

One place that configures the root logger for both snippet apps.
Streamlit reruns the page script on every interaction, so configuration
must be idempotent per process.
"""

import logging
import sys
from pathlib import Path
from typing import Dict, Optional


LEVELS = {
    'DEBUG': logging.DEBUG,
    'INFO': logging.INFO,
    'WARNING': logging.WARNING,
    'ERROR': logging.ERROR,
    'CRITICAL': logging.CRITICAL
}

CONSOLE_FORMAT = '%(asctime)s [%(levelname)s] [%(name)s] %(message)s'
FILE_FORMAT = '%(asctime)s [%(levelname)s] [%(name)s:%(lineno)d] %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class LoggerManager:
    """Process-wide logger registry"""

    _loggers: Dict[str, logging.Logger] = {}
    _configured: bool = False
    _log_file: Optional[Path] = None
    _file_handler: Optional[logging.Handler] = None

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """
        Get (or create) a configured logger.

        Args:
            name: logger name, usually __name__

        Returns:
            the logger instance
        """
        if not cls._configured:
            cls._configure_logging()

        if name not in cls._loggers:
            cls._loggers[name] = logging.getLogger(name)

        return cls._loggers[name]

    @classmethod
    def _configure_logging(cls):
        if cls._configured:
            return

        root_logger = logging.getLogger()
        root_logger.setLevel(logging.INFO)

        # streamlit (or pytest) may already have installed handlers
        if root_logger.handlers:
            cls._configured = True
            if cls._log_file:
                cls._add_file_handler_internal(cls._log_file, root_logger)
            return

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT))
        root_logger.addHandler(console_handler)

        if cls._log_file:
            cls._add_file_handler_internal(cls._log_file, root_logger)

        cls._configured = True

    @classmethod
    def _add_file_handler_internal(cls, log_file: Path, logger: logging.Logger) -> None:
        if cls._file_handler is not None:
            return
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
            logger.addHandler(file_handler)
            cls._file_handler = file_handler
        except OSError as e:
            logger.warning(f"Could not open log file {log_file}: {e}")

    @classmethod
    def set_log_file(cls, log_file: Path) -> None:
        """Set the log file; applied immediately if logging is already configured."""
        cls._log_file = log_file
        if cls._configured:
            cls._add_file_handler_internal(log_file, logging.getLogger())

    @classmethod
    def set_level(cls, level: str) -> None:
        """Set the root log level ('DEBUG', 'INFO', ...). Unknown names are ignored."""
        if level.upper() in LEVELS:
            logging.getLogger().setLevel(LEVELS[level.upper()])

    @classmethod
    def reset(cls) -> None:
        """Reset configuration (tests only)."""
        if cls._file_handler is not None:
            logging.getLogger().removeHandler(cls._file_handler)
            cls._file_handler.close()
        cls._loggers.clear()
        cls._configured = False
        cls._log_file = None
        cls._file_handler = None


def get_logger(name: str) -> logging.Logger:
    return LoggerManager.get_logger(name)


def configure_logging(settings) -> None:
    """Apply the log level and optional log file from a Settings object."""
    if settings.log_file:
        LoggerManager.set_log_file(Path(settings.log_file))
    LoggerManager.get_logger(__name__)
    LoggerManager.set_level(settings.log_level)
