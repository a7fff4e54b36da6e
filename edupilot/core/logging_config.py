"""
Centralized logging configuration.

This module provides consistent logging across all application modules.
Logs are written to console (stdout) and, optionally, to daily log files.
"""
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional


# Module-level flag to prevent duplicate handler registration
_logging_configured = False


def setup_logging(
    log_level: str = "INFO",
    log_dir: Optional[Path] = None,
    log_to_file: bool = True,
) -> logging.Logger:
    """
    Configure application-wide logging.

    This function should be called once at application startup.
    It configures console logging and, when enabled, file logging
    with the same formatting.

    Args:
        log_level: Console logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for log files. Defaults to 'logs/' in project root.
        log_to_file: Also write a daily log file under log_dir.

    Returns:
        Configured root logger instance

    Example:
        >>> from edupilot.core.logging_config import setup_logging
        >>> logger = setup_logging("INFO", log_to_file=False)
        >>> logger.info("Application started")
    """
    global _logging_configured

    # Prevent duplicate handler registration on repeated calls
    if _logging_configured:
        return logging.getLogger()

    # Format: timestamp | level | module:line | message
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(getattr(logging, log_level.upper()))

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Handlers decide what gets through
    root_logger.addHandler(console_handler)

    log_file = None
    if log_to_file:
        if log_dir is None:
            log_dir = Path(__file__).parent.parent.parent / "logs"
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)

        log_file = log_dir / f"app_{datetime.now().strftime('%Y%m%d')}.log"
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        file_handler.setLevel(logging.DEBUG)  # File captures everything
        root_logger.addHandler(file_handler)

    # These libraries log excessively at DEBUG level
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("pymongo").setLevel(logging.WARNING)

    _logging_configured = True

    root_logger.debug(f"Logging configured: level={log_level}, file={log_file}")

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a specific module.

    This is the primary way modules should obtain a logger.
    Using __name__ as the logger name preserves the module hierarchy.

    Args:
        name: Logger name, typically __name__ of the calling module

    Returns:
        Logger instance for the specified name
    """
    return logging.getLogger(name)


class LoggerMixin:
    """
    Mixin class to add logging capability to any class.

    Provides a self.logger attribute that can be used for logging.
    The logger name is automatically set to the class name.

    Example:
        >>> class UserRepository(LoggerMixin):
        ...     def insert(self, document):
        ...         self.logger.debug("Inserting user")
    """

    @property
    def logger(self) -> logging.Logger:
        """Get logger named after this class."""
        return get_logger(self.__class__.__name__)
