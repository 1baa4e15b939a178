"""
Application logging for friendly-dates.
Tracks rejected timestamps, formatting decisions and configuration problems.
"""

import logging
import os
from datetime import datetime

from friendly_dates.config import settings


class AppLogger:
    """Application logger for tracking formatter events"""

    _instance = None
    _logger = None

    def __new__(cls):
        """Singleton pattern to ensure one logger instance"""
        if cls._instance is None:
            cls._instance = super(AppLogger, cls).__new__(cls)
            cls._instance._initialize_logger()
        return cls._instance

    def _initialize_logger(self):
        """Set up the application logger"""
        self._logger = logging.getLogger("friendly_dates")

        # Use configured log level (default to WARNING if invalid)
        level_name = settings.LOG_LEVEL or "WARNING"
        level = getattr(logging, level_name.upper(), None)
        if not isinstance(level, int):
            level = logging.WARNING

        self._logger.setLevel(level)

        # Prevent duplicate handlers if reinitialized
        if self._logger.handlers:
            return

        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
        )

        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        self._logger.addHandler(console_handler)

        if not settings.LOG_TO_FILE:
            return

        log_filename = os.path.join(
            settings.LOG_DIRECTORY,
            f"friendly_dates_{datetime.now().strftime('%Y%m%d')}.log",
        )
        try:
            os.makedirs(settings.LOG_DIRECTORY, exist_ok=True)
            file_handler = logging.FileHandler(log_filename)
        except OSError as e:
            # Console-only when the log directory is not writable
            self._logger.warning(f"File logging disabled: {e}")
            return

        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        self._logger.addHandler(file_handler)

    def warning(self, message: str, **kwargs):
        """Log warning message with optional context"""
        self._log_with_context(logging.WARNING, message, **kwargs)

    def debug(self, message: str, **kwargs):
        """Log debug message with optional context"""
        self._log_with_context(logging.DEBUG, message, **kwargs)

    def _log_with_context(self, level: int, message: str, **kwargs):
        """Log message with additional context fields"""
        if kwargs:
            context_str = " | ".join(f"{k}={v}" for k, v in kwargs.items())
            full_message = f"{message} | {context_str}"
        else:
            full_message = message

        self._logger.log(level, full_message)  # type: ignore

    def timestamp_rejected(self, value, reason: str):
        """Log a timestamp that could not be resolved"""
        self.warning(
            "Timestamp rejected",
            value=repr(value)[:64],  # Truncate long inputs
            reason=reason,
        )

    def rule_applied(self, rule: str, diff_seconds: int = None):
        """Log which formatting rule produced the output"""
        self.debug("Formatting rule applied", rule=rule, diff_seconds=diff_seconds)


# Global logger instance
logger = AppLogger()
