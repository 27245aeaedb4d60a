"""Structured logging for validation runs."""

import json
import logging
from typing import Dict, Optional

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


class DiagnosticLogger:
    """Simple structured logging for enforcer operations.

    Every record is a JSON object with an ``operation`` name and a
    ``details`` mapping, so log lines stay greppable in CI output.
    """

    def __init__(self, name: str = "pr_template_enforcer", log_file: Optional[str] = None):
        """Initialize logger.

        Args:
            name: Name of the underlying ``logging`` logger
            log_file: Optional log file path
        """
        self.logger = logging.getLogger(name)

        if log_file:
            handler = logging.FileHandler(log_file)
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            self.logger.addHandler(handler)

    def _emit(self, level: int, operation: str, details: Optional[Dict]) -> None:
        if not self.logger.isEnabledFor(level):
            return
        self.logger.log(
            level, json.dumps({"operation": operation, "details": details or {}}, default=str)
        )

    def log_debug(self, operation: str, details: Optional[Dict] = None) -> None:
        """Log a debug-level trace of an operation."""
        self._emit(logging.DEBUG, operation, details)

    def log_operation(self, operation: str, details: Optional[Dict] = None) -> None:
        """Log an operation with details.

        Args:
            operation: Name of the operation
            details: Operation details/context
        """
        self._emit(logging.INFO, operation, details)

    def log_warning(self, operation: str, details: Optional[Dict] = None) -> None:
        """Log a recoverable problem."""
        self._emit(logging.WARNING, operation, details)

    def log_error(
        self, operation: str, error: str, context: Optional[Dict] = None
    ) -> None:
        """Log an error with context.

        Args:
            operation: Name of the operation that failed
            error: Error message
            context: Optional error context
        """
        self.logger.error(
            json.dumps(
                {"operation": operation, "error": error, "context": context or {}},
                default=str,
            )
        )


def configure_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """Attach handlers to the package logger.

    Args:
        level: Logging level name
        log_file: Optional file to log to in addition to stderr
    """
    logger = logging.getLogger("pr_template_enforcer")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)


default_logger = DiagnosticLogger()
