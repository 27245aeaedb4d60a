"""
Retry logic for GitHub API calls.
"""

import time
from dataclasses import dataclass
from typing import Callable, List, Optional, Type, TypeVar

from .monitoring import DiagnosticLogger, default_logger

T = TypeVar("T")


@dataclass
class RetryConfig:
    """Configuration for retry behavior."""

    max_attempts: int = 3
    delay_seconds: float = 1.0
    retry_on: List[Type[Exception]] = None
    should_retry: Optional[Callable[[Exception], bool]] = None

    def __post_init__(self):
        if self.retry_on is None:
            self.retry_on = [Exception]


def with_retry(
    operation: Callable[[], T],
    config: Optional[RetryConfig] = None,
    logger: Optional[DiagnosticLogger] = None,
) -> T:
    """Execute operation with retries.

    Args:
        operation: Function to execute
        config: Optional retry configuration
        logger: Optional logger instance

    Returns:
        Result of successful operation

    Raises:
        Exception: The last error, if all retry attempts fail or the error
            is not retryable
    """
    config = config or RetryConfig()
    logger = logger or default_logger

    for attempt in range(config.max_attempts):
        try:
            return operation()
        except tuple(config.retry_on) as e:
            if config.should_retry is not None and not config.should_retry(e):
                raise
            if attempt == config.max_attempts - 1:
                raise

            logger.log_warning(
                "retry",
                {
                    "attempt": attempt + 1,
                    "error": str(e),
                    "delay_seconds": config.delay_seconds,
                },
            )
            time.sleep(config.delay_seconds)

    raise RuntimeError(f"Operation failed after {config.max_attempts} attempts")
