"""Utility modules for the enforcer."""

from .config import EnforcerConfig, get_boolean_input, get_input, parse_json_input
from .monitoring import DiagnosticLogger, configure_logging
from .retry import RetryConfig, with_retry

__all__ = [
    "EnforcerConfig",
    "get_boolean_input",
    "get_input",
    "parse_json_input",
    "DiagnosticLogger",
    "configure_logging",
    "RetryConfig",
    "with_retry",
]
