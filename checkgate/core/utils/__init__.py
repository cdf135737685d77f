"""
Shared utilities for logging.
"""

from checkgate.core.utils.logging import configure_logging, log_operation, log_structured

__all__ = [
    "configure_logging",
    "log_operation",
    "log_structured",
]
