"""
Structured logging utilities.

Provides logging setup plus a context manager for structured operation
logging with timing, error tracking, and metadata.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterator  # noqa: TCH003
from contextlib import contextmanager
from typing import Any

import structlog

from checkgate.core.config.logging_config import LoggingConfig  # noqa: TCH001

logger = logging.getLogger(__name__)


def configure_logging(logging_config: LoggingConfig, level: int | None = None) -> None:
    """
    Configure stdlib logging and route structlog through it.

    Args:
        logging_config: Level, format and optional log file.
        level: Explicit level overriding logging_config.level (e.g. in debug mode).
    """
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if logging_config.file_path:
        handlers.append(logging.FileHandler(logging_config.file_path))

    resolved_level = level if level is not None else getattr(logging, logging_config.level.upper(), logging.INFO)

    logging.basicConfig(
        level=resolved_level,
        format=logging_config.format,
        handlers=handlers,
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


@contextmanager
def log_operation(
    operation: str,
    subject_ids: dict[str, str] | None = None,
    **context: Any,
) -> Iterator[None]:
    """
    Context manager for structured operation logging.

    Logs operation start, completion, and errors with timing information.

    Args:
        operation: Name of the operation being performed
        subject_ids: Dictionary of subject identifiers (e.g., {"rules_file": ".checkgate/rules.yaml"})
        **context: Additional context to include in logs

    Example:
        with log_operation("rule_loading", rules_file=path):
            rule_set = loader.get_rules(path)
    """
    start_time = time.time()
    log_context = {
        "operation": operation,
        **(subject_ids or {}),
        **context,
    }

    logger.info(f"🚀 Starting {operation}", extra=log_context)

    try:
        yield
    except Exception as e:
        latency_ms = int((time.time() - start_time) * 1000)
        logger.error(
            f"❌ {operation} failed after {latency_ms}ms",
            extra={**log_context, "error": str(e), "latency_ms": latency_ms},
        )
        raise
    else:
        latency_ms = int((time.time() - start_time) * 1000)
        logger.info(
            f"✅ {operation} completed in {latency_ms}ms",
            extra={**log_context, "latency_ms": latency_ms},
        )



def log_structured(
    logger_obj: logging.Logger,
    event: str,
    level: str = "info",
    **context: Any,
) -> None:
    """
    Lightweight structured logging helper.

    Args:
        logger_obj: Logger instance to use.
        event: Event/operation name.
        level: Logging level (info|warning|error).
        **context: Arbitrary key/value metadata.
    """
    log_fn: Callable[..., Any] = getattr(logger_obj, level, logger_obj.info)
    log_fn(event, extra=context)
