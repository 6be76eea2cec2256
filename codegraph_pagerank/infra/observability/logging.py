"""
Structured Logging with structlog

Provides structured, contextual logging for the PageRank solver.
"""

import logging
import sys
import time
from typing import Any

import structlog
from structlog.contextvars import merge_contextvars


def setup_logging(
    level: str = "INFO",
    format: str = "json",  # "json" or "console"
    include_timestamp: bool = True,
) -> None:
    """
    Setup structured logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format: Output format ("json" for production, "console" for development)
        include_timestamp: Include timestamp in logs
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    # Configure stdlib logging to play nice with structlog
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=numeric_level,
    )
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(numeric_level)

    shared_processors = [
        merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
    ]

    if include_timestamp:
        shared_processors.append(structlog.processors.TimeStamper(fmt="iso"))

    shared_processors.extend(
        [
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
        ]
    )

    if format == "json":
        output_processors = [
            structlog.processors.EventRenamer("message"),
            structlog.processors.JSONRenderer(),
        ]
    else:
        output_processors = [
            structlog.dev.ConsoleRenderer(
                colors=sys.stdout.isatty(),
                exception_formatter=structlog.dev.RichTracebackFormatter(),
            )
        ]

    structlog.configure(
        processors=shared_processors + output_processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (usually __name__ from calling module)

    Example:
        ```python
        logger = get_logger(__name__)
        logger.info("pagerank_started", node_count=42)
        ```
    """
    return structlog.get_logger(name)


def log_performance(
    logger: structlog.stdlib.BoundLogger,
    operation: str,
    duration_ms: float,
    **extra: Any,
) -> None:
    """
    Log performance metrics in consistent format.

    Operations slower than one second are logged as warnings.
    """
    perf_data = {
        "operation": operation,
        "duration_ms": round(duration_ms, 2),
        "performance": True,
        **extra,
    }

    if duration_ms > 1000:
        perf_data["slow"] = True
        logger.warning("slow_operation", **perf_data)
    else:
        logger.info("operation_complete", **perf_data)


class LogPerformance:
    """
    Context manager for automatic performance logging.

    Example:
        ```python
        with LogPerformance(logger, "pagerank", node_count=1000):
            engine.compute(graph)
        ```
    """

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger,
        operation: str,
        **extra: Any,
    ):
        self.logger = logger
        self.operation = operation
        self.extra = extra
        self.start_time = 0.0

    def __enter__(self):
        self.start_time = time.time()
        return self

    def __exit__(self, exc_type, exc_val, _exc_tb):
        duration_ms = (time.time() - self.start_time) * 1000

        if exc_type is not None:
            self.logger.error(
                f"{self.operation}_failed",
                error_type=exc_type.__name__,
                error_message=str(exc_val),
                duration_ms=round(duration_ms, 2),
                **self.extra,
            )
        else:
            log_performance(self.logger, self.operation, duration_ms, **self.extra)

        # Don't suppress exceptions
        return False
