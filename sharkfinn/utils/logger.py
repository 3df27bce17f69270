"""Logging utilities for the application.

This module configures structlog for consistent logging across the application.
"""

import logging
import sys

import structlog


def configure_logger(level: int = logging.INFO) -> None:
    """Configure structlog with JSON formatting and other processors.

    This configures structlog with a standard set of processors:
    - Context variables merging
    - Log level addition
    - Stack info rendering
    - Exception info
    - ISO timestamp format
    - JSON rendering
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )
