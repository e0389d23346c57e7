"""
Observability module.

Provides logging configuration, correlation ID tracking and request
logging middleware.
"""

from coursehub.observability.correlation import (
    CORRELATION_HEADER,
    correlation_scope,
    get_correlation_id,
)
from coursehub.observability.logger import configure_logging

__all__ = [
    "CORRELATION_HEADER",
    "configure_logging",
    "correlation_scope",
    "get_correlation_id",
]
