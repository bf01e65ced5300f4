"""Observability – correlation context and structured logging."""

from sqlmask.observability.correlation import CorrelationContext, RequestContext
from sqlmask.observability.logging import CorrelationProcessor, configure_logging, get_logger

__all__ = [
    "CorrelationContext",
    "CorrelationProcessor",
    "RequestContext",
    "configure_logging",
    "get_logger",
]
