"""Observability – structlog configuration and helpers."""
from sqlmask.observability.logging.factory import configure_from_settings, configure_logging
from sqlmask.observability.logging.processors import CorrelationProcessor, get_logger

__all__ = ["CorrelationProcessor", "configure_from_settings", "configure_logging", "get_logger"]
