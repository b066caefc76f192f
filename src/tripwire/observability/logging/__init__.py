"""Observability – structured logging helpers."""
from tripwire.observability.logging.factory import JsonLoggerFactory
from tripwire.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
