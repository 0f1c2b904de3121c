"""Observability – structured logging helpers."""
from video_views.observability.logging.factory import JsonLoggerFactory
from video_views.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
