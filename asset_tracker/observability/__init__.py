"""Logging and request middleware."""

from asset_tracker.observability.logging import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
