"""Utility modules for logging and common helpers."""

from trapwatch.utils.logging import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
