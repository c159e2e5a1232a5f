"""Utility modules for ransel."""

from .logging_config import cleanup_logging, setup_logging

__all__ = ["cleanup_logging", "setup_logging"]
