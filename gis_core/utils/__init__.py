"""
Utility modules for the GIS location query package.

This module provides logging setup and helpers shared across the package.
"""

from .logging_setup import setup_logging, get_logger, log_performance

__all__ = ["setup_logging", "get_logger", "log_performance"]
