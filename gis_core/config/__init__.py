"""
Configuration management module for the GIS location query package.

This module provides configuration loading and validation for
multi-environment deployments (development and production).
"""

from .config_loader import ConfigLoader
from .query_config import QueryConfig

__all__ = ["ConfigLoader", "QueryConfig"]
