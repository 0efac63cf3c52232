"""
Custom exceptions for the GIS location query package.

This module provides domain-specific exception classes for error handling
in configuration and connection management.
"""

from .custom_exceptions import (
    GISBaseException,
    GISConfigurationError,
    GISValidationError,
    GISAuthenticationError,
    GISConnectionError,
)

__all__ = [
    "GISBaseException",
    "GISConfigurationError",
    "GISValidationError",
    "GISAuthenticationError",
    "GISConnectionError",
]
