"""
Custom exception classes for the GIS location query package.

This module defines domain-specific exceptions for the infrastructure around
the query façade: configuration, credentials and connection handling. Errors
raised by the database driver during a query are not wrapped.
"""

from typing import Optional, Dict, Any


class GISBaseException(Exception):
    """Base exception class for all GIS location query exceptions."""
    
    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}
    
    def __str__(self) -> str:
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} (Context: {context_str})"
        return self.message


class GISConfigurationError(GISBaseException):
    """
    Exception raised when configuration loading fails.
    
    This exception is raised when:
    - The environment configuration file is missing
    - The configuration file is not valid JSON
    - Query settings cannot be built from the configuration
    """
    pass


class GISValidationError(GISBaseException):
    """
    Exception raised when configuration validation fails.
    
    This exception is raised when:
    - Required configuration keys are missing
    - The requested environment is not defined
    - Required environment variables are not set
    """
    pass


class GISAuthenticationError(GISBaseException):
    """
    Exception raised when database credentials are unusable.
    
    This exception is raised when:
    - Only one of username/password is provided
    - A provided credential is blank
    """
    pass


class GISConnectionError(GISBaseException):
    """
    Exception raised when the MongoDB connection cannot be established.
    
    This exception is raised when:
    - The server cannot be reached
    - The initial ping fails
    - Connection setup times out
    """
    pass
