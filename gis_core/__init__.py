"""
GIS Location Query Core Package

Shared infrastructure for the location query module: configuration,
MongoDB connection handling, logging and exceptions.
"""

from .config import ConfigLoader, QueryConfig
from .exceptions import GISBaseException

__version__ = "1.0.0"
__all__ = ['ConfigLoader', 'QueryConfig', 'GISBaseException']
