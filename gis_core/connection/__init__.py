"""
Connection module for the GIS location query package.

This module provides MongoDB connectivity and credential handling.
"""

from .auth_handler import AuthHandler
from .mongo_connector import MongoConnector

__all__ = [
    'AuthHandler',
    'MongoConnector',
]
