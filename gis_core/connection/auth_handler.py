"""
Authentication handler for MongoDB connections.

This module loads optional username/password credentials from environment
variables, ensuring no credential exposure in logs.
"""

import os
from typing import Optional, Tuple
from ..exceptions import GISAuthenticationError
from ..utils import get_logger

logger = get_logger(__name__)

USERNAME_VARIABLE = "MONGODB_USERNAME"
PASSWORD_VARIABLE = "MONGODB_PASSWORD"


class AuthHandler:
    """
    Handles authentication credentials for MongoDB connections.
    
    Credentials are optional: a deployment may embed them in the URI or run
    without authentication. When given, both variables must be set.
    """
    
    def get_credentials(self) -> Tuple[Optional[str], Optional[str]]:
        """
        Get credentials from environment variables.
        
        Returns:
            Tuple of (username, password); both None when neither is set
            
        Raises:
            GISAuthenticationError: If only one of the pair is set or a value is blank
        """
        username = os.getenv(USERNAME_VARIABLE)
        password = os.getenv(PASSWORD_VARIABLE)
        
        if username is None and password is None:
            logger.debug("No MongoDB credentials in environment, relying on URI")
            return None, None
        
        if username is None:
            raise GISAuthenticationError(f"{USERNAME_VARIABLE} environment variable not set")
        
        if password is None:
            raise GISAuthenticationError(f"{PASSWORD_VARIABLE} environment variable not set")
        
        self._validate_credentials(username, password)
        
        logger.info("Loaded MongoDB credentials from environment variables")
        return username, password
    
    def _validate_credentials(self, username: str, password: str) -> None:
        if not username.strip():
            raise GISAuthenticationError("Username cannot be empty")
        
        if not password.strip():
            raise GISAuthenticationError("Password cannot be empty")
