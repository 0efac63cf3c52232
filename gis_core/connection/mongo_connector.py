"""
MongoDB connector for the GIS location query package.

This module opens the client handle the query functions take, with retry
logic and timeout handling around the initial server ping.
"""

from typing import Optional
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type
from func_timeout import func_timeout, FunctionTimedOut
from pymongo import MongoClient
from pymongo.errors import ConnectionFailure, PyMongoError

from .auth_handler import AuthHandler
from ..config import ConfigLoader
from ..exceptions import GISConnectionError
from ..utils import get_logger

logger = get_logger(__name__)

CONNECT_TIMEOUT_SECONDS = 30
# Must stay below CONNECT_TIMEOUT_SECONDS: selection timeouts are retried, FunctionTimedOut is not
SERVER_SELECTION_TIMEOUT_MS = 10_000


class MongoConnector:
    """
    MongoDB connection manager with retry logic and timeout handling.
    
    Only connection setup is retried. Queries issued through the returned
    client are never retried by this package.
    """
    
    def __init__(self, config_loader: ConfigLoader, environment: str = "development"):
        """
        Initialize the MongoDB connector.
        
        Args:
            config_loader: ConfigLoader instance for accessing configuration
            environment: Environment whose configuration is used
        """
        self.config_loader = config_loader
        self.environment = environment
        self.auth_handler = AuthHandler()
        self._client: Optional[MongoClient] = None
        logger.debug("MongoConnector initialized")
    
    def connect(self) -> MongoClient:
        """
        Establish a verified connection to MongoDB.
        
        Returns:
            MongoClient: Connected client
            
        Raises:
            GISConnectionError: If connection fails after retries
            GISAuthenticationError: If credentials are unusable
            GISValidationError: If required environment variables are missing
        """
        self.config_loader.validate_environment_variables(self.environment)
        uri = self.config_loader.get_mongodb_uri(self.environment)
        username, password = self.auth_handler.get_credentials()
        
        logger.info(f"Attempting connection to MongoDB for environment {self.environment}")
        
        try:
            client = self._open_client(uri, username, password)
        except FunctionTimedOut:
            raise GISConnectionError("Connection timeout - MongoDB server may be unavailable")
        except PyMongoError as e:
            error_msg = f"Failed to connect to MongoDB: {str(e)}"
            logger.error(error_msg)
            raise GISConnectionError(error_msg, {"environment": self.environment}) from e
        
        self._client = client
        logger.info("Successfully connected to MongoDB")
        return client
    
    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=4, max=10),
        retry=retry_if_exception_type(ConnectionFailure),
        reraise=True
    )
    def _open_client(self, uri: str, username: Optional[str], password: Optional[str]) -> MongoClient:
        options = {"serverSelectionTimeoutMS": SERVER_SELECTION_TIMEOUT_MS}
        if username is not None:
            options["username"] = username
            options["password"] = password
        
        client = MongoClient(uri, **options)
        try:
            func_timeout(CONNECT_TIMEOUT_SECONDS, client.admin.command, args=("ping",))
        except (Exception, FunctionTimedOut):
            client.close()
            raise
        return client
    
    def get_connection(self) -> Optional[MongoClient]:
        """
        Get the current client.
        
        Returns:
            MongoClient if connected, None otherwise
        """
        return self._client
    
    def is_connected(self) -> bool:
        return self._client is not None
    
    def disconnect(self) -> None:
        """Close the client and release its connection pool."""
        if self._client:
            self._client.close()
            self._client = None
            logger.info("Disconnected from MongoDB")
