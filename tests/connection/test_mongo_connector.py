"""
Tests for MongoConnector class.

This module tests MongoDB connection setup including retry logic,
timeout handling, and disconnect cleanup.
"""

import pytest
from unittest.mock import Mock, patch
from func_timeout import FunctionTimedOut
from pymongo.errors import ConnectionFailure, OperationFailure, ServerSelectionTimeoutError

from gis_core.connection.auth_handler import AuthHandler
from gis_core.connection.mongo_connector import (
    MongoConnector,
    CONNECT_TIMEOUT_SECONDS,
    SERVER_SELECTION_TIMEOUT_MS,
)
from gis_core.exceptions import GISAuthenticationError, GISConnectionError, GISValidationError


class TestMongoConnector:
    """Test cases for MongoConnector class."""
    
    @pytest.fixture
    def mock_config_loader(self):
        mock_loader = Mock()
        mock_loader.get_mongodb_uri.return_value = "mongodb://localhost:27017"
        return mock_loader
    
    @pytest.fixture
    def mock_auth_handler(self):
        mock_handler = Mock(spec=AuthHandler)
        mock_handler.get_credentials.return_value = ("reader", "secret")
        return mock_handler
    
    @pytest.fixture
    def connector(self, mock_config_loader, mock_auth_handler):
        connector = MongoConnector(mock_config_loader)
        connector.auth_handler = mock_auth_handler
        return connector
    
    @pytest.fixture(autouse=True)
    def no_retry_sleep(self):
        with patch("time.sleep"):
            yield
    
    def test_init(self, mock_config_loader):
        connector = MongoConnector(mock_config_loader, environment="production")
        
        assert connector.config_loader is mock_config_loader
        assert connector.environment == "production"
        assert connector.get_connection() is None
        assert not connector.is_connected()
    
    @patch('gis_core.connection.mongo_connector.func_timeout')
    @patch('gis_core.connection.mongo_connector.MongoClient')
    def test_connect_success(self, mock_client_class, mock_func_timeout, connector, mock_config_loader):
        mock_client = mock_client_class.return_value
        
        result = connector.connect()
        
        assert result is mock_client
        assert connector.is_connected()
        mock_config_loader.get_mongodb_uri.assert_called_once_with("development")
        mock_client_class.assert_called_once_with(
            "mongodb://localhost:27017",
            serverSelectionTimeoutMS=SERVER_SELECTION_TIMEOUT_MS,
            username="reader",
            password="secret"
        )
        mock_func_timeout.assert_called_once_with(
            CONNECT_TIMEOUT_SECONDS, mock_client.admin.command, args=("ping",)
        )
    
    @patch('gis_core.connection.mongo_connector.func_timeout')
    @patch('gis_core.connection.mongo_connector.MongoClient')
    def test_connect_without_credentials(self, mock_client_class, mock_func_timeout, connector, mock_auth_handler):
        mock_auth_handler.get_credentials.return_value = (None, None)
        
        connector.connect()
        
        mock_client_class.assert_called_once_with(
            "mongodb://localhost:27017", serverSelectionTimeoutMS=SERVER_SELECTION_TIMEOUT_MS
        )
    
    @patch('gis_core.connection.mongo_connector.func_timeout')
    @patch('gis_core.connection.mongo_connector.MongoClient')
    def test_connect_timeout(self, mock_client_class, mock_func_timeout, connector):
        mock_func_timeout.side_effect = FunctionTimedOut()
        
        with pytest.raises(GISConnectionError, match="timeout"):
            connector.connect()
        
        mock_client_class.return_value.close.assert_called_once()
        assert not connector.is_connected()
    
    @patch('gis_core.connection.mongo_connector.func_timeout')
    @patch('gis_core.connection.mongo_connector.MongoClient')
    def test_connect_retries_connection_failure(self, mock_client_class, mock_func_timeout, connector):
        mock_func_timeout.side_effect = [ConnectionFailure("refused"), ConnectionFailure("refused"), None]
        
        connector.connect()
        
        assert mock_client_class.call_count == 3
        assert mock_client_class.return_value.close.call_count == 2
        assert connector.is_connected()
    
    @patch('gis_core.connection.mongo_connector.func_timeout')
    @patch('gis_core.connection.mongo_connector.MongoClient')
    def test_connect_gives_up_after_three_attempts(self, mock_client_class, mock_func_timeout, connector):
        mock_func_timeout.side_effect = ConnectionFailure("refused")
        
        with pytest.raises(GISConnectionError) as exc_info:
            connector.connect()
        
        assert mock_client_class.call_count == 3
        assert isinstance(exc_info.value.__cause__, ConnectionFailure)
        assert exc_info.value.context == {"environment": "development"}
    
    @patch('gis_core.connection.mongo_connector.func_timeout')
    @patch('gis_core.connection.mongo_connector.MongoClient')
    def test_auth_failure_not_retried(self, mock_client_class, mock_func_timeout, connector):
        mock_func_timeout.side_effect = OperationFailure("Authentication failed", code=18)
        
        with pytest.raises(GISConnectionError, match="Authentication failed"):
            connector.connect()
        
        assert mock_client_class.call_count == 1
    
    def test_server_selection_fails_before_connect_timeout(self):
        assert SERVER_SELECTION_TIMEOUT_MS / 1000 < CONNECT_TIMEOUT_SECONDS
    
    @patch('gis_core.connection.mongo_connector.func_timeout')
    @patch('gis_core.connection.mongo_connector.MongoClient')
    def test_unreachable_server_is_retried(self, mock_client_class, mock_func_timeout, connector):
        mock_func_timeout.side_effect = ServerSelectionTimeoutError("10.255.255.1:27017: timed out")
        
        with pytest.raises(GISConnectionError):
            connector.connect()
        
        assert mock_client_class.call_count == 3
        for call in mock_client_class.call_args_list:
            assert call.kwargs["serverSelectionTimeoutMS"] == SERVER_SELECTION_TIMEOUT_MS
    
    @patch('gis_core.connection.mongo_connector.MongoClient')
    def test_environment_variables_validated_before_connect(self, mock_client_class, connector, mock_config_loader):
        mock_config_loader.validate_environment_variables.side_effect = GISValidationError(
            "Missing required environment variables: MONGODB_PASSWORD"
        )
        
        with pytest.raises(GISValidationError):
            connector.connect()
        
        mock_config_loader.validate_environment_variables.assert_called_once_with("development")
        mock_client_class.assert_not_called()
    
    def test_bad_credentials_propagate(self, connector, mock_auth_handler):
        mock_auth_handler.get_credentials.side_effect = GISAuthenticationError("Username cannot be empty")
        
        with pytest.raises(GISAuthenticationError):
            connector.connect()
    
    @patch('gis_core.connection.mongo_connector.func_timeout')
    @patch('gis_core.connection.mongo_connector.MongoClient')
    def test_disconnect(self, mock_client_class, mock_func_timeout, connector):
        client = connector.connect()
        
        connector.disconnect()
        
        client.close.assert_called_once()
        assert not connector.is_connected()
    
    def test_disconnect_when_not_connected(self, connector):
        connector.disconnect()
        
        assert connector.get_connection() is None
