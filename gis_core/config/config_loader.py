"""
Configuration loader for the GIS location query package.

This module provides the ConfigLoader class that handles loading and validating
the JSON environment configuration for multi-environment deployments.
"""

import copy
import json
import os
from pathlib import Path
from typing import Dict, Any, Optional
from functools import lru_cache

from pydantic import ValidationError

from .query_config import QueryConfig
from ..exceptions import GISConfigurationError, GISValidationError
from ..utils import get_logger


class ConfigLoader:
    """
    Configuration loader and validator.
    
    Loads environment-specific configuration from ``environment_config.json``,
    merges the ``shared`` section into it and validates required keys.
    """
    
    REQUIRED_ENVIRONMENT_KEYS = ("mongodb_uri", "logging")
    
    def __init__(self, config_dir: Optional[str] = None):
        """
        Initialize the configuration loader.
        
        Args:
            config_dir: Directory containing configuration files (defaults to 'config/')
        """
        self.logger = get_logger(__name__)
        self.config_dir = Path(config_dir) if config_dir else Path("config")
    
    def load_environment_config(self, environment: str) -> Dict[str, Any]:
        """
        Load configuration for a specific environment.
        
        Each call returns an independent copy of the cached configuration.
        
        Args:
            environment: Environment name (development/production)
            
        Returns:
            Dictionary containing environment-specific configuration merged with shared config
            
        Raises:
            GISConfigurationError: If the file is missing or not valid JSON
            GISValidationError: If the configuration structure is invalid
        """
        return copy.deepcopy(self._load_environment_config(environment))
    
    @lru_cache(maxsize=2)
    def _load_environment_config(self, environment: str) -> Dict[str, Any]:
        env_config_path = self.config_dir / "environment_config.json"
        
        if not env_config_path.exists():
            raise GISConfigurationError(
                f"Environment configuration file not found: {env_config_path}"
            )
        
        try:
            with open(env_config_path, 'r') as f:
                config_data = json.load(f)
        except json.JSONDecodeError as e:
            raise GISConfigurationError(
                f"Invalid JSON in environment configuration: {str(e)}"
            )
        except OSError as e:
            raise GISConfigurationError(
                f"Failed to read environment configuration: {str(e)}"
            )
        
        self._validate_environment_config(config_data, environment)
        
        env_config = dict(config_data["environments"][environment])
        
        shared_config = config_data.get("shared", {})
        for key, value in shared_config.items():
            if key not in env_config:
                env_config[key] = value
            elif isinstance(value, dict) and isinstance(env_config[key], dict):
                # Environment values win over shared ones
                merged = dict(value)
                merged.update(env_config[key])
                env_config[key] = merged
        
        env_config["_validation"] = config_data.get("validation", {})
        
        self.logger.info(f"Loaded configuration for environment: {environment}")
        return env_config
    
    def get_query_config(self, environment: str) -> QueryConfig:
        """
        Build the query settings for an environment.
        
        Missing keys fall back to the QueryConfig defaults.
        
        Raises:
            GISConfigurationError: If the ``query`` section holds invalid values
        """
        env_config = self.load_environment_config(environment)
        try:
            return QueryConfig(**env_config.get("query", {}))
        except ValidationError as e:
            raise GISConfigurationError(
                f"Invalid query configuration: {e.error_count()} error(s)",
                {"environment": environment}
            ) from e
    
    def get_mongodb_uri(self, environment: str) -> str:
        """Get the MongoDB connection URI, preferring the MONGODB_URI environment variable."""
        return os.getenv("MONGODB_URI") or self.load_environment_config(environment)["mongodb_uri"]
    
    def validate_environment_variables(self, environment: str) -> None:
        """
        Validate that required environment variables are set.
        
        Args:
            environment: Environment name to validate
            
        Raises:
            GISValidationError: If required environment variables are missing
        """
        env_config = self.load_environment_config(environment)
        required_vars = env_config.get("_validation", {}).get("required_environment_variables", [])
        
        missing_vars = [var for var in required_vars if not os.getenv(var)]
        
        if missing_vars:
            raise GISValidationError(
                f"Missing required environment variables: {', '.join(missing_vars)}"
            )
        
        self.logger.info(f"Environment variables validated for: {environment}")
    
    def _validate_environment_config(self, config_data: Dict[str, Any], environment: str) -> None:
        """
        Validate environment configuration structure.
        
        Raises:
            GISValidationError: If configuration is invalid
        """
        if "environments" not in config_data:
            raise GISValidationError("Missing 'environments' key in configuration")
        
        if environment not in config_data["environments"]:
            available_envs = list(config_data["environments"].keys())
            raise GISValidationError(
                f"Environment '{environment}' not found. Available: {available_envs}"
            )
        
        env_config = config_data["environments"][environment]
        for key in self.REQUIRED_ENVIRONMENT_KEYS:
            if key not in env_config:
                raise GISValidationError(
                    f"Missing required key '{key}' in {environment} configuration"
                )
    
    def clear_cache(self) -> None:
        """Clear the configuration cache."""
        self._load_environment_config.cache_clear()
        self.logger.info("Configuration cache cleared")
