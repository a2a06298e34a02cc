"""
Configuration management for zurestore.

Handles loading, validation, and access to client configuration: the storage
account endpoints, the location mode and logging.
"""

import os
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional
from enum import Enum

import yaml
from pydantic import BaseModel, Field, field_validator, ValidationError

from ..constants import DEFAULT_ENDPOINT_SUFFIX, SECONDARY_ACCOUNT_SUFFIX
from .logging_config import setup_logging
from .storage_uri import LocationMode, StorageUri

logger = logging.getLogger(__name__)


class LogLevel(str, Enum):
    """Valid log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LoggingConfig(BaseModel):
    """Logging configuration."""
    level: LogLevel = LogLevel.INFO
    format: str = "json"
    file: Optional[str] = None
    rotation_size: str = "10MB"
    rotation_count: int = 5
    module_levels: Optional[Dict[str, str]] = Field(
        default=None,
        description="Per-module log levels, e.g., {'zurestore.models': 'DEBUG'}"
    )


class AccountConfig(BaseModel):
    """Storage account endpoint configuration."""
    name: str = "devstoreaccount1"
    protocol: str = "https"
    endpoint_suffix: str = DEFAULT_ENDPOINT_SUFFIX
    primary_endpoint: Optional[str] = Field(
        default=None,
        description="Explicit blob endpoint, overrides the name/suffix layout"
    )
    secondary_endpoint: Optional[str] = Field(
        default=None,
        description="Explicit secondary blob endpoint"
    )

    @field_validator("protocol")
    @classmethod
    def validate_protocol(cls, v: str) -> str:
        """Only http and https endpoints are supported."""
        if v.lower() not in ("http", "https"):
            raise ValueError("Protocol must be 'http' or 'https'")
        return v.lower()


class ClientConfig(BaseModel):
    """Main zurestore configuration schema."""

    version: str = Field(default="0.1.0", description="Configuration version")

    account: AccountConfig = Field(default_factory=AccountConfig)

    location_mode: LocationMode = LocationMode.PRIMARY_ONLY

    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("version")
    @classmethod
    def validate_version(cls, v: str) -> str:
        """Validate version format."""
        parts = v.split(".")
        if len(parts) != 3:
            raise ValueError("Version must be in format x.y.z")
        for part in parts:
            if not part.isdigit():
                raise ValueError("Version components must be numeric")
        return v

    def blob_service_uri(self) -> StorageUri:
        """
        Build the blob service URI pair for the configured account.

        Explicit endpoints win. Otherwise the primary is
        ``<protocol>://<name>.blob.<suffix>`` and the secondary uses the
        ``<name>-secondary`` host.
        """
        account = self.account
        if account.primary_endpoint or account.secondary_endpoint:
            return StorageUri(
                primary_uri=account.primary_endpoint.rstrip('/') if account.primary_endpoint else None,
                secondary_uri=account.secondary_endpoint.rstrip('/') if account.secondary_endpoint else None,
            )

        return StorageUri(
            primary_uri=f"{account.protocol}://{account.name}.blob.{account.endpoint_suffix}",
            secondary_uri=f"{account.protocol}://{account.name}{SECONDARY_ACCOUNT_SUFFIX}.blob.{account.endpoint_suffix}",
        )

    def container_storage_uri(self, container_name: str) -> StorageUri:
        """Build the URI pair of a container in the configured account."""
        return self.blob_service_uri().append_path(container_name)


class ConfigManager:
    """
    Manages zurestore configuration loading and validation.

    Configuration precedence (highest to lowest):
    1. Explicit overrides
    2. Environment variables (ZURESTORE_*)
    3. Configuration file (YAML/JSON)
    4. Defaults
    """

    def __init__(self):
        self._config: Optional[ClientConfig] = None
        self._config_file: Optional[Path] = None

    def load(
        self,
        config_file: Optional[str] = None,
        overrides: Optional[Dict[str, Any]] = None
    ) -> ClientConfig:
        """
        Load and validate configuration from multiple sources.

        Args:
            config_file: Path to configuration file (YAML or JSON)
            overrides: Dictionary of explicit overrides

        Returns:
            Validated ClientConfig instance

        Raises:
            ValidationError: If configuration is invalid
            FileNotFoundError: If specified config file doesn't exist
        """
        logger.info("Loading zurestore configuration")

        config_dict: Dict[str, Any] = {}

        if config_file:
            config_dict = self._load_from_file(config_file)
            self._config_file = Path(config_file)
            logger.info(f"Loaded configuration from file: {config_file}")

        env_config = self._load_from_env()
        config_dict = self._merge_configs(config_dict, env_config)
        if env_config:
            logger.info(f"Applied {len(env_config)} environment variable overrides")

        if overrides:
            config_dict = self._merge_configs(config_dict, overrides)
            logger.info(f"Applied {len(overrides)} explicit overrides")

        try:
            self._config = ClientConfig(**config_dict)
            logger.info("Configuration validated successfully")
            self._log_configuration()
            return self._config
        except ValidationError as e:
            logger.error(f"Configuration validation failed: {e}")
            raise

    def _load_from_file(self, file_path: str) -> Dict[str, Any]:
        """Load configuration from YAML or JSON file."""
        path = Path(file_path)

        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {file_path}")

        with open(path, 'r') as f:
            if path.suffix in ['.yaml', '.yml']:
                return yaml.safe_load(f) or {}
            elif path.suffix == '.json':
                return json.load(f)
            else:
                raise ValueError(f"Unsupported config file format: {path.suffix}")

    def _load_from_env(self) -> Dict[str, Any]:
        """Load configuration from environment variables."""
        config: Dict[str, Any] = {}

        if account_name := os.getenv("ZURESTORE_ACCOUNT_NAME"):
            config.setdefault("account", {})["name"] = account_name
        if suffix := os.getenv("ZURESTORE_ENDPOINT_SUFFIX"):
            config.setdefault("account", {})["endpoint_suffix"] = suffix
        if primary := os.getenv("ZURESTORE_PRIMARY_ENDPOINT"):
            config.setdefault("account", {})["primary_endpoint"] = primary
        if secondary := os.getenv("ZURESTORE_SECONDARY_ENDPOINT"):
            config.setdefault("account", {})["secondary_endpoint"] = secondary

        if location_mode := os.getenv("ZURESTORE_LOCATION_MODE"):
            config["location_mode"] = location_mode.lower()

        if log_level := os.getenv("ZURESTORE_LOG_LEVEL"):
            config.setdefault("logging", {})["level"] = log_level.upper()
        if log_file := os.getenv("ZURESTORE_LOG_FILE"):
            config.setdefault("logging", {})["file"] = log_file

        return config

    def _merge_configs(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Deep merge two configuration dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_configs(result[key], value)
            else:
                result[key] = value

        return result

    def _log_configuration(self) -> None:
        """Log the loaded configuration."""
        if not self._config:
            return

        config_dict = self._config.model_dump(mode="json")
        logger.info(f"Active configuration: {json.dumps(config_dict, indent=2)}")

    def get_config(self) -> ClientConfig:
        """
        Get the loaded configuration.

        Raises:
            RuntimeError: If configuration hasn't been loaded
        """
        if self._config is None:
            raise RuntimeError("Configuration not loaded. Call load() first.")
        return self._config

    def reload(self) -> ClientConfig:
        """Reload configuration from the same sources."""
        config_file = str(self._config_file) if self._config_file else None
        return self.load(config_file=config_file)

    def configure_logging(self) -> None:
        """Apply the logging section of the loaded configuration."""
        log_config = self.get_config().logging
        setup_logging(
            level=log_config.level.value,
            format_type=log_config.format,
            log_file=log_config.file,
            rotation_size=log_config.rotation_size,
            rotation_count=log_config.rotation_count,
            module_levels=log_config.module_levels,
        )
