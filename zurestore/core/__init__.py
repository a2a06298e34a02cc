"""Core module initialization."""

from .logging_config import setup_logging
from .storage_uri import LocationMode, StorageLocation, StorageUri
from .response_headers import ResponseHeaders
from .operation_context import OperationContext
from .config_manager import ConfigManager, ClientConfig

__all__ = [
    "setup_logging",
    "LocationMode",
    "StorageLocation",
    "StorageUri",
    "ResponseHeaders",
    "OperationContext",
    "ConfigManager",
    "ClientConfig",
]
