"""
zurestore: Azure Blob Storage response parsing

Typed readers for storage service response headers, container attributes
and the service properties/stats documents.
"""

__version__ = "0.1.0"
__author__ = "Ayodele Oladeji"

from .core import base_response
from .core.storage_uri import LocationMode, StorageLocation, StorageUri
from .blob.container_attributes import BlobContainerAttributes, BlobContainerProperties
from .models.lease import LeaseDuration, LeaseState, LeaseStatus
from .models.service_properties import ServiceProperties
from .models.service_stats import ServiceStats

__all__ = [
    "base_response",
    "BlobContainerAttributes",
    "BlobContainerProperties",
    "LeaseDuration",
    "LeaseState",
    "LeaseStatus",
    "LocationMode",
    "ServiceProperties",
    "ServiceStats",
    "StorageLocation",
    "StorageUri",
    "__version__",
]
