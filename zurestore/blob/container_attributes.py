"""
Blob Container Attribute Models

Pydantic models carrying a container's name, location URIs, metadata and
properties between response parsing and the container handle that owns them.

Author: Ayodele Oladeji
Date: 2025
"""

from collections.abc import Mapping
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from requests.structures import CaseInsensitiveDict

from ..core.storage_uri import StorageUri
from ..exceptions import UriNotSetError
from ..models.lease import LeaseDuration, LeaseState, LeaseStatus


class BlobContainerProperties(BaseModel):
    """
    Container system properties.

    Lease facets default to UNSPECIFIED until read from a response.
    """

    etag: Optional[str] = Field(default=None, description="Entity tag for the container")
    last_modified: Optional[datetime] = Field(default=None, description="Last modified timestamp")
    lease_status: LeaseStatus = Field(default=LeaseStatus.UNSPECIFIED)
    lease_state: LeaseState = Field(default=LeaseState.UNSPECIFIED)
    lease_duration: LeaseDuration = Field(default=LeaseDuration.UNSPECIFIED)

    model_config = ConfigDict(validate_assignment=True)


class BlobContainerAttributes(BaseModel):
    """
    A container's attributes, including its properties and metadata.

    ``metadata`` and ``properties`` always exist; ``storage_uri`` stays None
    until assigned. Metadata keys are case-insensitive.
    """

    name: Optional[str] = Field(default=None, description="Container name")
    storage_uri: Optional[StorageUri] = Field(default=None, description="URIs at every location")
    metadata: CaseInsensitiveDict = Field(default_factory=CaseInsensitiveDict)
    properties: BlobContainerProperties = Field(default_factory=BlobContainerProperties)

    model_config = ConfigDict(arbitrary_types_allowed=True, validate_assignment=True)

    @field_validator('metadata', mode='before')
    @classmethod
    def validate_metadata(cls, v: Any) -> CaseInsensitiveDict:
        """Accept any mapping and store it case-insensitively."""
        if v is None:
            return CaseInsensitiveDict()
        if isinstance(v, CaseInsensitiveDict):
            return v
        if not isinstance(v, Mapping):
            raise ValueError("Metadata must be a mapping of name to value")
        return CaseInsensitiveDict({str(k): str(val) for k, val in v.items()})

    @property
    def uri(self) -> Optional[str]:
        """
        Primary URI of the container.

        None when the assigned ``storage_uri`` only has a secondary location;
        use ``storage_uri.get_uri(StorageLocation.SECONDARY)`` for that case.

        Raises:
            UriNotSetError: If ``storage_uri`` has not been assigned
        """
        if self.storage_uri is None:
            raise UriNotSetError(self.name or "container")
        return self.storage_uri.primary_uri
