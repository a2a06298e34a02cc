"""
Storage URI Models

Primary/secondary endpoint pair for a storage resource and the location
modes a client may use to address it.

Author: Ayodele Oladeji
Date: 2025
"""

from enum import Enum
from typing import Iterator, Optional
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..exceptions import InvalidStorageUriError


class StorageLocation(str, Enum):
    """Physical location of a storage endpoint."""
    PRIMARY = "primary"
    SECONDARY = "secondary"


class LocationMode(str, Enum):
    """Which locations a request may be sent to, in order of preference."""
    PRIMARY_ONLY = "primary_only"
    PRIMARY_THEN_SECONDARY = "primary_then_secondary"
    SECONDARY_ONLY = "secondary_only"
    SECONDARY_THEN_PRIMARY = "secondary_then_primary"


class StorageUri(BaseModel):
    """
    URIs of one storage resource at its primary and secondary locations.

    At least one location must be set. When both are set they must address
    the same resource: path and query string must match.
    """

    primary_uri: Optional[str] = Field(default=None, description="URI at the primary location")
    secondary_uri: Optional[str] = Field(default=None, description="URI at the secondary location")

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_locations(self) -> "StorageUri":
        """Ensure the pair is non-empty and both members point at the same resource."""
        if self.primary_uri is None and self.secondary_uri is None:
            raise InvalidStorageUriError("StorageUri requires a primary or secondary URI")

        if self.primary_uri is not None and self.secondary_uri is not None:
            primary = urlparse(self.primary_uri)
            secondary = urlparse(self.secondary_uri)
            if primary.path.rstrip('/') != secondary.path.rstrip('/') or primary.query != secondary.query:
                raise InvalidStorageUriError(
                    "Primary and secondary location URIs in a StorageUri must point to the same resource"
                )
        return self

    def get_uri(self, location: StorageLocation) -> Optional[str]:
        """Return the URI for the given location, or None if that location is not set."""
        if location == StorageLocation.PRIMARY:
            return self.primary_uri
        return self.secondary_uri

    def validate_location_mode(self, mode: LocationMode) -> bool:
        """Return True if this URI pair has every location the mode may use."""
        if mode == LocationMode.PRIMARY_ONLY:
            return self.primary_uri is not None
        if mode == LocationMode.SECONDARY_ONLY:
            return self.secondary_uri is not None
        return self.primary_uri is not None and self.secondary_uri is not None

    def append_path(self, segment: str) -> "StorageUri":
        """Return a new StorageUri with ``segment`` appended to each location's path."""
        segment = segment.strip('/')

        def _join(uri: Optional[str]) -> Optional[str]:
            if uri is None:
                return None
            parsed = urlparse(uri)
            path = f"{parsed.path.rstrip('/')}/{segment}"
            return parsed._replace(path=path).geturl()

        return StorageUri(primary_uri=_join(self.primary_uri), secondary_uri=_join(self.secondary_uri))

    def locations(self) -> Iterator[str]:
        """Iterate the set locations in primary, secondary order."""
        for uri in (self.primary_uri, self.secondary_uri):
            if uri is not None:
                yield uri
