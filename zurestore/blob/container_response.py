"""
Container response parsing.

Builds BlobContainerAttributes from the headers of a container response
(Get Container Properties, Create Container, lease operations).
"""

import logging
from typing import Any, Optional
from urllib.parse import unquote, urlparse

from ..constants import HEADER_LAST_MODIFIED
from ..core import base_response
from ..core.logging_config import log_with_context
from ..core.response_headers import ResponseHeaders
from ..core.storage_uri import StorageUri
from ..core.timestamps import parse_rfc1123
from .container_attributes import BlobContainerAttributes, BlobContainerProperties

logger = logging.getLogger(__name__)


def get_container_properties(response: Any) -> BlobContainerProperties:
    """
    Read container system properties from response headers.

    Raises:
        InvalidHeaderValueError: If a lease header holds an unknown value
        TimestampParseError: If Last-Modified is not an RFC 1123 date
    """
    headers = ResponseHeaders.from_response(response)
    last_modified = headers.get_header(HEADER_LAST_MODIFIED)

    return BlobContainerProperties(
        etag=base_response.get_etag(headers),
        last_modified=parse_rfc1123(last_modified) if last_modified else None,
        lease_status=base_response.get_lease_status(headers),
        lease_state=base_response.get_lease_state(headers),
        lease_duration=base_response.get_lease_duration(headers),
    )


def get_container_attributes(
    response: Any,
    storage_uri: StorageUri,
    name: Optional[str] = None,
) -> BlobContainerAttributes:
    """
    Build container attributes from a container response.

    Args:
        response: Response object or header mapping
        storage_uri: URIs of the container at each location
        name: Container name; defaults to the last path segment of the URI

    Returns:
        Populated BlobContainerAttributes
    """
    headers = ResponseHeaders.from_response(response)

    if name is None:
        name = container_name_from_uri(storage_uri)

    attributes = BlobContainerAttributes(
        name=name,
        storage_uri=storage_uri,
        metadata=base_response.get_metadata(headers),
        properties=get_container_properties(headers),
    )
    log_with_context(
        logger,
        logging.DEBUG,
        "Parsed container attributes",
        name=name,
        request_id=base_response.get_request_id(headers),
        metadata_keys=len(attributes.metadata),
    )
    return attributes


def container_name_from_uri(storage_uri: StorageUri) -> str:
    """Return the last path segment of the primary (or only) container URI."""
    uri = storage_uri.primary_uri or storage_uri.secondary_uri
    path = urlparse(uri).path.rstrip('/')
    return unquote(path.rsplit('/', 1)[-1])
