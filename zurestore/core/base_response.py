"""
Response header readers for the protocol layer.

Stateless functions that read named fields out of a storage service
response. Each accepts a ``requests.Response``, any object with a ``headers``
mapping, a plain header mapping or a ``ResponseHeaders`` view.

A missing header is never an error: string readers return None and lease
readers return the UNSPECIFIED member.
"""

from typing import IO, Any, Optional

from requests.structures import CaseInsensitiveDict

from ..constants import (
    HEADER_CONTENT_MD5,
    HEADER_DATE,
    HEADER_ETAG,
    HEADER_LEASE_DURATION,
    HEADER_LEASE_ID,
    HEADER_LEASE_STATE,
    HEADER_LEASE_STATUS,
    HEADER_LEASE_TIME,
    HEADER_MS_DATE,
    HEADER_REQUEST_ID,
    PREFIX_FOR_STORAGE_METADATA,
)
from ..models.lease import LeaseDuration, LeaseState, LeaseStatus
from ..models.service_properties import ServiceProperties
from ..models.service_stats import ServiceStats
from .operation_context import OperationContext
from .response_headers import ResponseHeaders


def _header(response: Any, name: str) -> Optional[str]:
    return ResponseHeaders.from_response(response).get_header(name)


def get_content_md5(response: Any) -> Optional[str]:
    """Return the Content-MD5 header as sent, without validation."""
    return _header(response, HEADER_CONTENT_MD5)


def get_date(response: Any) -> Optional[str]:
    """
    Return the response date.

    The standard ``Date`` header wins; ``x-ms-date`` is used only when
    ``Date`` is absent.
    """
    headers = ResponseHeaders.from_response(response)
    date = headers.get_header(HEADER_DATE)
    if date is None:
        return headers.get_header(HEADER_MS_DATE)
    return date


def get_etag(response: Any) -> Optional[str]:
    """Return the ETag header."""
    return _header(response, HEADER_ETAG)


def get_request_id(response: Any) -> Optional[str]:
    """Return the service-assigned request id."""
    return _header(response, HEADER_REQUEST_ID)


def get_metadata(response: Any) -> CaseInsensitiveDict:
    """
    Collect user metadata from ``x-ms-meta-*`` headers.

    The prefix is matched case-insensitively and removed from the returned
    keys; other headers are ignored. Only the first value of each header is
    kept. If two headers strip to the same name, even when their names differ
    only in case, the one received last wins.

    Returns:
        Case-insensitive mapping of metadata name to value
    """
    return _get_values_by_header_prefix(ResponseHeaders.from_response(response), PREFIX_FOR_STORAGE_METADATA)


def get_lease_status(response: Any) -> LeaseStatus:
    """
    Return the lease status.

    Raises:
        InvalidHeaderValueError: If the header holds an unknown status
    """
    return LeaseStatus.parse(_header(response, HEADER_LEASE_STATUS), HEADER_LEASE_STATUS)


def get_lease_state(response: Any) -> LeaseState:
    """
    Return the lease state.

    Raises:
        InvalidHeaderValueError: If the header holds an unknown state
    """
    return LeaseState.parse(_header(response, HEADER_LEASE_STATE), HEADER_LEASE_STATE)


def get_lease_duration(response: Any) -> LeaseDuration:
    """
    Return the lease duration.

    Raises:
        InvalidHeaderValueError: If the header holds an unknown duration
    """
    return LeaseDuration.parse(_header(response, HEADER_LEASE_DURATION), HEADER_LEASE_DURATION)


def get_lease_id(response: Any) -> Optional[str]:
    """Return the lease id granted or confirmed by the service."""
    return _header(response, HEADER_LEASE_ID)


def get_lease_time(response: Any) -> Optional[str]:
    """Return the remaining seconds of a broken lease, as sent."""
    return _header(response, HEADER_LEASE_TIME)


def read_service_properties_from_stream(
    stream: IO, op_context: Optional[OperationContext] = None
) -> ServiceProperties:
    """
    Deserialize service properties from a response body stream.

    Raises:
        xml.etree.ElementTree.ParseError: If the XML is malformed
        InvalidXmlDocumentError: If unexpected XML is found
    """
    if op_context is None:
        return ServiceProperties.read_from_stream(stream)
    with op_context.activate():
        return ServiceProperties.read_from_stream(stream)


def read_service_stats_from_stream(stream: IO, op_context: Optional[OperationContext] = None) -> ServiceStats:
    """
    Deserialize service stats from a response body stream.

    Raises:
        xml.etree.ElementTree.ParseError: If the XML is malformed
        InvalidXmlDocumentError: If unexpected XML is found
        TimestampParseError: If the last sync time is invalid
    """
    if op_context is None:
        return ServiceStats.read_from_stream(stream)
    with op_context.activate():
        return ServiceStats.read_from_stream(stream)


def _get_values_by_header_prefix(headers: ResponseHeaders, prefix: str) -> CaseInsensitiveDict:
    values = CaseInsensitiveDict()
    prefix_length = len(prefix)
    lowered_prefix = prefix.lower()

    for name, header_values in headers.received_items():
        if name.lower().startswith(lowered_prefix) and header_values:
            values[name[prefix_length:]] = header_values[0]

    return values
