"""
Storage Client Exceptions.

Azure-consistent exception types raised while reading service responses.

Author: Ayodele Oladeji
Date: 2025
"""

from typing import Optional


class StorageClientError(Exception):
    """Base exception for storage client errors."""

    def __init__(self, message: str, error_code: str = "InternalError"):
        """Initialize storage client error.

        Args:
            message: Error message
            error_code: Azure error code
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code


class InvalidHeaderValueError(StorageClientError, ValueError):
    """Raised when a header carries a value outside its enumeration."""

    def __init__(self, value: str, type_name: str, header_name: Optional[str] = None):
        """Initialize invalid header value error.

        Args:
            value: Offending value as received
            type_name: Name of the enumeration it failed to parse into
            header_name: Header the value came from, if known
        """
        if header_name:
            message = f"Invalid {type_name} value '{value}' in header '{header_name}'"
        else:
            message = f"Invalid {type_name} value '{value}'"
        super().__init__(message, error_code="InvalidHeaderValue")
        self.value = value
        self.type_name = type_name
        self.header_name = header_name


class UriNotSetError(StorageClientError):
    """Raised when a URI is read before the storage URI has been assigned."""

    def __init__(self, resource: str = "container"):
        super().__init__(f"Storage URI for {resource} is not set", error_code="UriNotSet")
        self.resource = resource


class InvalidStorageUriError(StorageClientError):
    """Raised when a primary/secondary URI pair is not usable."""

    def __init__(self, message: str):
        super().__init__(message, error_code="InvalidUri")


class InvalidXmlDocumentError(StorageClientError):
    """Raised when well-formed XML does not have the expected structure."""

    def __init__(self, message: str, element: Optional[str] = None):
        """Initialize invalid XML document error.

        Args:
            message: Error message
            element: Element name where the problem was found
        """
        super().__init__(message, error_code="InvalidXmlDocument")
        self.element = element


class TimestampParseError(StorageClientError, ValueError):
    """Raised when a service timestamp is not a valid RFC 1123 date."""

    def __init__(self, value: str):
        super().__init__(f"Invalid RFC 1123 timestamp: '{value}'", error_code="InvalidTimestamp")
        self.value = value
