"""
Lease Models

Lease status, state and duration as reported in x-ms-lease-* response headers.

Author: Ayodele Oladeji
Date: 2025
"""

from enum import Enum
from typing import Optional

from ..exceptions import InvalidHeaderValueError


class _LeaseEnum(str, Enum):
    """Lease facet parsed from a short header string."""

    @classmethod
    def parse(cls, value: Optional[str], header_name: Optional[str] = None):
        """
        Parse a header value into a member of this enumeration.

        Matching is case-insensitive. None or empty text yields UNSPECIFIED.
        Whitespace-only text is not empty and is rejected, as is "unspecified"
        itself, which is not a wire value.

        Args:
            value: Raw header value
            header_name: Header the value was read from (for error reporting)

        Returns:
            Matching enumeration member

        Raises:
            InvalidHeaderValueError: If the value matches no member
        """
        if not value:
            return cls.UNSPECIFIED

        normalized = value.strip().lower()
        for member in cls:
            if member is not cls.UNSPECIFIED and member.value == normalized:
                return member

        raise InvalidHeaderValueError(value, cls.__name__, header_name)


class LeaseStatus(_LeaseEnum):
    """Lease status of a container or blob."""
    UNSPECIFIED = "unspecified"
    LOCKED = "locked"
    UNLOCKED = "unlocked"


class LeaseState(_LeaseEnum):
    """Lease state of a container or blob."""
    UNSPECIFIED = "unspecified"
    AVAILABLE = "available"
    LEASED = "leased"
    EXPIRED = "expired"
    BREAKING = "breaking"
    BROKEN = "broken"


class LeaseDuration(_LeaseEnum):
    """Whether a held lease is infinite or of fixed length."""
    UNSPECIFIED = "unspecified"
    INFINITE = "infinite"
    FIXED = "fixed"
