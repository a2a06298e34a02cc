"""
Unit tests for lease enumerations.

Author: Ayodele Oladeji
Date: 2025
"""

import pytest

from zurestore.exceptions import InvalidHeaderValueError, StorageClientError
from zurestore.models.lease import LeaseDuration, LeaseState, LeaseStatus


class TestLeaseStatus:
    """Test LeaseStatus parsing."""

    def test_values(self):
        """Test wire values."""
        assert LeaseStatus.LOCKED == "locked"
        assert LeaseStatus.UNLOCKED == "unlocked"

    @pytest.mark.parametrize("value", [None, ""])
    def test_parse_empty(self, value):
        """Test missing values parse to UNSPECIFIED."""
        assert LeaseStatus.parse(value) is LeaseStatus.UNSPECIFIED

    @pytest.mark.parametrize("value", [" ", "   ", "\t\n"])
    def test_parse_whitespace_only_rejected(self, value):
        """Test blank text is not empty and does not parse to UNSPECIFIED."""
        with pytest.raises(InvalidHeaderValueError) as exc_info:
            LeaseStatus.parse(value, "x-ms-lease-status")

        assert exc_info.value.value == value

    @pytest.mark.parametrize("value", ["locked", "LOCKED", " Locked "])
    def test_parse_is_case_insensitive(self, value):
        """Test case and surrounding whitespace are ignored."""
        assert LeaseStatus.parse(value) is LeaseStatus.LOCKED

    def test_unspecified_is_not_a_wire_value(self):
        """Test the literal 'unspecified' is rejected."""
        with pytest.raises(InvalidHeaderValueError):
            LeaseStatus.parse("unspecified")

    def test_parse_error_details(self):
        """Test the error names the enumeration and is a ValueError."""
        with pytest.raises(InvalidHeaderValueError) as exc_info:
            LeaseStatus.parse("frozen")

        error = exc_info.value
        assert error.type_name == "LeaseStatus"
        assert error.header_name is None
        assert isinstance(error, ValueError)
        assert isinstance(error, StorageClientError)
        assert "frozen" in str(error)


class TestLeaseState:
    """Test LeaseState parsing."""

    @pytest.mark.parametrize("value,expected", [
        ("available", LeaseState.AVAILABLE),
        ("leased", LeaseState.LEASED),
        ("expired", LeaseState.EXPIRED),
        ("breaking", LeaseState.BREAKING),
        ("broken", LeaseState.BROKEN),
    ])
    def test_parse_known(self, value, expected):
        """Test every state the service reports."""
        assert LeaseState.parse(value) is expected

    def test_parse_unknown(self):
        """Test unknown states are rejected."""
        with pytest.raises(InvalidHeaderValueError):
            LeaseState.parse("locked")


class TestLeaseDuration:
    """Test LeaseDuration parsing."""

    def test_parse_known(self):
        """Test infinite and fixed durations."""
        assert LeaseDuration.parse("infinite") is LeaseDuration.INFINITE
        assert LeaseDuration.parse("fixed") is LeaseDuration.FIXED

    def test_parse_seconds_rejected(self):
        """Test a numeric duration is not a lease duration header value."""
        with pytest.raises(InvalidHeaderValueError):
            LeaseDuration.parse("30")

    def test_parse_empty(self):
        """Test missing duration parses to UNSPECIFIED."""
        assert LeaseDuration.parse(None) is LeaseDuration.UNSPECIFIED

    def test_parse_whitespace_only_rejected(self):
        """Test a blank duration is rejected."""
        with pytest.raises(InvalidHeaderValueError):
            LeaseDuration.parse("  ")
