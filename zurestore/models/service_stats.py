"""
Service Stats Models

Geo-replication statistics of a storage account, read from the
StorageServiceStats XML document served by the secondary location.

Author: Ayodele Oladeji
Date: 2025
"""

import logging
from datetime import datetime
from enum import Enum
from typing import IO, Optional, Union
import xml.etree.ElementTree as ET

from pydantic import BaseModel, Field

from ..constants import (
    GEO_REPLICATION_ELEMENT,
    LAST_SYNC_TIME_ELEMENT,
    STATUS_ELEMENT,
    STORAGE_SERVICE_STATS_ELEMENT,
)
from ..core.timestamps import parse_rfc1123
from ..exceptions import InvalidXmlDocumentError
from .xml_utils import expect_root, find_child, get_text

logger = logging.getLogger(__name__)


class GeoReplicationStatus(str, Enum):
    """Status of replication to the secondary location."""
    LIVE = "live"
    BOOTSTRAP = "bootstrap"
    UNAVAILABLE = "unavailable"

    @classmethod
    def parse(cls, value: str) -> "GeoReplicationStatus":
        """Parse the Status element text (case-insensitive)."""
        try:
            return cls(value.strip().lower())
        except ValueError as e:
            raise InvalidXmlDocumentError(
                f"Unknown geo-replication status '{value}'", element=STATUS_ELEMENT
            ) from e


class GeoReplicationStats(BaseModel):
    """Replication status and the time up to which secondary data is consistent."""

    status: GeoReplicationStatus
    last_sync_time: Optional[datetime] = Field(
        default=None, description="Writes before this time are readable from the secondary"
    )

    @classmethod
    def from_element(cls, elem: ET.Element) -> "GeoReplicationStats":
        status = get_text(elem, STATUS_ELEMENT)
        if not status:
            raise InvalidXmlDocumentError(
                f"'{GEO_REPLICATION_ELEMENT}' is missing '{STATUS_ELEMENT}'", element=GEO_REPLICATION_ELEMENT
            )
        last_sync = get_text(elem, LAST_SYNC_TIME_ELEMENT)
        return cls(
            status=GeoReplicationStatus.parse(status),
            last_sync_time=parse_rfc1123(last_sync) if last_sync else None,
        )


class ServiceStats(BaseModel):
    """Statistics for a storage service."""

    geo_replication: Optional[GeoReplicationStats] = Field(default=None)

    @classmethod
    def from_element(cls, root: ET.Element) -> "ServiceStats":
        """
        Build service stats from a parsed StorageServiceStats element.

        Raises:
            InvalidXmlDocumentError: If the document has an unexpected structure
            TimestampParseError: If LastSyncTime is not an RFC 1123 date
        """
        expect_root(root, STORAGE_SERVICE_STATS_ELEMENT)

        geo_elem = find_child(root, GEO_REPLICATION_ELEMENT)
        if geo_elem is None:
            return cls()
        return cls(geo_replication=GeoReplicationStats.from_element(geo_elem))

    @classmethod
    def read_from_stream(cls, stream: IO) -> "ServiceStats":
        """
        Deserialize service stats from an XML stream.

        Raises:
            xml.etree.ElementTree.ParseError: If the XML is malformed
            InvalidXmlDocumentError: If the document has an unexpected structure
            TimestampParseError: If LastSyncTime is not an RFC 1123 date
        """
        stats = cls.from_element(ET.parse(stream).getroot())
        if stats.geo_replication is not None:
            logger.debug(
                f"Read service stats: status={stats.geo_replication.status.value}, "
                f"last_sync_time={stats.geo_replication.last_sync_time}"
            )
        else:
            logger.debug("Read service stats without geo-replication section")
        return stats

    @classmethod
    def from_xml(cls, xml_content: Union[str, bytes]) -> "ServiceStats":
        """Deserialize service stats from an XML string."""
        return cls.from_element(ET.fromstring(xml_content))
