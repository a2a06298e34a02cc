"""
Service Properties Models

Analytics logging, metrics, CORS and default version settings of a storage
account service, read from and written to the StorageServiceProperties XML
document.

Author: Ayodele Oladeji
Date: 2025
"""

import logging
from typing import IO, List, Optional, Union
import xml.etree.ElementTree as ET

from pydantic import BaseModel, Field

from ..constants import (
    CORS_ELEMENT,
    CORS_RULE_ELEMENT,
    DEFAULT_SERVICE_VERSION_ELEMENT,
    HOUR_METRICS_ELEMENT,
    LOGGING_ELEMENT,
    MINUTE_METRICS_ELEMENT,
    STORAGE_SERVICE_PROPERTIES_ELEMENT,
    XML_DECLARATION,
)
from .xml_utils import (
    expect_root,
    find_child,
    find_children,
    get_text,
    parse_bool,
    parse_csv,
    parse_int,
)

logger = logging.getLogger(__name__)


class RetentionPolicy(BaseModel):
    """How long analytics data is kept. Days is only meaningful when enabled."""

    enabled: bool = Field(default=False)
    days: Optional[int] = Field(default=None)

    @classmethod
    def from_element(cls, elem: ET.Element) -> "RetentionPolicy":
        enabled = parse_bool(get_text(elem, "Enabled"), "Enabled")
        days = parse_int(get_text(elem, "Days"), "Days") if enabled else None
        return cls(enabled=enabled, days=days)

    def to_element(self) -> ET.Element:
        elem = ET.Element("RetentionPolicy")
        ET.SubElement(elem, "Enabled").text = str(self.enabled).lower()
        if self.enabled and self.days is not None:
            ET.SubElement(elem, "Days").text = str(self.days)
        return elem


class LoggingProperties(BaseModel):
    """Storage analytics logging settings."""

    version: str = Field(default="1.0")
    delete: bool = Field(default=False)
    read: bool = Field(default=False)
    write: bool = Field(default=False)
    retention_policy: RetentionPolicy = Field(default_factory=RetentionPolicy)

    @classmethod
    def from_element(cls, elem: ET.Element) -> "LoggingProperties":
        retention = find_child(elem, "RetentionPolicy")
        return cls(
            version=get_text(elem, "Version", "1.0"),
            delete=parse_bool(get_text(elem, "Delete"), "Delete"),
            read=parse_bool(get_text(elem, "Read"), "Read"),
            write=parse_bool(get_text(elem, "Write"), "Write"),
            retention_policy=RetentionPolicy.from_element(retention) if retention is not None else RetentionPolicy(),
        )

    def to_element(self) -> ET.Element:
        elem = ET.Element(LOGGING_ELEMENT)
        ET.SubElement(elem, "Version").text = self.version
        ET.SubElement(elem, "Delete").text = str(self.delete).lower()
        ET.SubElement(elem, "Read").text = str(self.read).lower()
        ET.SubElement(elem, "Write").text = str(self.write).lower()
        elem.append(self.retention_policy.to_element())
        return elem


class MetricsProperties(BaseModel):
    """Hour or minute metrics settings. include_apis is only sent when enabled."""

    version: str = Field(default="1.0")
    enabled: bool = Field(default=False)
    include_apis: Optional[bool] = Field(default=None)
    retention_policy: RetentionPolicy = Field(default_factory=RetentionPolicy)

    @classmethod
    def from_element(cls, elem: ET.Element) -> "MetricsProperties":
        enabled = parse_bool(get_text(elem, "Enabled"), "Enabled")
        include_apis = None
        if enabled:
            include_apis = parse_bool(get_text(elem, "IncludeAPIs"), "IncludeAPIs")
        retention = find_child(elem, "RetentionPolicy")
        return cls(
            version=get_text(elem, "Version", "1.0"),
            enabled=enabled,
            include_apis=include_apis,
            retention_policy=RetentionPolicy.from_element(retention) if retention is not None else RetentionPolicy(),
        )

    def to_element(self, tag_name: str) -> ET.Element:
        elem = ET.Element(tag_name)
        ET.SubElement(elem, "Version").text = self.version
        ET.SubElement(elem, "Enabled").text = str(self.enabled).lower()
        if self.enabled:
            ET.SubElement(elem, "IncludeAPIs").text = str(bool(self.include_apis)).lower()
        elem.append(self.retention_policy.to_element())
        return elem


class CorsRule(BaseModel):
    """One cross-origin resource sharing rule."""

    allowed_origins: List[str] = Field(default_factory=list)
    allowed_methods: List[str] = Field(default_factory=list)
    max_age_in_seconds: int = Field(default=0)
    exposed_headers: List[str] = Field(default_factory=list)
    allowed_headers: List[str] = Field(default_factory=list)

    @classmethod
    def from_element(cls, elem: ET.Element) -> "CorsRule":
        return cls(
            allowed_origins=parse_csv(get_text(elem, "AllowedOrigins")),
            allowed_methods=parse_csv(get_text(elem, "AllowedMethods")),
            max_age_in_seconds=parse_int(get_text(elem, "MaxAgeInSeconds"), "MaxAgeInSeconds") or 0,
            exposed_headers=parse_csv(get_text(elem, "ExposedHeaders")),
            allowed_headers=parse_csv(get_text(elem, "AllowedHeaders")),
        )

    def to_element(self) -> ET.Element:
        elem = ET.Element(CORS_RULE_ELEMENT)
        ET.SubElement(elem, "AllowedOrigins").text = ",".join(self.allowed_origins)
        ET.SubElement(elem, "AllowedMethods").text = ",".join(self.allowed_methods)
        ET.SubElement(elem, "MaxAgeInSeconds").text = str(self.max_age_in_seconds)
        ET.SubElement(elem, "ExposedHeaders").text = ",".join(self.exposed_headers)
        ET.SubElement(elem, "AllowedHeaders").text = ",".join(self.allowed_headers)
        return elem


class ServiceProperties(BaseModel):
    """
    Account-level service configuration.

    A section left as None was absent from the document and is left
    unchanged by the service when these properties are uploaded.
    An empty ``cors`` list clears all CORS rules.
    """

    logging: Optional[LoggingProperties] = Field(default=None)
    hour_metrics: Optional[MetricsProperties] = Field(default=None)
    minute_metrics: Optional[MetricsProperties] = Field(default=None)
    cors: Optional[List[CorsRule]] = Field(default=None)
    default_service_version: Optional[str] = Field(default=None)

    @classmethod
    def from_element(cls, root: ET.Element) -> "ServiceProperties":
        """
        Build service properties from a parsed StorageServiceProperties element.

        Raises:
            InvalidXmlDocumentError: If the document has an unexpected structure
        """
        expect_root(root, STORAGE_SERVICE_PROPERTIES_ELEMENT)

        props = {}

        logging_elem = find_child(root, LOGGING_ELEMENT)
        if logging_elem is not None:
            props["logging"] = LoggingProperties.from_element(logging_elem)

        hour_elem = find_child(root, HOUR_METRICS_ELEMENT)
        if hour_elem is not None:
            props["hour_metrics"] = MetricsProperties.from_element(hour_elem)

        minute_elem = find_child(root, MINUTE_METRICS_ELEMENT)
        if minute_elem is not None:
            props["minute_metrics"] = MetricsProperties.from_element(minute_elem)

        cors_elem = find_child(root, CORS_ELEMENT)
        if cors_elem is not None:
            props["cors"] = [CorsRule.from_element(rule) for rule in find_children(cors_elem, CORS_RULE_ELEMENT)]

        version = get_text(root, DEFAULT_SERVICE_VERSION_ELEMENT)
        if version:
            props["default_service_version"] = version

        return cls(**props)

    @classmethod
    def read_from_stream(cls, stream: IO) -> "ServiceProperties":
        """
        Deserialize service properties from an XML stream.

        Args:
            stream: Readable binary or text stream holding the XML document

        Returns:
            ServiceProperties instance

        Raises:
            xml.etree.ElementTree.ParseError: If the XML is malformed
            InvalidXmlDocumentError: If the document has an unexpected structure
        """
        root = ET.parse(stream).getroot()
        properties = cls.from_element(root)
        logger.debug(
            f"Read service properties: logging={properties.logging is not None}, "
            f"hour_metrics={properties.hour_metrics is not None}, "
            f"minute_metrics={properties.minute_metrics is not None}, "
            f"cors_rules={len(properties.cors) if properties.cors is not None else None}"
        )
        return properties

    @classmethod
    def from_xml(cls, xml_content: Union[str, bytes]) -> "ServiceProperties":
        """Deserialize service properties from an XML string."""
        return cls.from_element(ET.fromstring(xml_content))

    def to_xml(self) -> str:
        """Serialize to a StorageServiceProperties request body."""
        root = ET.Element(STORAGE_SERVICE_PROPERTIES_ELEMENT)
        if self.logging is not None:
            root.append(self.logging.to_element())
        if self.hour_metrics is not None:
            root.append(self.hour_metrics.to_element(HOUR_METRICS_ELEMENT))
        if self.minute_metrics is not None:
            root.append(self.minute_metrics.to_element(MINUTE_METRICS_ELEMENT))
        if self.cors is not None:
            cors = ET.SubElement(root, CORS_ELEMENT)
            for rule in self.cors:
                cors.append(rule.to_element())
        if self.default_service_version:
            ET.SubElement(root, DEFAULT_SERVICE_VERSION_ELEMENT).text = self.default_service_version
        return XML_DECLARATION + ET.tostring(root, encoding="unicode")
