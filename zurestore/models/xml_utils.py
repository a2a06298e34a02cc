"""Small ElementTree helpers shared by the service document readers."""

from typing import Optional
import xml.etree.ElementTree as ET

from ..exceptions import InvalidXmlDocumentError


def find_child(parent: ET.Element, tag_name: str) -> Optional[ET.Element]:
    """Find a direct child by tag, with or without a namespace."""
    elem = parent.find(tag_name)
    if elem is None:
        elem = parent.find(f"{{*}}{tag_name}")
    return elem


def find_children(parent: ET.Element, tag_name: str) -> list:
    """Find all direct children with the given tag, with or without a namespace."""
    return parent.findall(f"{{*}}{tag_name}")


def get_text(parent: ET.Element, tag_name: str, default: Optional[str] = None) -> Optional[str]:
    """Return the stripped text of a child element, or ``default`` when missing."""
    elem = find_child(parent, tag_name)
    if elem is None:
        return default
    return (elem.text or "").strip()


def local_name(elem: ET.Element) -> str:
    """Tag name without any ``{namespace}`` prefix."""
    return elem.tag.rsplit('}', 1)[-1]


def expect_root(root: ET.Element, tag_name: str) -> None:
    """Raise if the document root is not ``tag_name``."""
    if local_name(root) != tag_name:
        raise InvalidXmlDocumentError(
            f"Expected root element '{tag_name}' but found '{local_name(root)}'",
            element=local_name(root),
        )


def parse_bool(value: Optional[str], tag_name: str, default: bool = False) -> bool:
    """Parse an XML boolean ("true"/"false"); missing elements give ``default``."""
    if value is None:
        return default
    lowered = value.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    raise InvalidXmlDocumentError(f"Element '{tag_name}' must be 'true' or 'false', got '{value}'", element=tag_name)


def parse_int(value: Optional[str], tag_name: str) -> Optional[int]:
    """Parse an XML integer; missing or empty elements give None."""
    if not value:
        return None
    try:
        return int(value)
    except ValueError as e:
        raise InvalidXmlDocumentError(f"Element '{tag_name}' must be an integer, got '{value}'", element=tag_name) from e


def parse_csv(value: Optional[str]) -> list:
    """Split a comma separated element value, dropping blanks."""
    if not value:
        return []
    return [item.strip() for item in value.split(',') if item.strip()]
