"""
zurestore Blob Storage

Container attributes and the parsing of container responses.
"""

from .container_attributes import BlobContainerAttributes, BlobContainerProperties
from .container_response import get_container_attributes, get_container_properties

__all__ = [
    "BlobContainerAttributes",
    "BlobContainerProperties",
    "get_container_attributes",
    "get_container_properties",
]
