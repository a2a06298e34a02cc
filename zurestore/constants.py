"""
Storage Constants

Wire-level header names and XML element names shared by the response parsers.

Author: Ayodele Oladeji
Date: 2025
"""

# Response header names
HEADER_CONTENT_MD5 = "Content-MD5"
HEADER_DATE = "Date"
HEADER_MS_DATE = "x-ms-date"
HEADER_ETAG = "ETag"
HEADER_LAST_MODIFIED = "Last-Modified"
HEADER_REQUEST_ID = "x-ms-request-id"
HEADER_LEASE_STATUS = "x-ms-lease-status"
HEADER_LEASE_STATE = "x-ms-lease-state"
HEADER_LEASE_DURATION = "x-ms-lease-duration"
HEADER_LEASE_ID = "x-ms-lease-id"
HEADER_LEASE_TIME = "x-ms-lease-time"

# User metadata travels as x-ms-meta-<name> headers
PREFIX_FOR_STORAGE_METADATA = "x-ms-meta-"

# Service properties XML
XML_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>'
STORAGE_SERVICE_PROPERTIES_ELEMENT = "StorageServiceProperties"
LOGGING_ELEMENT = "Logging"
HOUR_METRICS_ELEMENT = "HourMetrics"
MINUTE_METRICS_ELEMENT = "MinuteMetrics"
CORS_ELEMENT = "Cors"
CORS_RULE_ELEMENT = "CorsRule"
DEFAULT_SERVICE_VERSION_ELEMENT = "DefaultServiceVersion"

# Service stats XML
STORAGE_SERVICE_STATS_ELEMENT = "StorageServiceStats"
GEO_REPLICATION_ELEMENT = "GeoReplication"
STATUS_ELEMENT = "Status"
LAST_SYNC_TIME_ELEMENT = "LastSyncTime"

# Default endpoint layout
DEFAULT_ENDPOINT_SUFFIX = "core.windows.net"
SECONDARY_ACCOUNT_SUFFIX = "-secondary"
