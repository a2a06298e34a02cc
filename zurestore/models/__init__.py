"""
zurestore Models

Lease enumerations and the service properties/stats documents.
"""

from .lease import LeaseDuration, LeaseState, LeaseStatus
from .service_properties import (
    CorsRule,
    LoggingProperties,
    MetricsProperties,
    RetentionPolicy,
    ServiceProperties,
)
from .service_stats import GeoReplicationStats, GeoReplicationStatus, ServiceStats

__all__ = [
    "CorsRule",
    "GeoReplicationStats",
    "GeoReplicationStatus",
    "LeaseDuration",
    "LeaseState",
    "LeaseStatus",
    "LoggingProperties",
    "MetricsProperties",
    "RetentionPolicy",
    "ServiceProperties",
    "ServiceStats",
]
