"""
Core compatibility functionality.

This package contains the Service and endpoint models, the dispatcher that
selects a legacy annotation strategy, and the endpoint manager.
"""

from .models import CompatibilityMode, Endpoint, IngressPoint, RecordType, ServiceResource
from .compatibility import CompatibilityDispatcher, legacy_endpoints_from_service
from .endpoint_manager import EndpointManager

__all__ = [
    "CompatibilityDispatcher",
    "CompatibilityMode",
    "Endpoint",
    "EndpointManager",
    "IngressPoint",
    "RecordType",
    "ServiceResource",
    "legacy_endpoints_from_service",
]
