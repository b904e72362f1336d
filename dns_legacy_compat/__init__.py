"""
DNS Legacy Compat - Endpoints from legacy Service annotations

Derives DNS endpoint declarations from Services annotated with the
predecessor Mate and Molecule conventions, so they can be synchronized
alongside current-generation annotations.
"""

__version__ = "1.0.0"
__author__ = "DNS Legacy Compat Team"
__description__ = "Legacy DNS annotation compatibility for Kubernetes Services"

from .core.compatibility import CompatibilityDispatcher, legacy_endpoints_from_service
from .core.endpoint_manager import EndpointManager
from .core.models import (
    CompatibilityMode,
    Endpoint,
    IngressPoint,
    RecordType,
    ServiceResource,
)

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
