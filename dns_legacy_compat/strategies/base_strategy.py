"""
Base compatibility strategy interface.

This module defines the abstract base class that all legacy annotation
strategies must implement.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from ..core.models import Endpoint, IngressPoint, RecordType, ServiceResource


class CompatibilityStrategy(ABC):
    """Abstract base class for legacy annotation strategies."""

    @abstractmethod
    def extract(self, service: ServiceResource) -> Optional[List[Endpoint]]:
        """Get endpoints for a service, or None if the service does not apply."""
        pass

    @staticmethod
    def endpoints_for_hostname(
        dns_name: str, ingress: Iterable[IngressPoint]
    ) -> List[Endpoint]:
        """Create an endpoint for each configured external entrypoint."""
        endpoints = []
        for point in ingress:
            if point.address:
                endpoints.append(Endpoint(dns_name, RecordType.A, point.address))
            if point.hostname:
                endpoints.append(
                    Endpoint(dns_name, RecordType.CNAME, point.hostname)
                )
        return endpoints
