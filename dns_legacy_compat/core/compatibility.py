"""
Compatibility - Endpoints from legacy-annotated Services

This module routes a Service to the strategy of the configured legacy
annotation convention. Unknown conventions contribute no endpoints.
"""

import logging
from typing import Dict, List, Union

from .models import CompatibilityMode, Endpoint, ServiceResource
from ..strategies.base_strategy import CompatibilityStrategy
from ..strategies.mate import MateStrategy
from ..strategies.molecule import MoleculeStrategy

logger = logging.getLogger(__name__)


class CompatibilityDispatcher:
    """Selects the legacy annotation strategy for a compatibility mode."""

    def __init__(self):
        self.strategies: Dict[CompatibilityMode, CompatibilityStrategy] = {
            CompatibilityMode.MATE: MateStrategy(),
            CompatibilityMode.MOLECULE: MoleculeStrategy(),
        }

    def extract(
        self, service: ServiceResource, mode: Union[str, CompatibilityMode]
    ) -> List[Endpoint]:
        """
        Get endpoints from a Service annotated with legacy annotations.

        Args:
            service: Service snapshot to inspect
            mode: Compatibility mode, e.g. "mate" or "molecule"

        Returns:
            Endpoints in ingress order; empty when nothing applies
        """
        compatibility = CompatibilityMode.parse(mode)
        if compatibility is None:
            logger.debug(f"Unknown compatibility mode '{mode}', skipping {service.key}")
            return []

        endpoints = self.strategies[compatibility].extract(service)
        if endpoints is None:
            return []
        return endpoints


_dispatcher = CompatibilityDispatcher()


def legacy_endpoints_from_service(
    service: ServiceResource, mode: Union[str, CompatibilityMode]
) -> List[Endpoint]:
    """Get endpoints from a Service using the shared dispatcher."""
    return _dispatcher.extract(service, mode)
