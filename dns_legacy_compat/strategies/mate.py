"""
Mate strategy implementation.

Services opt in by carrying the `zalando.org/dnsname` annotation; its value
is published for every load balancer ingress of the service.
"""

import logging
from typing import List, Optional

from .base_strategy import CompatibilityStrategy
from ..core.models import MATE_ANNOTATION_KEY, Endpoint, ServiceResource

logger = logging.getLogger(__name__)


class MateStrategy(CompatibilityStrategy):
    """Endpoints from Services annotated with Mate's annotation semantics."""

    def extract(self, service: ServiceResource) -> Optional[List[Endpoint]]:
        hostname = service.annotations.get(MATE_ANNOTATION_KEY)
        if hostname is None:
            return None

        endpoints = self.endpoints_for_hostname(hostname, service.ingress)
        logger.debug(
            f"Mate: {len(endpoints)} endpoints for {hostname} from {service.key}"
        )
        return endpoints
