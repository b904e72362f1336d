"""
Molecule strategy implementation.

Services opt in with the label `dns: route53` and list their hostnames,
comma-separated, in the `domainName` annotation.
"""

import logging
from typing import List, Optional

from .base_strategy import CompatibilityStrategy
from ..core.models import (
    MOLECULE_ANNOTATION_KEY,
    MOLECULE_LABEL_KEY,
    MOLECULE_LABEL_VALUE,
    Endpoint,
    ServiceResource,
)

logger = logging.getLogger(__name__)


def parse_hostnames(annotation: str) -> List[str]:
    """
    Split a `domainName` annotation into hostnames.

    Spaces are removed before splitting on commas. Empty segments, such as
    the one left by a trailing comma, are kept.

    Args:
        annotation: Raw annotation value

    Returns:
        Hostnames in annotation order
    """
    return annotation.replace(" ", "").split(",")


class MoleculeStrategy(CompatibilityStrategy):
    """Endpoints from Services annotated with Molecule Software's semantics."""

    def extract(self, service: ServiceResource) -> Optional[List[Endpoint]]:
        if service.labels.get(MOLECULE_LABEL_KEY) != MOLECULE_LABEL_VALUE:
            return None

        annotation = service.annotations.get(MOLECULE_ANNOTATION_KEY)
        if annotation is None:
            return None

        endpoints = []
        for hostname in parse_hostnames(annotation):
            endpoints.extend(self.endpoints_for_hostname(hostname, service.ingress))

        logger.debug(f"Molecule: {len(endpoints)} endpoints from {service.key}")
        return endpoints
