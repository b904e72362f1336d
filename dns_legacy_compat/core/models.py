"""
Models - Service snapshots and endpoint declarations

This module defines the read-only view of a Kubernetes Service that the
compatibility strategies consume, and the endpoint records they produce.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Mapping, Optional, Tuple

MATE_ANNOTATION_KEY = "zalando.org/dnsname"
MOLECULE_ANNOTATION_KEY = "domainName"
MOLECULE_LABEL_KEY = "dns"
MOLECULE_LABEL_VALUE = "route53"


class RecordType(str, Enum):
    """DNS record types a legacy annotation can produce."""

    A = "A"
    CNAME = "CNAME"


class CompatibilityMode(str, Enum):
    """Recognized legacy annotation conventions."""

    MATE = "mate"
    MOLECULE = "molecule"

    @classmethod
    def parse(cls, value) -> Optional["CompatibilityMode"]:
        """Return the matching mode, or None for anything unrecognized."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


@dataclass(frozen=True)
class Endpoint:
    """A desired DNS record declaration."""

    dns_name: str
    record_type: RecordType
    target: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "dnsName": self.dns_name,
            "recordType": self.record_type.value,
            "target": self.target,
        }

    def __str__(self) -> str:
        return f"{self.dns_name} IN {self.record_type.value} {self.target}"


@dataclass(frozen=True)
class IngressPoint:
    """An externally reachable address or hostname of a load balancer."""

    address: str = ""
    hostname: str = ""


@dataclass(frozen=True)
class ServiceResource:
    """Read-only snapshot of a Service as seen by the compatibility layer."""

    name: str = ""
    namespace: str = ""
    annotations: Mapping[str, str] = field(default_factory=dict)
    labels: Mapping[str, str] = field(default_factory=dict)
    ingress: Tuple[IngressPoint, ...] = ()

    @property
    def key(self) -> str:
        if self.namespace:
            return f"{self.namespace}/{self.name}"
        return self.name

    @classmethod
    def from_manifest(cls, manifest: Dict) -> "ServiceResource":
        """
        Build a snapshot from a Kubernetes Service manifest.

        Args:
            manifest: Parsed Service manifest (metadata, spec, status)

        Returns:
            ServiceResource with annotations, labels and load balancer ingress

        Raises:
            ValueError: If a section that must be a mapping or list is not
        """
        metadata = _as_mapping(manifest.get("metadata"), "metadata")
        status = _as_mapping(manifest.get("status"), "status")
        load_balancer = _as_mapping(status.get("loadBalancer"), "status.loadBalancer")

        entries = load_balancer.get("ingress") or []
        if not isinstance(entries, list):
            raise ValueError("status.loadBalancer.ingress must be a list")

        ingress = tuple(
            IngressPoint(
                address=_as_str(entry.get("ip")),
                hostname=_as_str(entry.get("hostname")),
            )
            for entry in entries
            if isinstance(entry, dict)
        )

        return cls(
            name=_as_str(metadata.get("name")),
            namespace=_as_str(metadata.get("namespace")),
            annotations=_as_str_mapping(
                _as_mapping(metadata.get("annotations"), "metadata.annotations")
            ),
            labels=_as_str_mapping(
                _as_mapping(metadata.get("labels"), "metadata.labels")
            ),
            ingress=ingress,
        )


def _as_mapping(value, path: str) -> Dict:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"{path} must be a mapping, got {type(value).__name__}")
    return value


def _as_str(value) -> str:
    return "" if value is None else str(value)


def _as_str_mapping(values: Dict) -> Dict[str, str]:
    # Unquoted YAML scalars keep their Python str() form: 8080 -> "8080", true -> "True"
    return {str(k): _as_str(v) for k, v in values.items()}
