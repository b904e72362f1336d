import logging
from typing import Dict, List

import yaml

from ..core.models import ServiceResource

logger = logging.getLogger(__name__)

LIST_KINDS = ("List", "ServiceList")


class ManifestParser:
    def __init__(self, manifest_path: str):
        self.manifest_path = manifest_path

    def parse(self) -> List[ServiceResource]:
        """Parse a YAML manifest file into Service snapshots."""
        services = []

        try:
            with open(self.manifest_path, "r") as f:
                documents = list(yaml.safe_load_all(f))
        except FileNotFoundError:
            raise FileNotFoundError(f"Manifest file not found: {self.manifest_path}")
        except yaml.YAMLError as e:
            raise ValueError(f"Error parsing manifest {self.manifest_path}: {e}")

        for doc_num, document in enumerate(documents, start=1):
            if document is None:
                continue

            if not isinstance(document, dict):
                raise ValueError(
                    f"Document {doc_num} in {self.manifest_path} is not a mapping"
                )

            for manifest in self._expand(document):
                kind = manifest.get("kind")
                if kind != "Service":
                    logger.debug(
                        f"Skipping {kind or 'untyped'} object in document {doc_num}"
                    )
                    continue
                try:
                    services.append(ServiceResource.from_manifest(manifest))
                except ValueError as e:
                    raise ValueError(
                        f"Invalid Service in document {doc_num} of {self.manifest_path}: {e}"
                    )

        logger.info(
            f"Successfully parsed {len(services)} services from {self.manifest_path}"
        )
        return services

    def _expand(self, document: Dict) -> List[Dict]:
        """Flatten List documents into their items."""
        kind = document.get("kind")
        if kind not in LIST_KINDS:
            return [document]

        items = [item for item in document.get("items") or [] if isinstance(item, dict)]
        if kind == "ServiceList":
            # kubectl omits the item kind in typed lists
            return [{"kind": "Service", **item} for item in items]
        return items
