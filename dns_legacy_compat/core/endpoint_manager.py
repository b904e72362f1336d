"""
Endpoint Manager - Legacy endpoint collection for Service manifests

This module runs the compatibility layer over a set of Service snapshots,
summarizes the resulting endpoints and optionally writes them out for the
reconciliation loop to consume.
"""

import logging
from datetime import datetime
from typing import Dict, List, Optional, Tuple

import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .compatibility import CompatibilityDispatcher
from .models import CompatibilityMode, Endpoint, ServiceResource

console = Console()
logger = logging.getLogger(__name__)


class EndpointManager:
    """Collects legacy endpoints from Services for one compatibility mode."""

    def __init__(self, config: Dict):
        """Initialize the endpoint manager with configuration."""
        self.config = config or {}
        self.compatibility = self.config.get("compatibility") or ""
        self.dispatcher = CompatibilityDispatcher()

        if self.compatibility and CompatibilityMode.parse(self.compatibility) is None:
            logger.warning(
                f"Unknown compatibility mode '{self.compatibility}', "
                "no legacy endpoints will be produced"
            )

    def extract_endpoints(
        self, services: List[ServiceResource]
    ) -> List[Tuple[ServiceResource, Endpoint]]:
        """Get endpoints for each service, in service order."""
        results = []

        for service in services:
            endpoints = self.dispatcher.extract(service, self.compatibility)
            if not endpoints:
                continue

            logger.info(f"{service.key}: {len(endpoints)} legacy endpoints")
            for endpoint in endpoints:
                if not endpoint.dns_name:
                    logger.warning(
                        f"{service.key}: endpoint with empty DNS name -> {endpoint.target}"
                    )
                results.append((service, endpoint))

        logger.info(
            f"Extracted {len(results)} endpoints from {len(services)} services "
            f"(compatibility: {self.compatibility or 'none'})"
        )
        return results

    def process_services(
        self, services: List[ServiceResource], output_file: Optional[str] = None
    ) -> bool:
        """Extract, display and optionally save legacy endpoints."""
        results = self.extract_endpoints(services)
        self._display_endpoints(results)

        if output_file:
            if not self._save_output(results, output_file):
                return False
            console.print(f"[green]Endpoints saved to: {escape(str(output_file))}[/green]")

        return True

    def _display_endpoints(self, results: List[Tuple[ServiceResource, Endpoint]]):
        """Display a summary of extracted endpoints."""
        if not results:
            console.print("[yellow]No legacy endpoints found[/yellow]")
            return

        table = Table(title="Legacy Endpoints")
        table.add_column("Service", style="cyan")
        table.add_column("DNS Name", style="magenta")
        table.add_column("Type", style="white")
        table.add_column("Target", style="white")

        for service, endpoint in results:
            table.add_row(
                escape(service.key),
                escape(endpoint.dns_name),
                endpoint.record_type.value,
                escape(endpoint.target),
            )

        console.print(table)
        console.print(f"\n[bold]Total endpoints: {len(results)}[/bold]")

    def _save_output(
        self, results: List[Tuple[ServiceResource, Endpoint]], output_file: str
    ) -> bool:
        """Save endpoints to a YAML file."""
        document = {
            "compatibility": self.compatibility,
            "generated": datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
            "endpoints": [
                {"service": service.key, **endpoint.to_dict()}
                for service, endpoint in results
            ],
        }

        try:
            with open(output_file, "w") as f:
                yaml.safe_dump(document, f, sort_keys=False)
            logger.info(f"Endpoints saved to: {output_file}")
            return True
        except OSError as e:
            logger.error(f"Failed to save endpoints to {output_file}: {e}")
            console.print(
                f"[red]Error: Failed to save endpoints to {escape(str(output_file))}: {escape(str(e))}[/red]"
            )
            return False
