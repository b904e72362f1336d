#!/usr/bin/env python3
"""
DNS Legacy Compat - Command Line Interface

Main entry point for extracting legacy endpoints from Service manifests.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict

import yaml

from ..core.endpoint_manager import EndpointManager
from ..parsers.manifest import ManifestParser

logger = logging.getLogger(__name__)


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="DNS Legacy Compat - Endpoints from legacy Service annotations"
    )

    parser.add_argument(
        "--config",
        "-c",
        default="configs/config.yaml",
        help="Configuration file path (default: configs/config.yaml)",
    )

    parser.add_argument(
        "--manifest",
        "-f",
        required=True,
        action="append",
        help="YAML file containing Service manifests (repeatable)",
    )

    parser.add_argument(
        "--compatibility",
        "-m",
        help="Legacy annotation convention: mate or molecule (overrides config)",
    )

    parser.add_argument(
        "--output-file",
        "-o",
        help="File to save extracted endpoints as YAML",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )

    args = parser.parse_args(argv)

    for manifest in args.manifest:
        if not Path(manifest).exists():
            print(f"Error: Manifest file '{manifest}' not found")
            sys.exit(1)

    config = load_config(args.config)
    if args.compatibility is not None:
        config["compatibility"] = args.compatibility
    if args.verbose:
        config["logging"] = dict(config.get("logging") or {}, level="DEBUG")
    config_logger(config)

    try:
        services = []
        for manifest in args.manifest:
            services.extend(ManifestParser(manifest).parse())

        endpoint_manager = EndpointManager(config)
        success = endpoint_manager.process_services(
            services, output_file=args.output_file
        )

        if success:
            print("Legacy endpoint extraction completed successfully")
            sys.exit(0)
        else:
            print("Legacy endpoint extraction failed")
            sys.exit(1)

    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        sys.exit(1)


def load_config(config_path: str) -> Dict:
    """Load configuration from YAML file."""
    try:
        with open(config_path, "r") as f:
            config = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.warning(f"Config file {config_path} not found, using defaults")
        return get_default_config()
    except yaml.YAMLError as e:
        print(f"Error parsing config file: {e}")
        sys.exit(1)

    if not isinstance(config, dict):
        print(f"Error: Config file {config_path} must contain a mapping")
        sys.exit(1)
    if not isinstance(config.get("logging") or {}, dict):
        print(f"Error: 'logging' in {config_path} must be a mapping")
        sys.exit(1)

    logger.info(f"Configuration loaded from {config_path}")
    return config


def get_default_config() -> Dict:
    """Return default configuration."""
    return {
        "compatibility": "",
        "logging": {"level": "INFO"},
    }


def config_logger(config: Dict):
    """Configure logging."""
    logging_config = config.get("logging", None)
    if logging_config:
        log_level = logging_config.get("level", "INFO")
        log_file = logging_config.get("file")

        handlers = [logging.StreamHandler(sys.stdout)]
        if log_file:
            handlers.insert(0, logging.FileHandler(log_file))

        logging.basicConfig(
            level=log_level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            handlers=handlers,
        )
        return

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


if __name__ == "__main__":
    main()
