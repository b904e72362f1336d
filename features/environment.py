"""
Behave environment configuration for DNS Legacy Compat integration tests.
"""

import logging
import shutil
import tempfile
from pathlib import Path

import yaml

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def before_all(context):
    """Set up test environment before all tests."""
    context.base_dir = Path(__file__).parent.parent
    context.example_manifest = context.base_dir / "examples" / "services.yaml"

    logger.info("Test environment setup complete")


def before_scenario(context, scenario):
    """Set up each test scenario."""
    context.scenario_name = scenario.name
    context.test_data_dir = Path(tempfile.mkdtemp(prefix="dns_legacy_compat_"))
    context.manifest_files = []
    context.services = []
    context.results = []
    context.exit_code = None

    context.test_config = {"compatibility": "", "logging": {"level": "DEBUG"}}
    context.test_config_file = context.test_data_dir / "config.yaml"
    with open(context.test_config_file, "w") as f:
        yaml.dump(context.test_config, f)

    logger.info(f"Starting scenario: {scenario.name}")


def after_scenario(context, scenario):
    """Clean up after each test scenario."""
    shutil.rmtree(context.test_data_dir, ignore_errors=True)
    logger.info(f"Completed scenario: {scenario.name}")


def after_all(context):
    """Clean up test environment after all tests."""
    logger.info("Test environment cleanup complete")
