"""
Legacy annotation strategies.

This package contains one strategy per predecessor annotation convention.
"""

from .base_strategy import CompatibilityStrategy
from .mate import MateStrategy
from .molecule import MoleculeStrategy, parse_hostnames

__all__ = ["CompatibilityStrategy", "MateStrategy", "MoleculeStrategy", "parse_hostnames"]
