#!/usr/bin/env python3
"""
DNS Legacy Compat - Main Entry Point

This is the main entry point for the legacy endpoint extractor.
It can be run directly or imported as a module.
"""

from dns_legacy_compat.cli.main import main

if __name__ == "__main__":
    main()
