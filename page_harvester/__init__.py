# page_harvester/__init__.py
"""
PageHarvester package initializer.
Defines package version and exposes CLI.
"""
__version__ = "0.1.0"

# Expose CLI entry point
from page_harvester.cli import cli as main_cli  # noqa: E402
