"""
CLI module for sdkconf.

Provides the command-line interface using Click.
"""

from sdkconf.cli.main import cli, main, parse_assignment

__all__ = ["main", "cli", "parse_assignment"]
