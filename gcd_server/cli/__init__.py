"""CLI module for gcd-server.

Provides the ``gcd NUMBER ...`` command.
"""

from gcd_server.cli.main import create_parser, main

__all__ = ["create_parser", "main"]
