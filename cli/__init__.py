"""
CLI module for adjgraph.

The command-line interface providing the demo and inspect commands.
"""

from cli.main import app

__all__ = ["app"]
