"""Command-line interface for geoanalyzer.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- One command per figure (line, triangle, quad, circle)
- Plain point plotting
- JSON output for scripting
- Interactive menu mode
"""

from geoanalyzer.cli.app import app, cli

__all__ = ["app", "cli"]
