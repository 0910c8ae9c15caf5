"""Command-line interface for fourierdraw.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Path data from the command line or the first path of an SVG file
- HTML animation or JSON output
- Verbose/quiet output modes
- Detailed error reporting
"""

from fourierdraw.cli.app import cli, main

__all__ = ["cli", "main"]
