"""Command-line interface for gridoutline.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Render text/JSON grid files to cropped SVG documents
- Raw path data and bounds output for scripting
- Bitmap export size calculation
- Verbose/quiet output modes
"""

from gridoutline.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
