"""Command-line interface for textstencil.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Catalog fonts by name or any TTF/OTF file
- Input clamping with warnings instead of failures
- SVG output to a file or stdout
- Unmapped character reporting
"""

from textstencil.cli.app import cli, main

__all__ = ["cli", "main"]
