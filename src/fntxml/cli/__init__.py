"""Command-line interface for fntxml.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Files, directories and glob patterns as inputs
- Per-file success/skip/failure reporting
- Verbose/quiet output modes
- Non-zero exit status when any file fails
"""

from fntxml.cli.app import cli, main

__all__ = ["cli", "main"]
