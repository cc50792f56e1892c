"""Command-line interface for galvopath.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Test pattern preview with per-stage point counts
- Optional per-sample table
- Quiet output mode
"""

from galvopath.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
