
"""
CLI package for noble_lineage.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from noble_lineage.cli.app import app, main

__all__ = [
    "app",
    "main",
]
