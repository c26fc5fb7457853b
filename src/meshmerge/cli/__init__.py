"""
CLI package for meshmerge.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from meshmerge.cli.app import app, main

__all__ = [
    "app",
    "main",
]
