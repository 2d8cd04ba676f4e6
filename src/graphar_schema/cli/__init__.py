"""
CLI package for graphar_schema.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from graphar_schema.cli.app import app, main

__all__ = [
    "app",
    "main",
]
