"""
CLI command modules for graphar_schema.

Each command module defines a single Typer-compatible command function.
"""

from graphar_schema.cli.commands.inspect import inspect_command
from graphar_schema.cli.commands.paths import paths_command
from graphar_schema.cli.commands.validate import validate_command

__all__ = [
    "inspect_command",
    "paths_command",
    "validate_command",
]
