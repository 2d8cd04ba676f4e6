from __future__ import annotations

import typer

from graphar_schema.cli.commands.inspect import inspect_command
from graphar_schema.cli.commands.paths import paths_command
from graphar_schema.cli.commands.validate import validate_command

app = typer.Typer(
    name="graphar-schema",
    help="Graph archive schema inspector, validator, and path resolver",
    add_completion=False,
)

app.command("inspect")(inspect_command)
app.command("validate")(validate_command)
app.command("paths")(paths_command)


def main():
    app()


if __name__ == "__main__":
    main()
