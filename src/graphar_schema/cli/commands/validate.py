from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from graphar_schema.cli.utils import load_graph

console = Console()


def validate_command(
    graph: Path = typer.Argument(..., exists=True, readable=True),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Validate a graph schema and its children. Exits 1 when invalid.
    """
    graph_info = load_graph(graph, verbose=verbose)

    table = Table(title=f"Validation: {graph_info.name}")
    table.add_column("Schema", style="bold")
    table.add_column("Status")

    for vertex_info in graph_info.vertex_infos:
        table.add_row(f"vertex {vertex_info.label}", _status(vertex_info.is_validated()))
    for edge_info in graph_info.edge_infos:
        table.add_row(f"edge {'_'.join(edge_info.key)}", _status(edge_info.is_validated()))

    console.print(table)

    missing = graph_info.missing_vertex_labels()
    if missing:
        console.print(f"[yellow]Unregistered vertex labels:[/yellow] {', '.join(missing)}")

    if not graph_info.is_validated():
        console.print("[red]Graph schema is not valid[/red]")
        raise typer.Exit(code=1)

    console.print("[green]Graph schema is valid[/green]")


def _status(ok: bool) -> str:
    return "[green]ok[/green]" if ok else "[red]invalid[/red]"
