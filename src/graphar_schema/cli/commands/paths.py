from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from graphar_schema.cli.utils import exit_on_error, load_graph, parse_adj_list_type

console = Console()


def paths_command(
    graph: Path = typer.Argument(..., exists=True, readable=True),
    vertex: Optional[str] = typer.Option(
        None,
        "--vertex",
        help="Vertex label whose chunk paths to print",
    ),
    edge: Optional[str] = typer.Option(
        None,
        "--edge",
        help="Edge triple as SRC,EDGE,DST",
    ),
    adj_list: str = typer.Option(
        "unordered_by_source",
        "--adj-list",
        help="Adjacency list type for --edge",
    ),
    part: int = typer.Option(0, "--part", min=0, help="Edge partition index"),
    chunk: int = typer.Option(0, "--chunk", min=0, help="Chunk index"),
):
    """
    Print the chunk file paths derived from a vertex or edge schema.
    """
    if (vertex is None) == (edge is None):
        raise typer.BadParameter("pass exactly one of --vertex or --edge")

    graph_info = load_graph(graph)

    if vertex is not None:
        vertex_info = exit_on_error(graph_info.get_vertex_info(vertex), "Vertex lookup")
        for group in vertex_info.property_groups:
            path = exit_on_error(vertex_info.get_file_path(group, chunk), "Path derivation")
            typer.echo(path)
        return

    labels = [part_.strip() for part_ in edge.split(",")]  # type: ignore[union-attr]
    if len(labels) != 3:
        raise typer.BadParameter("--edge expects SRC,EDGE,DST")
    adj_list_type = parse_adj_list_type(adj_list)

    edge_info = exit_on_error(graph_info.get_edge_info(*labels), "Edge lookup")
    typer.echo(
        exit_on_error(
            edge_info.get_adj_list_file_path(part, chunk, adj_list_type), "Path derivation"
        )
    )
    typer.echo(
        exit_on_error(
            edge_info.get_adj_list_offset_file_path(chunk, adj_list_type), "Path derivation"
        )
    )
    groups = exit_on_error(edge_info.get_property_groups(adj_list_type), "Group lookup")
    for group in groups:
        typer.echo(
            exit_on_error(
                edge_info.get_property_file_path(group, adj_list_type, part, chunk),
                "Path derivation",
            )
        )
