from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from graphar_schema.cli.utils import load_graph

console = Console()


def inspect_command(
    graph: Path = typer.Argument(..., exists=True, readable=True),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Show the vertex and edge schemas of a graph.
    """
    graph_info = load_graph(graph, verbose=verbose)

    console.print(
        f"[bold]{graph_info.name}[/bold] "
        f"(version {graph_info.version}, prefix {graph_info.prefix})"
    )

    vertices = Table(title="Vertices")
    vertices.add_column("Label", style="bold")
    vertices.add_column("Chunk size", justify="right")
    vertices.add_column("Prefix")
    vertices.add_column("Property groups")

    for vertex_info in graph_info.vertex_infos:
        groups = "; ".join(
            f"{g.file_type.value}: {', '.join(g.property_names)}"
            for g in vertex_info.property_groups
        )
        vertices.add_row(
            vertex_info.label,
            str(vertex_info.chunk_size),
            vertex_info.prefix,
            groups or "-",
        )

    edges = Table(title="Edges")
    edges.add_column("Edge", style="bold")
    edges.add_column("Chunk sizes (edge/src/dst)", justify="right")
    edges.add_column("Directed")
    edges.add_column("Adjacency lists")

    for edge_info in graph_info.edge_infos:
        adj_lists = "; ".join(
            f"{a.adj_list_type.value} ({a.file_type.value}, {len(a.property_groups)} groups)"
            for a in edge_info.adj_lists
        )
        edges.add_row(
            "_".join(edge_info.key),
            f"{edge_info.chunk_size}/{edge_info.src_chunk_size}/{edge_info.dst_chunk_size}",
            "yes" if edge_info.directed else "no",
            adj_lists or "-",
        )

    console.print(vertices)
    console.print(edges)
