from __future__ import annotations

import time
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from graphar_schema.core.result import Result
from graphar_schema.info.graph_info import GraphInfo
from graphar_schema.types import AdjListType

console = Console()


def exit_on_error(result: Result, what: str):
    """
    Return the success value, or print the error and exit with status 1.
    """
    if not result.ok():
        console.print(f"[red]{escape(what)} failed:[/red] {escape(str(result.error))}")
        raise typer.Exit(code=1)
    return result.value


def load_graph(path: Path, *, verbose: bool = False) -> GraphInfo:
    """
    Load a graph document and every child schema it references.
    """
    t0 = time.perf_counter()

    graph_info = exit_on_error(GraphInfo.load(str(path)), f"Loading {path}")

    elapsed = time.perf_counter() - t0

    if verbose:
        console.log(f"Loaded graph schema in {elapsed:.3f}s")

    return graph_info


def parse_adj_list_type(text: str) -> AdjListType:
    try:
        return AdjListType(text)
    except ValueError:
        choices = ", ".join(t.value for t in AdjListType)
        raise typer.BadParameter(f"expected one of: {choices}") from None
