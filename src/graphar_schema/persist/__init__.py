"""
Persistence package.

Re-exports the YAML codec entry points and the filesystem collaborator used by
``VertexInfo``/``EdgeInfo``/``GraphInfo`` ``dump``/``save``/``load``.
"""

from __future__ import annotations

from .filesystem import FileSystem, LocalFileSystem
from .loader import load_edge_info, load_graph_info, load_vertex_info, read_text, save_text
from .yaml_codec import (
    dump_edge_info,
    dump_graph_info,
    dump_vertex_info,
    parse_edge_info,
    parse_graph_document,
    parse_vertex_info,
)

__all__ = [
    "FileSystem",
    "LocalFileSystem",
    "dump_edge_info",
    "dump_graph_info",
    "dump_vertex_info",
    "load_edge_info",
    "load_graph_info",
    "load_vertex_info",
    "parse_edge_info",
    "parse_graph_document",
    "parse_vertex_info",
    "read_text",
    "save_text",
]
