"""
loader.py
Read and write schema documents through a FileSystem.

    save_text(vertex_info.dump(), "/tmp/person.vertex.yml")
    load_graph_info("/tmp/ldbc_sample.graph.yml")

Loading a graph resolves its ``vertices``/``edges`` entries: file paths are
taken relative to the graph document's directory, embedded documents are
decoded in place. The first child failure is returned unchanged.
"""

from __future__ import annotations

from typing import List, Optional

from graphar_schema.core.exceptions import InfoIOError
from graphar_schema.core.result import Result
from graphar_schema.info.edge_info import EdgeInfo
from graphar_schema.info.graph_info import GraphInfo
from graphar_schema.info.vertex_info import VertexInfo
from graphar_schema.logging import get_logger
from graphar_schema.persist import yaml_codec
from graphar_schema.persist.filesystem import FileSystem, LocalFileSystem
from graphar_schema.utils.pathing import join_location, parent_location

log = get_logger(__name__)


def _fs(fs: Optional[FileSystem]) -> FileSystem:
    return fs if fs is not None else LocalFileSystem()


def save_text(text: Result[str], path: str, fs: Optional[FileSystem] = None) -> Result[None]:
    """Write an already-encoded document; encoding failures pass through."""
    if not text.ok():
        return Result.failure(text.error)  # type: ignore[arg-type]
    try:
        _fs(fs).write_bytes(path, text.value.encode("utf-8"))  # type: ignore[union-attr]
    except InfoIOError as exc:
        log.error("Failed to save schema to %s: %s", path, exc)
        return Result.failure(exc)
    except OSError as exc:
        log.error("Failed to save schema to %s: %s", path, exc)
        return Result.failure(InfoIOError(f"cannot write {path}: {exc}"))
    log.info("Saved schema document: %s", path)
    return Result.success()


def read_text(path: str, fs: Optional[FileSystem] = None) -> Result[str]:
    try:
        data = _fs(fs).read_bytes(path)
    except InfoIOError as exc:
        return Result.failure(exc)
    except OSError as exc:
        return Result.failure(InfoIOError(f"cannot read {path}: {exc}"))
    log.debug("Read schema document: %s (%d bytes)", path, len(data))
    return Result.success(data.decode("utf-8"))


def load_vertex_info(path: str, fs: Optional[FileSystem] = None) -> Result[VertexInfo]:
    return read_text(path, fs).then(yaml_codec.parse_vertex_info)


def load_edge_info(path: str, fs: Optional[FileSystem] = None) -> Result[EdgeInfo]:
    return read_text(path, fs).then(yaml_codec.parse_edge_info)


def load_graph_info(path: str, fs: Optional[FileSystem] = None) -> Result[GraphInfo]:
    document = read_text(path, fs).then(yaml_codec.parse_graph_document)
    if not document.ok():
        return Result.failure(document.error)  # type: ignore[arg-type]
    doc = document.value
    base = parent_location(path)

    vertex_infos: List[VertexInfo] = []
    vertex_paths: List[str] = []
    for entry in doc.vertices:  # type: ignore[union-attr]
        if isinstance(entry, str):
            res = load_vertex_info(join_location(base, entry), fs)
            vertex_paths.append(entry)
        else:
            res = yaml_codec.decode_vertex_entry(entry)
        if not res.ok():
            return Result.failure(res.error)  # type: ignore[arg-type]
        vertex_infos.append(res.value)  # type: ignore[arg-type]

    edge_infos: List[EdgeInfo] = []
    edge_paths: List[str] = []
    for entry in doc.edges:  # type: ignore[union-attr]
        if isinstance(entry, str):
            res_e = load_edge_info(join_location(base, entry), fs)
            edge_paths.append(entry)
        else:
            res_e = yaml_codec.decode_edge_entry(entry)
        if not res_e.ok():
            return Result.failure(res_e.error)  # type: ignore[arg-type]
        edge_infos.append(res_e.value)  # type: ignore[arg-type]

    builder_result = _assemble(
        doc,  # type: ignore[arg-type]
        doc.prefix or base,  # type: ignore[union-attr]
        vertex_infos,
        edge_infos,
        vertex_paths,
        edge_paths,
    )
    if builder_result.ok():
        log.info(
            "Loaded graph %r from %s (vertices=%d, edges=%d)",
            doc.name, path, len(vertex_infos), len(edge_infos),  # type: ignore[union-attr]
        )
    return builder_result


def _assemble(
    doc: yaml_codec.GraphDocument,
    prefix: str,
    vertex_infos: List[VertexInfo],
    edge_infos: List[EdgeInfo],
    vertex_paths: List[str],
    edge_paths: List[str],
) -> Result[GraphInfo]:
    graph_info = GraphInfo(doc.name, doc.version, prefix, vertex_paths=vertex_paths, edge_paths=edge_paths)
    for vertex_info in vertex_infos:
        res = graph_info.extend_vertex(vertex_info)
        if not res.ok():
            return res
        graph_info = res.value  # type: ignore[assignment]
    for edge_info in edge_infos:
        res = graph_info.extend_edge(edge_info)
        if not res.ok():
            return res
        graph_info = res.value  # type: ignore[assignment]
    return Result.success(graph_info)
