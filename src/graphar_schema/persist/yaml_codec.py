"""
yaml_codec.py
YAML encoding of vertex, edge and graph schemas.

This codec:
- Converts Info objects to plain dicts in a fixed key order, then to YAML text
- Decodes YAML text back into Info objects, reporting any structural problem
  (bad YAML, missing keys, unknown type names) as EncodingError
- Ignores unknown keys so newer documents stay readable
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

import yaml

from graphar_schema.config import get_config
from graphar_schema.core.exceptions import EncodingError, InvalidChunkSizeError
from graphar_schema.core.result import Result
from graphar_schema.info.edge_info import AdjList, EdgeInfo
from graphar_schema.info.graph_info import GraphInfo
from graphar_schema.info.property import Property, PropertyGroup
from graphar_schema.info.validation import check_chunk_size
from graphar_schema.info.vertex_info import VertexInfo
from graphar_schema.logging import get_logger
from graphar_schema.types import AdjListType, DataType, FileType, InfoVersion

log = get_logger(__name__)

# A graph document lists either child file paths or embedded child documents.
ChildEntry = Union[str, Dict[str, Any]]


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------

def property_group_to_dict(group: PropertyGroup) -> Dict[str, Any]:
    return {
        "properties": [
            {
                "name": prop.name,
                "data_type": prop.type.to_string(),
                "is_primary": prop.is_primary,
            }
            for prop in group.properties
        ],
        "prefix": group.segment + "/",
        "file_type": group.file_type.value,
    }


def vertex_info_to_dict(vertex_info: VertexInfo) -> Dict[str, Any]:
    return {
        "label": vertex_info.label,
        "chunk_size": vertex_info.chunk_size,
        "prefix": vertex_info.prefix,
        "property_groups": [property_group_to_dict(g) for g in vertex_info.property_groups],
        "version": vertex_info.version.to_string(),
    }


def adj_list_to_dict(adj_list: AdjList) -> Dict[str, Any]:
    adj_type = adj_list.adj_list_type
    return {
        "ordered": adj_type.ordered,
        "aligned_by": adj_type.aligned_by,
        "file_type": adj_list.file_type.value,
        "property_groups": [property_group_to_dict(g) for g in adj_list.property_groups],
    }


def edge_info_to_dict(edge_info: EdgeInfo) -> Dict[str, Any]:
    return {
        "src_label": edge_info.src_label,
        "edge_label": edge_info.edge_label,
        "dst_label": edge_info.dst_label,
        "chunk_size": edge_info.chunk_size,
        "src_chunk_size": edge_info.src_chunk_size,
        "dst_chunk_size": edge_info.dst_chunk_size,
        "directed": edge_info.directed,
        "prefix": edge_info.prefix,
        "adj_lists": [adj_list_to_dict(a) for a in edge_info.adj_lists],
        "version": edge_info.version.to_string(),
    }


def graph_info_to_dict(graph_info: GraphInfo) -> Dict[str, Any]:
    """
    Child schemas are written as their recorded file paths. A graph with no
    recorded paths of a kind embeds those children inline instead.

    Raises EncodingError when recorded paths exist but do not pair one to one
    with the registered children.
    """
    _check_paths("vertex", graph_info.vertex_paths, graph_info.vertex_infos)
    _check_paths("edge", graph_info.edge_paths, graph_info.edge_infos)
    vertices: List[ChildEntry] = (
        list(graph_info.vertex_paths)
        if graph_info.vertex_paths
        else [vertex_info_to_dict(v) for v in graph_info.vertex_infos]
    )
    edges: List[ChildEntry] = (
        list(graph_info.edge_paths)
        if graph_info.edge_paths
        else [edge_info_to_dict(e) for e in graph_info.edge_infos]
    )
    return {
        "name": graph_info.name,
        "prefix": graph_info.prefix,
        "vertices": vertices,
        "edges": edges,
        "version": graph_info.version.to_string(),
    }


def _check_paths(kind: str, paths, infos) -> None:
    if paths and len(paths) != len(infos):
        raise EncodingError(
            f"graph records {len(paths)} {kind} path(s) for {len(infos)} registered {kind} schema(s)"
        )


def _dump(data: Dict[str, Any]) -> Result[str]:
    try:
        return Result.success(
            yaml.safe_dump(data, sort_keys=False, default_flow_style=False, allow_unicode=True)
        )
    except yaml.YAMLError as exc:
        return Result.failure(EncodingError(f"cannot encode schema: {exc}"))


def dump_vertex_info(vertex_info: VertexInfo) -> Result[str]:
    return _dump(vertex_info_to_dict(vertex_info))


def dump_edge_info(edge_info: EdgeInfo) -> Result[str]:
    return _dump(edge_info_to_dict(edge_info))


def dump_graph_info(graph_info: GraphInfo) -> Result[str]:
    try:
        data = graph_info_to_dict(graph_info)
    except EncodingError as exc:
        log.warning("Cannot encode graph %r: %s", graph_info.name, exc)
        return Result.failure(exc)
    return _dump(data)


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------

def parse_document(text: Union[str, bytes]) -> Result[Dict[str, Any]]:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        return Result.failure(EncodingError(f"invalid YAML: {exc}"))
    if not isinstance(data, dict):
        return Result.failure(EncodingError("schema document must be a mapping"))
    return Result.success(data)


def _require(data: Dict[str, Any], key: str) -> Any:
    if key not in data or data[key] is None:
        raise EncodingError(f"missing required key {key!r}")
    return data[key]


def _int(data: Dict[str, Any], key: str) -> int:
    value = _require(data, key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise EncodingError(f"{key!r} must be an integer, got {value!r}")
    return value


def _version(data: Dict[str, Any]) -> InfoVersion:
    return InfoVersion.parse(data.get("version") or get_config().default_version)


def _file_type(data: Dict[str, Any]) -> FileType:
    return FileType.from_string(data.get("file_type") or get_config().default_file_type)


def property_group_from_dict(data: Dict[str, Any], version: InfoVersion) -> PropertyGroup:
    if not isinstance(data, dict):
        raise EncodingError(f"property group must be a mapping, got {data!r}")
    properties = [
        Property(
            name=str(_require(p, "name")),
            type=DataType.from_string(_require(p, "data_type"), version),
            is_primary=bool(p.get("is_primary", False)),
        )
        for p in _require(data, "properties")
    ]
    return PropertyGroup(
        properties,
        _file_type(data),
        data.get("prefix"),
    )


def _groups(data: Dict[str, Any], version: InfoVersion) -> List[PropertyGroup]:
    return [property_group_from_dict(g, version) for g in data.get("property_groups") or []]


def vertex_info_from_dict(data: Dict[str, Any]) -> VertexInfo:
    version = _version(data)
    chunk_size = _int(data, "chunk_size")
    error = check_chunk_size(chunk_size=chunk_size)
    if error is not None:
        raise error
    return VertexInfo(
        str(_require(data, "label")),
        chunk_size,
        str(data.get("prefix") or ""),
        version,
        _groups(data, version),
    )


def adj_list_from_dict(data: Dict[str, Any], version: InfoVersion) -> AdjList:
    if "ordered" in data or "aligned_by" in data:
        adj_type = AdjListType.from_ordered_aligned(
            bool(data.get("ordered", False)), str(_require(data, "aligned_by"))
        )
    else:
        adj_type = AdjListType.from_string(_require(data, "adj_list_type"))
    # Adjacency directories are named after the type and cannot be renamed.
    prefix = data.get("prefix")
    if prefix and str(prefix).rstrip("/") != adj_type.value:
        raise EncodingError(
            f"adjacency list prefix {prefix!r} does not match type {adj_type.value}"
        )
    return AdjList(adj_type, _file_type(data), _groups(data, version))


def edge_info_from_dict(data: Dict[str, Any]) -> EdgeInfo:
    version = _version(data)
    sizes = {key: _int(data, key) for key in ("chunk_size", "src_chunk_size", "dst_chunk_size")}
    error = check_chunk_size(**sizes)
    if error is not None:
        raise error

    adj_lists = [adj_list_from_dict(a, version) for a in data.get("adj_lists") or []]
    seen = set()
    for adj_list in adj_lists:
        if adj_list.adj_list_type in seen:
            raise EncodingError(f"{adj_list.adj_list_type.value} listed twice")
        seen.add(adj_list.adj_list_type)

    return EdgeInfo(
        str(_require(data, "src_label")),
        str(_require(data, "edge_label")),
        str(_require(data, "dst_label")),
        sizes["chunk_size"],
        sizes["src_chunk_size"],
        sizes["dst_chunk_size"],
        bool(data.get("directed", False)),
        str(data.get("prefix") or ""),
        version,
        adj_lists,
    )


def _decode(fn, data: Dict[str, Any]) -> Result[Any]:
    try:
        return Result.success(fn(data))
    except (EncodingError, InvalidChunkSizeError) as exc:
        log.warning("Rejected schema document: %s", exc)
        return Result.failure(exc)
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        log.warning("Malformed schema document: %s", exc)
        return Result.failure(EncodingError(f"malformed schema document: {exc}"))


def parse_vertex_info(text: Union[str, bytes]) -> Result[VertexInfo]:
    return parse_document(text).then(lambda d: _decode(vertex_info_from_dict, d))


def parse_edge_info(text: Union[str, bytes]) -> Result[EdgeInfo]:
    return parse_document(text).then(lambda d: _decode(edge_info_from_dict, d))


def decode_vertex_entry(entry: Dict[str, Any]) -> Result[VertexInfo]:
    return _decode(vertex_info_from_dict, entry)


def decode_edge_entry(entry: Dict[str, Any]) -> Result[EdgeInfo]:
    return _decode(edge_info_from_dict, entry)


class GraphDocument:
    """Decoded graph document whose child entries are not yet resolved."""

    def __init__(
        self,
        name: str,
        prefix: Optional[str],
        version: InfoVersion,
        vertices: List[ChildEntry],
        edges: List[ChildEntry],
    ) -> None:
        self.name = name
        self.prefix = prefix
        self.version = version
        self.vertices = vertices
        self.edges = edges


def _graph_document_from_dict(data: Dict[str, Any]) -> GraphDocument:
    def _entries(key: str) -> List[ChildEntry]:
        entries = data.get(key) or []
        if not isinstance(entries, list):
            raise EncodingError(f"{key!r} must be a list")
        for entry in entries:
            if not isinstance(entry, (str, dict)):
                raise EncodingError(f"invalid {key} entry {entry!r}")
        return entries

    return GraphDocument(
        name=str(_require(data, "name")),
        prefix=data.get("prefix") or None,
        version=_version(data),
        vertices=_entries("vertices"),
        edges=_entries("edges"),
    )


def parse_graph_document(text: Union[str, bytes]) -> Result[GraphDocument]:
    return parse_document(text).then(lambda d: _decode(_graph_document_from_dict, d))
