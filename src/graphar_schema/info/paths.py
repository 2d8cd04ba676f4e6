"""
Chunk path grammar.

These functions are the on-disk contract: every reader and writer must derive
byte-identical paths from the same schema.

    vertex property chunk  <prefix><segment>/chunk<i>
    edge adjacency chunk   <prefix><adj_type>/adj_list/part<p>/chunk<i>
    edge offset chunk      <prefix><adj_type>/offset/chunk<i>
    edge property chunk    <prefix><adj_type>/<segment>/part<p>/chunk<i>

A vertex prefix already names the label: it defaults to ``<label>/`` and an
edge prefix to ``<src>_<edge>_<dst>/`` when none is given.

``segment`` is ``PropertyGroup.segment``: the explicit group prefix if one was
given, otherwise the group's property names joined with ``_``.
"""

from __future__ import annotations

from graphar_schema.types import AdjListType

ADJ_LIST_DIR = "adj_list"
OFFSET_DIR = "offset"
VERTEX_COUNT_FILE = "vertex_count"
EDGE_COUNT_FILE = "edge_count"


def _dir(name: str) -> str:
    return name if name.endswith("/") else name + "/"


def chunk_name(chunk_index: int) -> str:
    return f"chunk{chunk_index}"


def part_name(part_index: int) -> str:
    return f"part{part_index}"


def default_vertex_prefix(label: str) -> str:
    return _dir(label)


def default_edge_prefix(src_label: str, edge_label: str, dst_label: str) -> str:
    return _dir(f"{src_label}_{edge_label}_{dst_label}")


def vertex_group_prefix(prefix: str, segment: str) -> str:
    return prefix + _dir(segment)


def vertex_chunk_path(prefix: str, segment: str, chunk_index: int) -> str:
    return vertex_group_prefix(prefix, segment) + chunk_name(chunk_index)


def vertex_count_path(prefix: str) -> str:
    return prefix + VERTEX_COUNT_FILE


def adj_list_type_prefix(prefix: str, adj_list_type: AdjListType) -> str:
    return prefix + _dir(adj_list_type.value)


def adj_list_prefix(prefix: str, adj_list_type: AdjListType) -> str:
    return adj_list_type_prefix(prefix, adj_list_type) + _dir(ADJ_LIST_DIR)


def adj_list_chunk_path(
    prefix: str, adj_list_type: AdjListType, part_index: int, chunk_index: int
) -> str:
    return (
        adj_list_prefix(prefix, adj_list_type)
        + _dir(part_name(part_index))
        + chunk_name(chunk_index)
    )


def offset_prefix(prefix: str, adj_list_type: AdjListType) -> str:
    return adj_list_type_prefix(prefix, adj_list_type) + _dir(OFFSET_DIR)


def offset_chunk_path(prefix: str, adj_list_type: AdjListType, chunk_index: int) -> str:
    return offset_prefix(prefix, adj_list_type) + chunk_name(chunk_index)


def edge_group_prefix(prefix: str, adj_list_type: AdjListType, segment: str) -> str:
    return adj_list_type_prefix(prefix, adj_list_type) + _dir(segment)


def edge_property_chunk_path(
    prefix: str,
    adj_list_type: AdjListType,
    segment: str,
    part_index: int,
    chunk_index: int,
) -> str:
    return (
        edge_group_prefix(prefix, adj_list_type, segment)
        + _dir(part_name(part_index))
        + chunk_name(chunk_index)
    )


def edge_vertex_count_path(prefix: str, adj_list_type: AdjListType) -> str:
    return adj_list_type_prefix(prefix, adj_list_type) + VERTEX_COUNT_FILE


def edge_count_path(
    prefix: str, adj_list_type: AdjListType, vertex_chunk_index: int
) -> str:
    return adj_list_type_prefix(prefix, adj_list_type) + f"{EDGE_COUNT_FILE}{vertex_chunk_index}"
