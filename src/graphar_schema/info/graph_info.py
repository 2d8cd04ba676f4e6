"""
graph_info.py
Top-level graph schema: the registered vertex and edge schemas plus the
external file references their serialized forms live at.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, Iterable, List, Optional, Tuple

from graphar_schema.core.exceptions import DuplicateLabelError, NotFoundError
from graphar_schema.core.result import Result
from graphar_schema.info.edge_info import EdgeInfo
from graphar_schema.info.property import PropertyGroup
from graphar_schema.info.validation import require_str
from graphar_schema.info.vertex_info import VertexInfo
from graphar_schema.logging import get_logger
from graphar_schema.types import AdjListType, InfoVersion

if TYPE_CHECKING:
    from graphar_schema.persist.filesystem import FileSystem

log = get_logger(__name__)

EdgeKey = Tuple[str, str, str]


def _add_path(paths: Tuple[str, ...], path: str) -> Tuple[str, ...]:
    return paths if path in paths else paths + (path,)


@dataclass(frozen=True, init=False)
class GraphInfo:
    name: str
    version: InfoVersion
    prefix: str
    vertex_infos: Tuple[VertexInfo, ...]
    edge_infos: Tuple[EdgeInfo, ...]
    vertex_paths: Tuple[str, ...]
    edge_paths: Tuple[str, ...]

    def __init__(
        self,
        name: str,
        version: Optional[InfoVersion] = None,
        prefix: str = "",
        vertex_infos: Iterable[VertexInfo] = (),
        edge_infos: Iterable[EdgeInfo] = (),
        vertex_paths: Iterable[str] = (),
        edge_paths: Iterable[str] = (),
    ) -> None:
        object.__setattr__(self, "name", require_str("name", name))
        object.__setattr__(self, "version", version or InfoVersion())
        object.__setattr__(self, "prefix", prefix)
        object.__setattr__(self, "vertex_infos", tuple(vertex_infos))
        object.__setattr__(self, "edge_infos", tuple(edge_infos))
        object.__setattr__(self, "vertex_paths", tuple(vertex_paths))
        object.__setattr__(self, "edge_paths", tuple(edge_paths))

    @property
    def vertex_info_map(self) -> Dict[str, VertexInfo]:
        return {v.label: v for v in self.vertex_infos}

    @property
    def edge_info_map(self) -> Dict[EdgeKey, EdgeInfo]:
        return {e.key: e for e in self.edge_infos}

    # ------------------------------------------------------------------
    # Growth
    # ------------------------------------------------------------------

    def _replace(self, **changes) -> "GraphInfo":
        fields = {
            "name": self.name,
            "version": self.version,
            "prefix": self.prefix,
            "vertex_infos": self.vertex_infos,
            "edge_infos": self.edge_infos,
            "vertex_paths": self.vertex_paths,
            "edge_paths": self.edge_paths,
        }
        fields.update(changes)
        return GraphInfo(**fields)

    def extend_vertex(self, vertex_info: VertexInfo) -> Result["GraphInfo"]:
        if vertex_info.label in self.vertex_info_map:
            return Result.failure(
                DuplicateLabelError(f"vertex {vertex_info.label!r} already registered")
            )
        return Result.success(self._replace(vertex_infos=self.vertex_infos + (vertex_info,)))

    def extend_edge(self, edge_info: EdgeInfo) -> Result["GraphInfo"]:
        if edge_info.key in self.edge_info_map:
            return Result.failure(
                DuplicateLabelError(f"edge {edge_info.key} already registered")
            )
        return Result.success(self._replace(edge_infos=self.edge_infos + (edge_info,)))

    def extend_vertex_info_path(self, path: str) -> "GraphInfo":
        return self._replace(vertex_paths=_add_path(self.vertex_paths, path))

    def extend_edge_info_path(self, path: str) -> "GraphInfo":
        return self._replace(edge_paths=_add_path(self.edge_paths, path))

    def to_builder(self) -> "GraphInfoBuilder":
        builder = GraphInfoBuilder(self.name, self.prefix, self.version)
        builder._vertices = {v.label: v for v in self.vertex_infos}
        builder._edges = {e.key: e for e in self.edge_infos}
        builder._vertex_paths = list(self.vertex_paths)
        builder._edge_paths = list(self.edge_paths)
        return builder

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def get_vertex_info(self, label: str) -> Result[VertexInfo]:
        vertex_info = self.vertex_info_map.get(label)
        if vertex_info is None:
            return Result.failure(NotFoundError(f"vertex {label!r} is not registered"))
        return Result.success(vertex_info)

    def get_edge_info(self, src_label: str, edge_label: str, dst_label: str) -> Result[EdgeInfo]:
        key = (src_label, edge_label, dst_label)
        edge_info = self.edge_info_map.get(key)
        if edge_info is None:
            return Result.failure(NotFoundError(f"edge {key} is not registered"))
        return Result.success(edge_info)

    def get_vertex_property_group(self, label: str, property_name: str) -> Result[PropertyGroup]:
        return self.get_vertex_info(label).then(
            lambda v: v.get_property_group(property_name)
        )

    def get_edge_property_group(
        self,
        src_label: str,
        edge_label: str,
        dst_label: str,
        property_name: str,
        adj_list_type: AdjListType,
    ) -> Result[PropertyGroup]:
        return self.get_edge_info(src_label, edge_label, dst_label).then(
            lambda e: e.get_property_group(property_name, adj_list_type)
        )

    # ------------------------------------------------------------------
    # Validation & persistence
    # ------------------------------------------------------------------

    def missing_vertex_labels(self) -> List[str]:
        """Labels referenced by registered edges but not registered as vertices."""
        registered = self.vertex_info_map
        missing: List[str] = []
        for edge_info in self.edge_infos:
            for label in (edge_info.src_label, edge_info.dst_label):
                if label not in registered and label not in missing:
                    missing.append(label)
        return missing

    def is_validated(self) -> bool:
        if not self.name:
            return False
        for vertex_info in self.vertex_infos:
            if not vertex_info.is_validated():
                log.warning("Vertex schema %r failed validation", vertex_info.label)
                return False
        for edge_info in self.edge_infos:
            if not edge_info.is_validated():
                log.warning("Edge schema %s failed validation", edge_info.key)
                return False
        missing = self.missing_vertex_labels()
        if missing:
            log.warning("Graph %r references unregistered vertex labels: %s", self.name, missing)
            return False
        return True

    def dump(self) -> Result[str]:
        from graphar_schema.persist import yaml_codec

        return yaml_codec.dump_graph_info(self)

    def save(self, path: str, fs: Optional["FileSystem"] = None) -> Result[None]:
        from graphar_schema.persist import loader

        return loader.save_text(self.dump(), path, fs)

    @classmethod
    def load(cls, path: str, fs: Optional["FileSystem"] = None) -> Result["GraphInfo"]:
        from graphar_schema.persist import loader

        return loader.load_graph_info(path, fs)


class GraphInfoBuilder:
    """Mutable draft of a GraphInfo. Not safe to share across threads."""

    def __init__(self, name: str, prefix: str = "", version: Optional[InfoVersion] = None) -> None:
        self.name = require_str("name", name)
        self.prefix = prefix
        self.version = version
        self._vertices: Dict[str, VertexInfo] = {}
        self._edges: Dict[EdgeKey, EdgeInfo] = {}
        self._vertex_paths: List[str] = []
        self._edge_paths: List[str] = []

    def add_vertex(self, vertex_info: VertexInfo) -> Result[None]:
        if vertex_info.label in self._vertices:
            return Result.failure(
                DuplicateLabelError(f"vertex {vertex_info.label!r} already registered")
            )
        self._vertices[vertex_info.label] = vertex_info
        return Result.success()

    def add_edge(self, edge_info: EdgeInfo) -> Result[None]:
        if edge_info.key in self._edges:
            return Result.failure(
                DuplicateLabelError(f"edge {edge_info.key} already registered")
            )
        self._edges[edge_info.key] = edge_info
        return Result.success()

    def add_vertex_info_path(self, path: str) -> None:
        if path not in self._vertex_paths:
            self._vertex_paths.append(path)

    def add_edge_info_path(self, path: str) -> None:
        if path not in self._edge_paths:
            self._edge_paths.append(path)

    def build(self) -> Result[GraphInfo]:
        return Result.success(
            GraphInfo(
                self.name,
                self.version,
                self.prefix,
                self._vertices.values(),
                self._edges.values(),
                self._vertex_paths,
                self._edge_paths,
            )
        )
