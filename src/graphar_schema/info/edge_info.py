"""
edge_info.py
Schema for one (source label, edge label, destination label) triple.

An edge type may materialize up to four adjacency-list representations (see
``AdjListType``). Each present representation carries its own file type and
its own ordered property groups; property-name uniqueness is enforced per
representation, so the same property may appear under several of them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Iterable, List, Optional, Tuple

from graphar_schema.core.exceptions import (
    AdjListTypeAlreadyExistsError,
    AdjListTypeNotFoundError,
    GroupNotFoundError,
    NotFoundError,
)
from graphar_schema.core.result import Result
from graphar_schema.info import paths
from graphar_schema.info.property import Property, PropertyGroup
from graphar_schema.info.validation import (
    check_chunk_index,
    check_chunk_size,
    check_group_addition,
    groups_validated,
    require_int,
    require_str,
)
from graphar_schema.logging import get_logger
from graphar_schema.types import AdjListType, DataType, FileType, InfoVersion

if TYPE_CHECKING:
    from graphar_schema.persist.filesystem import FileSystem

log = get_logger(__name__)

_ADJ_ORDER = {t: i for i, t in enumerate(AdjListType)}


@dataclass(frozen=True, init=False)
class AdjList:
    """One adjacency-list representation: file type plus its property groups."""

    adj_list_type: AdjListType
    file_type: FileType
    property_groups: Tuple[PropertyGroup, ...] = ()

    def __init__(
        self,
        adj_list_type: AdjListType,
        file_type: FileType,
        property_groups: Iterable[PropertyGroup] = (),
    ) -> None:
        object.__setattr__(self, "adj_list_type", adj_list_type)
        object.__setattr__(self, "file_type", file_type)
        object.__setattr__(self, "property_groups", tuple(property_groups))

    def find_group(self, name: str) -> Optional[PropertyGroup]:
        for group in self.property_groups:
            if group.contains(name):
                return group
        return None

    def with_group(self, group: PropertyGroup) -> "AdjList":
        return AdjList(self.adj_list_type, self.file_type, self.property_groups + (group,))


def _sorted_adj_lists(adj_lists: Iterable[AdjList]) -> Tuple[AdjList, ...]:
    ordered = tuple(sorted(adj_lists, key=lambda a: _ADJ_ORDER[a.adj_list_type]))
    for prev, cur in zip(ordered, ordered[1:]):
        if prev.adj_list_type is cur.adj_list_type:
            raise ValueError(f"adjacency list {cur.adj_list_type.value} given twice")
    return ordered


@dataclass(frozen=True, init=False)
class EdgeInfo:
    src_label: str
    edge_label: str
    dst_label: str
    chunk_size: int
    src_chunk_size: int
    dst_chunk_size: int
    directed: bool
    prefix: str
    version: InfoVersion
    adj_lists: Tuple[AdjList, ...] = field(default=())

    def __init__(
        self,
        src_label: str,
        edge_label: str,
        dst_label: str,
        chunk_size: int,
        src_chunk_size: int,
        dst_chunk_size: int,
        directed: bool,
        prefix: str = "",
        version: Optional[InfoVersion] = None,
        adj_lists: Iterable[AdjList] = (),
    ) -> None:
        for name, value in (
            ("src_label", src_label),
            ("edge_label", edge_label),
            ("dst_label", dst_label),
        ):
            object.__setattr__(self, name, require_str(name, value))
        for name, value in (
            ("chunk_size", chunk_size),
            ("src_chunk_size", src_chunk_size),
            ("dst_chunk_size", dst_chunk_size),
        ):
            object.__setattr__(self, name, require_int(name, value))
        object.__setattr__(self, "directed", bool(directed))
        object.__setattr__(
            self,
            "prefix",
            prefix or paths.default_edge_prefix(src_label, edge_label, dst_label),
        )
        object.__setattr__(self, "version", version or InfoVersion())
        object.__setattr__(self, "adj_lists", _sorted_adj_lists(adj_lists))

    @property
    def key(self) -> Tuple[str, str, str]:
        return (self.src_label, self.edge_label, self.dst_label)

    @property
    def adj_list_map(self) -> Dict[AdjListType, AdjList]:
        return {a.adj_list_type: a for a in self.adj_lists}

    # ------------------------------------------------------------------
    # Growth
    # ------------------------------------------------------------------

    def extend_adj_list(
        self, adj_list_type: AdjListType, file_type: FileType
    ) -> Result["EdgeInfo"]:
        """Return a new EdgeInfo with an empty ``adj_list_type`` representation."""
        if self.contain_adj_list(adj_list_type):
            return Result.failure(
                AdjListTypeAlreadyExistsError(
                    f"{adj_list_type.value} already present on edge {self.key}"
                )
            )
        return Result.success(
            self._replace_adj_lists(self.adj_lists + (AdjList(adj_list_type, file_type),))
        )

    def extend_property_group(
        self, group: PropertyGroup, adj_list_type: AdjListType
    ) -> Result["EdgeInfo"]:
        """Return a new EdgeInfo with ``group`` appended under ``adj_list_type``."""
        found = self._get_adj_list(adj_list_type)
        if not found.ok():
            return Result.failure(found.error)  # type: ignore[arg-type]
        adj_list = found.value
        error = check_group_addition(adj_list.property_groups, group)
        if error is not None:
            log.debug(
                "Rejected group %s under %s for edge %s: %s",
                group.property_names, adj_list_type.value, self.key, error,
            )
            return Result.failure(error)
        updated = [
            a.with_group(group) if a.adj_list_type is adj_list_type else a
            for a in self.adj_lists
        ]
        return Result.success(self._replace_adj_lists(updated))

    def to_builder(self) -> "EdgeInfoBuilder":
        builder = EdgeInfoBuilder(
            self.src_label, self.edge_label, self.dst_label,
            self.chunk_size, self.src_chunk_size, self.dst_chunk_size,
            self.directed, self.prefix, self.version,
        )
        builder._adj_lists = dict(self.adj_list_map)
        return builder

    def _replace_adj_lists(self, adj_lists: Iterable[AdjList]) -> "EdgeInfo":
        return EdgeInfo(
            self.src_label, self.edge_label, self.dst_label,
            self.chunk_size, self.src_chunk_size, self.dst_chunk_size,
            self.directed, self.prefix, self.version, adj_lists,
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def _get_adj_list(self, adj_list_type: AdjListType) -> Result[AdjList]:
        for adj_list in self.adj_lists:
            if adj_list.adj_list_type is adj_list_type:
                return Result.success(adj_list)
        return Result.failure(
            AdjListTypeNotFoundError(f"{adj_list_type.value} not present on edge {self.key}")
        )

    def contain_adj_list(self, adj_list_type: AdjListType) -> bool:
        return self._get_adj_list(adj_list_type).ok()

    def get_file_type(self, adj_list_type: AdjListType) -> Result[FileType]:
        return self._get_adj_list(adj_list_type).map(lambda a: a.file_type)

    def get_property_groups(
        self, adj_list_type: AdjListType
    ) -> Result[Tuple[PropertyGroup, ...]]:
        return self._get_adj_list(adj_list_type).map(lambda a: a.property_groups)

    def get_property_group(
        self, name: str, adj_list_type: AdjListType
    ) -> Result[PropertyGroup]:
        def _find(adj_list: AdjList) -> Result[PropertyGroup]:
            group = adj_list.find_group(name)
            if group is None:
                return Result.failure(
                    NotFoundError(
                        f"edge {self.key} has no property {name!r} under {adj_list_type.value}"
                    )
                )
            return Result.success(group)

        return self._get_adj_list(adj_list_type).then(_find)

    def contain_property(self, name: str, adj_list_type: Optional[AdjListType] = None) -> bool:
        if adj_list_type is not None:
            return self.get_property_group(name, adj_list_type).ok()
        return any(a.find_group(name) is not None for a in self.adj_lists)

    def contain_property_group(self, group: PropertyGroup, adj_list_type: AdjListType) -> bool:
        found = self._get_adj_list(adj_list_type)
        return found.ok() and group in found.value.property_groups  # type: ignore[union-attr]

    def _get_property(self, name: str) -> Result[Property]:
        for adj_list in self.adj_lists:
            group = adj_list.find_group(name)
            if group is not None:
                return Result.success(group.get_property(name))
        return Result.failure(NotFoundError(f"edge {self.key} has no property {name!r}"))

    def get_property_type(self, name: str) -> Result[DataType]:
        return self._get_property(name).map(lambda p: p.type)

    def is_primary_key(self, name: str) -> Result[bool]:
        return self._get_property(name).map(lambda p: p.is_primary)

    # ------------------------------------------------------------------
    # Paths
    # ------------------------------------------------------------------

    def get_adj_list_path_prefix(self, adj_list_type: AdjListType) -> Result[str]:
        return self._get_adj_list(adj_list_type).map(
            lambda _: paths.adj_list_prefix(self.prefix, adj_list_type)
        )

    def get_adj_list_file_path(
        self, part_index: int, chunk_index: int, adj_list_type: AdjListType
    ) -> Result[str]:
        error = check_chunk_index(part_index=part_index, chunk_index=chunk_index)
        if error is not None:
            return Result.failure(error)
        return self._get_adj_list(adj_list_type).map(
            lambda _: paths.adj_list_chunk_path(self.prefix, adj_list_type, part_index, chunk_index)
        )

    def get_offset_path_prefix(self, adj_list_type: AdjListType) -> Result[str]:
        return self._get_adj_list(adj_list_type).map(
            lambda _: paths.offset_prefix(self.prefix, adj_list_type)
        )

    def get_adj_list_offset_file_path(
        self, chunk_index: int, adj_list_type: AdjListType
    ) -> Result[str]:
        error = check_chunk_index(chunk_index=chunk_index)
        if error is not None:
            return Result.failure(error)
        return self._get_adj_list(adj_list_type).map(
            lambda _: paths.offset_chunk_path(self.prefix, adj_list_type, chunk_index)
        )

    def get_property_group_path_prefix(
        self, group: PropertyGroup, adj_list_type: AdjListType
    ) -> Result[str]:
        def _prefix(adj_list: AdjList) -> Result[str]:
            if group not in adj_list.property_groups:
                return Result.failure(
                    GroupNotFoundError(
                        f"group {group.property_names} is not under {adj_list_type.value}"
                    )
                )
            return Result.success(paths.edge_group_prefix(self.prefix, adj_list_type, group.segment))

        return self._get_adj_list(adj_list_type).then(_prefix)

    def get_property_file_path(
        self,
        group: PropertyGroup,
        adj_list_type: AdjListType,
        part_index: int,
        chunk_index: int,
    ) -> Result[str]:
        error = check_chunk_index(part_index=part_index, chunk_index=chunk_index)
        if error is not None:
            return Result.failure(error)
        return self.get_property_group_path_prefix(group, adj_list_type).map(
            lambda p: p + f"{paths.part_name(part_index)}/{paths.chunk_name(chunk_index)}"
        )

    def get_vertices_num_file_path(self, adj_list_type: AdjListType) -> Result[str]:
        return self._get_adj_list(adj_list_type).map(
            lambda _: paths.edge_vertex_count_path(self.prefix, adj_list_type)
        )

    def get_edges_num_file_path(
        self, vertex_chunk_index: int, adj_list_type: AdjListType
    ) -> Result[str]:
        error = check_chunk_index(vertex_chunk_index=vertex_chunk_index)
        if error is not None:
            return Result.failure(error)
        return self._get_adj_list(adj_list_type).map(
            lambda _: paths.edge_count_path(self.prefix, adj_list_type, vertex_chunk_index)
        )

    # ------------------------------------------------------------------
    # Validation & persistence
    # ------------------------------------------------------------------

    def is_validated(self) -> bool:
        if not (self.src_label and self.edge_label and self.dst_label):
            return False
        sizes = check_chunk_size(
            chunk_size=self.chunk_size,
            src_chunk_size=self.src_chunk_size,
            dst_chunk_size=self.dst_chunk_size,
        )
        if sizes is not None:
            return False
        return all(groups_validated(a.property_groups) for a in self.adj_lists)

    def dump(self) -> Result[str]:
        from graphar_schema.persist import yaml_codec

        return yaml_codec.dump_edge_info(self)

    def save(self, path: str, fs: Optional["FileSystem"] = None) -> Result[None]:
        from graphar_schema.persist import loader

        return loader.save_text(self.dump(), path, fs)

    @classmethod
    def load(cls, path: str, fs: Optional["FileSystem"] = None) -> Result["EdgeInfo"]:
        from graphar_schema.persist import loader

        return loader.load_edge_info(path, fs)


class EdgeInfoBuilder:
    """Mutable draft of an EdgeInfo. Not safe to share across threads."""

    def __init__(
        self,
        src_label: str,
        edge_label: str,
        dst_label: str,
        chunk_size: int,
        src_chunk_size: int,
        dst_chunk_size: int,
        directed: bool,
        prefix: str = "",
        version: Optional[InfoVersion] = None,
    ) -> None:
        self.src_label = require_str("src_label", src_label)
        self.edge_label = require_str("edge_label", edge_label)
        self.dst_label = require_str("dst_label", dst_label)
        self.chunk_size = require_int("chunk_size", chunk_size)
        self.src_chunk_size = require_int("src_chunk_size", src_chunk_size)
        self.dst_chunk_size = require_int("dst_chunk_size", dst_chunk_size)
        self.directed = bool(directed)
        self.prefix = prefix
        self.version = version
        self._adj_lists: Dict[AdjListType, AdjList] = {}

    def contain_adj_list(self, adj_list_type: AdjListType) -> bool:
        return adj_list_type in self._adj_lists

    def add_adj_list(self, adj_list_type: AdjListType, file_type: FileType) -> Result[None]:
        if adj_list_type in self._adj_lists:
            return Result.failure(
                AdjListTypeAlreadyExistsError(f"{adj_list_type.value} already present")
            )
        self._adj_lists[adj_list_type] = AdjList(adj_list_type, file_type)
        return Result.success()

    def add_property_group(
        self, group: PropertyGroup, adj_list_type: AdjListType
    ) -> Result[None]:
        adj_list = self._adj_lists.get(adj_list_type)
        if adj_list is None:
            return Result.failure(
                AdjListTypeNotFoundError(f"{adj_list_type.value} not present")
            )
        error = check_group_addition(adj_list.property_groups, group)
        if error is not None:
            return Result.failure(error)
        self._adj_lists[adj_list_type] = adj_list.with_group(group)
        return Result.success()

    def build(self) -> Result[EdgeInfo]:
        error = check_chunk_size(
            chunk_size=self.chunk_size,
            src_chunk_size=self.src_chunk_size,
            dst_chunk_size=self.dst_chunk_size,
        )
        if error is not None:
            return Result.failure(error)
        return Result.success(
            EdgeInfo(
                self.src_label, self.edge_label, self.dst_label,
                self.chunk_size, self.src_chunk_size, self.dst_chunk_size,
                self.directed, self.prefix, self.version, self._adj_lists.values(),
            )
        )
