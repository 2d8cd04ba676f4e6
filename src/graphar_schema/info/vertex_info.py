"""
vertex_info.py
Schema for one vertex label.

``VertexInfo`` is an immutable value: ``extend`` returns a new instance and
leaves the receiver untouched, so published schemas can be shared freely.
``VertexInfoBuilder`` is the mutable draft used while a schema is still being
assembled; ``build()`` turns it into a ``VertexInfo``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Iterable, List, Optional, Tuple

from graphar_schema.core.exceptions import GroupNotFoundError, NotFoundError
from graphar_schema.core.result import Result
from graphar_schema.info import paths
from graphar_schema.info.property import Property, PropertyGroup
from graphar_schema.info.validation import (
    build_property_index,
    check_chunk_index,
    check_chunk_size,
    check_group_addition,
    groups_validated,
    require_int,
    require_str,
)
from graphar_schema.logging import get_logger
from graphar_schema.types import DataType, InfoVersion

if TYPE_CHECKING:
    from graphar_schema.persist.filesystem import FileSystem

log = get_logger(__name__)


@dataclass(frozen=True, init=False)
class VertexInfo:
    label: str
    chunk_size: int
    prefix: str
    version: InfoVersion
    property_groups: Tuple[PropertyGroup, ...]
    _index: Dict[str, int] = field(compare=False, repr=False)

    def __init__(
        self,
        label: str,
        chunk_size: int,
        prefix: str = "",
        version: Optional[InfoVersion] = None,
        property_groups: Iterable[PropertyGroup] = (),
    ) -> None:
        label = require_str("label", label)
        groups = tuple(property_groups)
        object.__setattr__(self, "label", label)
        object.__setattr__(self, "chunk_size", require_int("chunk_size", chunk_size))
        object.__setattr__(self, "prefix", prefix or paths.default_vertex_prefix(label))
        object.__setattr__(self, "version", version or InfoVersion())
        object.__setattr__(self, "property_groups", groups)
        object.__setattr__(self, "_index", build_property_index(groups))

    # ------------------------------------------------------------------
    # Growth
    # ------------------------------------------------------------------

    def extend(self, group: PropertyGroup) -> Result["VertexInfo"]:
        """Return a new VertexInfo with ``group`` appended."""
        error = check_group_addition(self.property_groups, group)
        if error is not None:
            log.debug("Rejected group %s for vertex %r: %s", group.property_names, self.label, error)
            return Result.failure(error)
        return Result.success(self._replace_groups(self.property_groups + (group,)))

    def to_builder(self) -> "VertexInfoBuilder":
        builder = VertexInfoBuilder(self.label, self.chunk_size, self.prefix, self.version)
        builder._groups = list(self.property_groups)
        return builder

    def _replace_groups(self, groups: Tuple[PropertyGroup, ...]) -> "VertexInfo":
        return VertexInfo(self.label, self.chunk_size, self.prefix, self.version, groups)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def property_names(self) -> List[str]:
        return list(self._index)

    def contain_property(self, name: str) -> bool:
        return name in self._index

    def contain_property_group(self, group: PropertyGroup) -> bool:
        return group in self.property_groups

    def get_property_group(self, name: str) -> Result[PropertyGroup]:
        position = self._index.get(name)
        if position is None:
            return Result.failure(
                NotFoundError(f"vertex {self.label!r} has no property {name!r}")
            )
        return Result.success(self.property_groups[position])

    def _get_property(self, name: str) -> Result[Property]:
        return self.get_property_group(name).map(lambda g: g.get_property(name))

    def is_primary_key(self, name: str) -> Result[bool]:
        return self._get_property(name).map(lambda p: p.is_primary)

    def get_property_type(self, name: str) -> Result[DataType]:
        return self._get_property(name).map(lambda p: p.type)

    def get_primary_key(self) -> Result[Property]:
        for group in self.property_groups:
            for prop in group.properties:
                if prop.is_primary:
                    return Result.success(prop)
        return Result.failure(NotFoundError(f"vertex {self.label!r} has no primary key"))

    # ------------------------------------------------------------------
    # Paths
    # ------------------------------------------------------------------

    def get_path_prefix(self, group: PropertyGroup) -> Result[str]:
        if not self.contain_property_group(group):
            return Result.failure(
                GroupNotFoundError(
                    f"group {group.property_names} is not part of vertex {self.label!r}"
                )
            )
        return Result.success(paths.vertex_group_prefix(self.prefix, group.segment))

    def get_file_path(self, group: PropertyGroup, chunk_index: int) -> Result[str]:
        error = check_chunk_index(chunk_index=chunk_index)
        if error is not None:
            return Result.failure(error)
        return self.get_path_prefix(group).map(lambda p: p + paths.chunk_name(chunk_index))

    def get_vertices_num_file_path(self) -> str:
        return paths.vertex_count_path(self.prefix)

    # ------------------------------------------------------------------
    # Validation & persistence
    # ------------------------------------------------------------------

    def is_validated(self) -> bool:
        if not self.label or check_chunk_size(chunk_size=self.chunk_size) is not None:
            return False
        return groups_validated(self.property_groups)

    def dump(self) -> Result[str]:
        from graphar_schema.persist import yaml_codec

        return yaml_codec.dump_vertex_info(self)

    def save(self, path: str, fs: Optional["FileSystem"] = None) -> Result[None]:
        from graphar_schema.persist import loader

        return loader.save_text(self.dump(), path, fs)

    @classmethod
    def load(cls, path: str, fs: Optional["FileSystem"] = None) -> Result["VertexInfo"]:
        from graphar_schema.persist import loader

        return loader.load_vertex_info(path, fs)


class VertexInfoBuilder:
    """Mutable draft of a VertexInfo. Not safe to share across threads."""

    def __init__(
        self,
        label: str,
        chunk_size: int,
        prefix: str = "",
        version: Optional[InfoVersion] = None,
    ) -> None:
        self.label = require_str("label", label)
        self.chunk_size = require_int("chunk_size", chunk_size)
        self.prefix = prefix
        self.version = version
        self._groups: List[PropertyGroup] = []

    @property
    def property_groups(self) -> Tuple[PropertyGroup, ...]:
        return tuple(self._groups)

    def add_property_group(self, group: PropertyGroup) -> Result[None]:
        error = check_group_addition(self._groups, group)
        if error is not None:
            return Result.failure(error)
        self._groups.append(group)
        return Result.success()

    def build(self) -> Result[VertexInfo]:
        error = check_chunk_size(chunk_size=self.chunk_size)
        if error is not None:
            return Result.failure(error)
        return Result.success(
            VertexInfo(self.label, self.chunk_size, self.prefix, self.version, self._groups)
        )
