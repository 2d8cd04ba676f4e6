"""
Closed tag sets shared by every schema object.

* ``Type`` / ``DataType``: primitive and parametric property types.
* ``FileType``: physical chunk file format of a property group or adjacency list.
* ``AdjListType``: the four adjacency-list representations of an edge type.
* ``InfoVersion``: the ``gar/v<N>`` format version tag written into every document.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple

from graphar_schema.core.exceptions import EncodingError


# ---------------------------------------------------------------------------
# Data types
# ---------------------------------------------------------------------------

class Type(Enum):
    BOOL = "bool"
    INT32 = "int32"
    INT64 = "int64"
    FLOAT = "float"
    DOUBLE = "double"
    STRING = "string"
    DATE = "date"
    TIMESTAMP = "timestamp"
    LIST = "list"
    USER_DEFINED = "user_defined"


_LIST_PATTERN = re.compile(r"^list<(?P<child>.+)>$")


@dataclass(frozen=True)
class DataType:
    """
    A property type tag.

    ``child`` is the element type of a ``LIST`` and must be unset otherwise.
    ``user_defined_type_name`` names a ``USER_DEFINED`` type declared in the
    document's version tag.
    """

    id: Type
    child: Optional["DataType"] = None
    user_defined_type_name: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.id, Type):
            raise TypeError(f"DataType id must be a Type, got {self.id!r}")
        if self.id is Type.LIST and self.child is None:
            raise TypeError("list DataType requires an element type")
        if self.id is not Type.LIST and self.child is not None:
            raise TypeError(f"{self.id.value} DataType cannot carry an element type")

    @classmethod
    def list_of(cls, child: "DataType") -> "DataType":
        return cls(Type.LIST, child=child)

    def to_string(self) -> str:
        if self.id is Type.LIST:
            return f"list<{self.child.to_string()}>"  # type: ignore[union-attr]
        if self.id is Type.USER_DEFINED:
            return self.user_defined_type_name
        return self.id.value

    @classmethod
    def from_string(
        cls, text: str, version: Optional["InfoVersion"] = None
    ) -> "DataType":
        """Parse ``int32``, ``list<string>`` or a user-defined type name."""
        name = str(text).strip()
        match = _LIST_PATTERN.match(name)
        if match:
            return cls.list_of(cls.from_string(match.group("child"), version))

        builtin = _BUILTIN_TYPES.get(name)
        if builtin is not None:
            return cls(builtin)

        if version is not None and name in version.user_define_types:
            return cls(Type.USER_DEFINED, user_defined_type_name=name)

        raise EncodingError(f"unknown data type {text!r}")

    def __str__(self) -> str:
        return self.to_string()


_BUILTIN_TYPES: Dict[str, Type] = {
    t.value: t for t in Type if t not in (Type.LIST, Type.USER_DEFINED)
}


# ---------------------------------------------------------------------------
# File types
# ---------------------------------------------------------------------------

class FileType(Enum):
    CSV = "csv"
    PARQUET = "parquet"
    ORC = "orc"

    @classmethod
    def from_string(cls, text: str) -> "FileType":
        try:
            return cls(str(text).strip().lower())
        except ValueError:
            raise EncodingError(f"unknown file type {text!r}") from None


# ---------------------------------------------------------------------------
# Adjacency list types
# ---------------------------------------------------------------------------

class AdjListType(Enum):
    """
    The four ways an edge type's connectivity may be materialized.

    Member order is the canonical order used for iteration, equality and
    encoding.
    """

    UNORDERED_BY_SOURCE = "unordered_by_source"
    ORDERED_BY_SOURCE = "ordered_by_source"
    UNORDERED_BY_DEST = "unordered_by_dest"
    ORDERED_BY_DEST = "ordered_by_dest"

    @property
    def ordered(self) -> bool:
        return self in (AdjListType.ORDERED_BY_SOURCE, AdjListType.ORDERED_BY_DEST)

    @property
    def aligned_by(self) -> str:
        if self in (AdjListType.UNORDERED_BY_SOURCE, AdjListType.ORDERED_BY_SOURCE):
            return "src"
        return "dst"

    @classmethod
    def from_ordered_aligned(cls, ordered: bool, aligned_by: str) -> "AdjListType":
        key = (bool(ordered), str(aligned_by))
        try:
            return _ADJ_BY_ORDER_ALIGN[key]
        except KeyError:
            raise EncodingError(
                f"invalid adjacency list aligned_by={aligned_by!r}"
            ) from None

    @classmethod
    def from_string(cls, text: str) -> "AdjListType":
        try:
            return cls(str(text).strip())
        except ValueError:
            raise EncodingError(f"unknown adjacency list type {text!r}") from None

    def __str__(self) -> str:
        return self.value


_ADJ_BY_ORDER_ALIGN: Dict[Tuple[bool, str], AdjListType] = {
    (False, "src"): AdjListType.UNORDERED_BY_SOURCE,
    (True, "src"): AdjListType.ORDERED_BY_SOURCE,
    (False, "dst"): AdjListType.UNORDERED_BY_DEST,
    (True, "dst"): AdjListType.ORDERED_BY_DEST,
}


# ---------------------------------------------------------------------------
# Format version
# ---------------------------------------------------------------------------

# Built-in type names each known format version accepts.
_VERSION_TYPES: Dict[int, Tuple[str, ...]] = {
    1: tuple(t.value for t in Type if t is not Type.USER_DEFINED),
}

_VERSION_PATTERN = re.compile(
    r"^gar/v(?P<version>\d+)\s*(?:\((?P<types>[^)]*)\))?\s*$"
)


@dataclass(frozen=True)
class InfoVersion:
    version: int = 1
    user_define_types: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.version not in _VERSION_TYPES:
            raise EncodingError(f"unsupported format version: {self.version}")
        object.__setattr__(self, "user_define_types", tuple(self.user_define_types))

    def check_type(self, type_name: str) -> bool:
        """True if ``type_name`` is built into this version or user-declared."""
        base = _LIST_PATTERN.match(type_name)
        if base:
            return self.check_type(base.group("child"))
        return (
            type_name in _VERSION_TYPES[self.version]
            or type_name in self.user_define_types
        )

    def to_string(self) -> str:
        text = f"gar/v{self.version}"
        if self.user_define_types:
            text += f" ({','.join(self.user_define_types)})"
        return text

    @classmethod
    def parse(cls, text: str) -> "InfoVersion":
        match = _VERSION_PATTERN.match(str(text).strip())
        if not match:
            raise EncodingError(f"malformed version tag {text!r}")
        types_text = match.group("types") or ""
        user_types = tuple(t.strip() for t in types_text.split(",") if t.strip())
        return cls(int(match.group("version")), user_types)

    def __str__(self) -> str:
        return self.to_string()
