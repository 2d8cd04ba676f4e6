from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from graphar_schema.types import DataType, FileType


@dataclass(frozen=True)
class Property:
    """A named, typed field. Name uniqueness is enforced by the owning Info."""

    name: str
    type: DataType
    is_primary: bool = False


@dataclass(frozen=True, init=False)
class PropertyGroup:
    """
    Properties co-located in one physical file per chunk.

    Order matters: it is the physical column order, so two groups holding the
    same properties in a different order are different groups.

    ``prefix`` optionally overrides the path segment derived from the
    property names.
    """

    properties: Tuple[Property, ...]
    file_type: FileType
    prefix: Optional[str] = None

    def __init__(
        self,
        properties: Iterable[Property],
        file_type: FileType,
        prefix: Optional[str] = None,
    ) -> None:
        props = tuple(properties)
        segment = (prefix or "").rstrip("/")
        # A prefix equal to the derived segment carries no information.
        if segment == "_".join(p.name for p in props):
            segment = ""
        object.__setattr__(self, "properties", props)
        object.__setattr__(self, "file_type", file_type)
        object.__setattr__(self, "prefix", segment + "/" if segment else None)

    def contains(self, name: str) -> bool:
        return any(p.name == name for p in self.properties)

    def get_property(self, name: str) -> Optional[Property]:
        for prop in self.properties:
            if prop.name == name:
                return prop
        return None

    @property
    def property_names(self) -> Tuple[str, ...]:
        return tuple(p.name for p in self.properties)

    @property
    def segment(self) -> str:
        """Path segment for this group's chunk files (no trailing slash)."""
        if self.prefix:
            return self.prefix.rstrip("/")
        return "_".join(self.property_names)

    def is_validated(self) -> bool:
        names = self.property_names
        if not names or any(not n for n in names):
            return False
        return len(set(names)) == len(names)
