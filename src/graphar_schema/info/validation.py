"""Structural checks shared by vertex and edge schemas."""

from __future__ import annotations

from typing import Dict, Iterable, Optional, Sequence

from graphar_schema.core.exceptions import (
    DuplicatePropertyNameError,
    EmptyGroupError,
    InfoError,
    InvalidChunkIndexError,
    InvalidChunkSizeError,
)
from graphar_schema.info.property import PropertyGroup


def check_group_addition(
    groups: Sequence[PropertyGroup], group: PropertyGroup
) -> Optional[InfoError]:
    """Return the error adding ``group`` to ``groups`` would cause, if any."""
    names = group.property_names
    if not names:
        return EmptyGroupError("property group has no properties")

    seen = set()
    for name in names:
        if name in seen:
            return DuplicatePropertyNameError(
                f"property {name!r} appears twice in the group"
            )
        seen.add(name)

    for existing in groups:
        for name in names:
            if existing.contains(name):
                return DuplicatePropertyNameError(
                    f"property {name!r} already belongs to another group"
                )
    return None


def groups_validated(groups: Sequence[PropertyGroup]) -> bool:
    """Every group valid and no property name shared between groups."""
    seen = set()
    for group in groups:
        if not group.is_validated():
            return False
        for name in group.property_names:
            if name in seen:
                return False
            seen.add(name)
    return True


def build_property_index(groups: Iterable[PropertyGroup]) -> Dict[str, int]:
    """Map each property name to the position of the first group holding it."""
    index: Dict[str, int] = {}
    for position, group in enumerate(groups):
        for name in group.property_names:
            index.setdefault(name, position)
    return index


def check_chunk_index(**indexes: int) -> Optional[InfoError]:
    for name, value in indexes.items():
        if value < 0:
            return InvalidChunkIndexError(f"{name} must be non-negative, got {value}")
    return None


def check_chunk_size(**sizes: int) -> Optional[InfoError]:
    for name, value in sizes.items():
        if value <= 0:
            return InvalidChunkSizeError(f"{name} must be positive, got {value}")
    return None


def require_int(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    return value


def require_str(name: str, value: object) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    return value
