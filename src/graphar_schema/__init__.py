"""
graphar_schema: schema and chunk-path metadata for chunked on-disk graphs.

    from graphar_schema import (
        AdjListType, DataType, FileType, Property, PropertyGroup, Type,
        VertexInfo, EdgeInfo, GraphInfo,
    )
"""

from __future__ import annotations

from graphar_schema.core import (
    AdjListTypeAlreadyExistsError,
    AdjListTypeNotFoundError,
    DuplicateLabelError,
    DuplicatePropertyNameError,
    EmptyGroupError,
    EncodingError,
    ErrorKind,
    GroupNotFoundError,
    InfoError,
    InfoIOError,
    InvalidChunkIndexError,
    InvalidChunkSizeError,
    NotFoundError,
    Result,
)
from graphar_schema.info import (
    AdjList,
    EdgeInfo,
    EdgeInfoBuilder,
    GraphInfo,
    GraphInfoBuilder,
    Property,
    PropertyGroup,
    VertexInfo,
    VertexInfoBuilder,
)
from graphar_schema.persist import FileSystem, LocalFileSystem
from graphar_schema.types import AdjListType, DataType, FileType, InfoVersion, Type

__version__ = "0.1.0"

__all__ = [
    "AdjList",
    "AdjListType",
    "AdjListTypeAlreadyExistsError",
    "AdjListTypeNotFoundError",
    "DataType",
    "DuplicateLabelError",
    "DuplicatePropertyNameError",
    "EdgeInfo",
    "EdgeInfoBuilder",
    "EmptyGroupError",
    "EncodingError",
    "ErrorKind",
    "FileSystem",
    "FileType",
    "GraphInfo",
    "GraphInfoBuilder",
    "GroupNotFoundError",
    "InfoError",
    "InfoIOError",
    "InfoVersion",
    "InvalidChunkIndexError",
    "InvalidChunkSizeError",
    "LocalFileSystem",
    "NotFoundError",
    "Property",
    "PropertyGroup",
    "Result",
    "Type",
    "VertexInfo",
    "VertexInfoBuilder",
]
