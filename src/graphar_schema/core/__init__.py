from __future__ import annotations

from .exceptions import (
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
)
from .result import Result

__all__ = [
    "AdjListTypeAlreadyExistsError",
    "AdjListTypeNotFoundError",
    "DuplicateLabelError",
    "DuplicatePropertyNameError",
    "EmptyGroupError",
    "EncodingError",
    "ErrorKind",
    "GroupNotFoundError",
    "InfoError",
    "InfoIOError",
    "InvalidChunkIndexError",
    "InvalidChunkSizeError",
    "NotFoundError",
    "Result",
]
