from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Closed set of failure categories reported by the schema layer."""

    NOT_FOUND = "NotFound"
    DUPLICATE_PROPERTY_NAME = "DuplicatePropertyName"
    DUPLICATE_LABEL = "DuplicateLabel"
    ADJ_LIST_TYPE_ALREADY_EXISTS = "AdjListTypeAlreadyExists"
    ADJ_LIST_TYPE_NOT_FOUND = "AdjListTypeNotFound"
    EMPTY_GROUP = "EmptyGroup"
    INVALID_CHUNK_SIZE = "InvalidChunkSize"
    INVALID_CHUNK_INDEX = "InvalidChunkIndex"
    ENCODING_ERROR = "EncodingError"
    IO_ERROR = "IoError"


class InfoError(Exception):
    """Base exception for schema lookups, mutations and persistence."""

    kind: ErrorKind = ErrorKind.NOT_FOUND

    def __str__(self) -> str:
        message = super().__str__()
        return f"{self.kind.value}: {message}" if message else self.kind.value


class NotFoundError(InfoError):
    """Raised when a label, property, group or representation lookup misses."""

    kind = ErrorKind.NOT_FOUND


class GroupNotFoundError(NotFoundError):
    """Raised when a property group is not registered on the queried Info."""


class DuplicatePropertyNameError(InfoError):
    kind = ErrorKind.DUPLICATE_PROPERTY_NAME


class DuplicateLabelError(InfoError):
    kind = ErrorKind.DUPLICATE_LABEL


class AdjListTypeAlreadyExistsError(InfoError):
    kind = ErrorKind.ADJ_LIST_TYPE_ALREADY_EXISTS


class AdjListTypeNotFoundError(InfoError):
    kind = ErrorKind.ADJ_LIST_TYPE_NOT_FOUND


class EmptyGroupError(InfoError):
    kind = ErrorKind.EMPTY_GROUP


class InvalidChunkSizeError(InfoError):
    kind = ErrorKind.INVALID_CHUNK_SIZE


class InvalidChunkIndexError(InfoError):
    kind = ErrorKind.INVALID_CHUNK_INDEX


class EncodingError(InfoError):
    """Raised when a schema document cannot be encoded or decoded."""

    kind = ErrorKind.ENCODING_ERROR


class InfoIOError(InfoError):
    """Raised when the filesystem collaborator fails to read or write bytes."""

    kind = ErrorKind.IO_ERROR
