"""
result.py
Discriminated success/failure value returned by every fallible operation.

Callers either branch on ``ok()``:

    res = vertex_info.get_property_group("id")
    if res.ok():
        group = res.value

or opt into exceptions with ``unwrap()``, which raises the carried InfoError.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

from graphar_schema.core.exceptions import ErrorKind, InfoError

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Result(Generic[T]):
    value: Optional[T] = None
    error: Optional[InfoError] = None

    @classmethod
    def success(cls, value: T = None) -> "Result[T]":  # type: ignore[assignment]
        return cls(value=value)

    @classmethod
    def failure(cls, error: InfoError) -> "Result[T]":
        return cls(error=error)

    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[ErrorKind]:
        return None if self.error is None else self.error.kind

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    def value_or(self, default: T) -> T:
        return default if self.error is not None else self.value  # type: ignore[return-value]

    def map(self, fn: Callable[[T], U]) -> "Result[U]":
        """Apply ``fn`` to a success value; failures pass through unchanged."""
        if self.error is not None:
            return Result(error=self.error)
        return Result(value=fn(self.value))  # type: ignore[arg-type]

    def then(self, fn: Callable[[T], "Result[U]"]) -> "Result[U]":
        if self.error is not None:
            return Result(error=self.error)
        return fn(self.value)  # type: ignore[arg-type]
