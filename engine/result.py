"""
Per-unit outcome for batched upstream work.

A batch returns one Result per input so a single failed fetch never raises
across the batch boundary. Callers consume ``value`` on success and
``error`` (the original exception) on failure.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    success: bool
    value: T | None = None
    error: BaseException | None = None

    @classmethod
    def ok(cls, value: T | None = None) -> "Result[T]":
        return cls(success=True, value=value)

    @classmethod
    def fail(cls, error: BaseException) -> "Result[T]":
        return cls(success=False, error=error)

    def __bool__(self) -> bool:
        return self.success
