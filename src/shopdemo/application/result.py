"""Explicit success/failure values returned by every use case.

Handlers never let a DomainException escape: they return a ``Result``
whose ``failure`` names the ErrorKind, so the caller decides what each
kind means. Anything that is not a DomainException still propagates.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from shopdemo.domain.exceptions import DomainException, ErrorKind

T = TypeVar("T")


@dataclass(frozen=True)
class Failure:
    kind: ErrorKind
    message: str

    @staticmethod
    def from_exception(exc: DomainException) -> Failure:
        return Failure(kind=exc.kind, message=str(exc))


@dataclass(frozen=True)
class Result(Generic[T]):

    value: T | None = None
    failure: Failure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    def unwrap(self) -> T:
        """Return the value, or raise if this result is a failure."""
        if self.failure is not None:
            raise ValueError(
                f"Called unwrap() on a failed result: "
                f"{self.failure.kind.value}: {self.failure.message}"
            )
        return self.value  # type: ignore[return-value]

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def success(value: T) -> Result[T]:
        return Result(value=value)

    @staticmethod
    def fail(exc: DomainException) -> Result[T]:
        return Result(failure=Failure.from_exception(exc))
