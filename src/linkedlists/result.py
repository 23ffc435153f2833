"""Result values returned by fallible list operations."""

from dataclasses import dataclass
from typing import Generic, TypeVar

from linkedlists.types import Status

T = TypeVar("T")


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Immutable result of an insert, delete or lookup.

    Truthy only when the operation succeeded. Removed or looked-up values
    travel in ``value``; ``index`` is the position the operation touched.
    """

    status: Status
    value: T | None = None
    index: int | None = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls, value: T | None = None, index: int | None = None) -> "Outcome[T]":
        """Create a successful outcome."""
        return cls(status="ok", value=value, index=index)

    @classmethod
    def failure(cls, status: Status) -> "Outcome[T]":
        """Create a failed outcome carrying only its status."""
        return cls(status=status)
