"""List cells shared by the linked-list variants."""

from typing import Generic, TypeVar

T = TypeVar("T")


class Node(Generic[T]):
    """A cell of the doubly-linked list.

    ``prev`` and ``next`` are slot numbers in the owning list's arena, not
    object references, so adjacent nodes never refer to each other directly.
    """

    __slots__ = ("value", "prev", "next")

    def __init__(self, value: T) -> None:
        self.value = value
        self.prev: int | None = None
        self.next: int | None = None

    def unlink(self) -> None:
        """Clear both relations."""
        self.prev = None
        self.next = None

    def __repr__(self) -> str:
        return f"Node({self.value!r}, prev={self.prev}, next={self.next})"


class ForwardNode(Generic[T]):
    """A cell of the singly-linked and circular lists."""

    __slots__ = ("value", "next")

    def __init__(self, value: T, next: "ForwardNode[T] | None" = None) -> None:
        self.value = value
        self.next = next

    def __repr__(self) -> str:
        return f"ForwardNode({self.value!r})"
