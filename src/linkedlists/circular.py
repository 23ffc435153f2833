"""Circular singly-linked list."""

import logging
from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

from linkedlists.node import ForwardNode
from linkedlists.result import Outcome

T = TypeVar("T")

logger = logging.getLogger(__name__)


class CircularLinkedList(Generic[T]):
    """
    Forward-only list whose last node links back to the first.

    Traversal stops when it comes back around to the head, compared by
    identity, so equal values never end a walk early.
    """

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._head: ForwardNode[T] | None = None
        self._size = 0
        for value in values:
            self.push_back(value)

    @property
    def head(self) -> ForwardNode[T] | None:
        return self._head

    def _nodes(self) -> Iterator[ForwardNode[T]]:
        head = self._head
        if head is None:
            return
        node = head
        while True:
            yield node
            if node.next is None or node.next is head:
                return
            node = node.next

    def _last(self) -> ForwardNode[T] | None:
        last: ForwardNode[T] | None = None
        for last in self._nodes():
            pass
        return last

    def push_front(self, value: T) -> None:
        """Insert ``value`` as the new head, repairing the wrap-around link. O(n)."""
        node = ForwardNode(value)
        last = self._last()
        if last is None:
            node.next = node
        else:
            node.next = self._head
            last.next = node
        self._head = node
        self._size += 1

    def push_back(self, value: T) -> None:
        """Insert ``value`` after the last node, before the head. O(n)."""
        head = self._head
        self.push_front(value)
        if head is not None:
            self._head = head

    def pop_front(self) -> Outcome[T]:
        """Remove the head and return its value. O(n)."""
        head = self._head
        if head is None:
            logger.debug("pop_front: list is empty")
            return Outcome.failure("empty")
        if head.next is head:
            self._head = None
        else:
            last = self._last()
            if last is not None:
                last.next = head.next
            self._head = head.next
        head.next = None
        self._size -= 1
        return Outcome.success(head.value, 0)

    def find(self, value: T) -> tuple[bool, int]:
        """Return (True, position) of the first equal value, else (False, 0)."""
        for position, node in enumerate(self._nodes()):
            if node.value == value:
                return True, position
        return False, 0

    def is_empty(self) -> bool:
        return self._head is None

    def length(self) -> int:
        """Count nodes by walking once around the ring. O(n)."""
        return sum(1 for _ in self._nodes())

    def clear(self) -> None:
        """Break the ring and drop every node."""
        last = self._last()
        if last is not None:
            last.next = None
        self._head = None
        self._size = 0

    def display(self) -> str:
        if self._head is None:
            return "Empty list"
        return " -> ".join([*(str(value) for value in self), "(back to start)"])

    def __iter__(self) -> Iterator[T]:
        for node in self._nodes():
            yield node.value

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __str__(self) -> str:
        return self.display()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"
