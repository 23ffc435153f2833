"""Forward-only singly-linked list."""

import logging
from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

from linkedlists.errors import InvariantError
from linkedlists.node import ForwardNode
from linkedlists.result import Outcome

T = TypeVar("T")

logger = logging.getLogger(__name__)


class SinglyLinkedList(Generic[T]):
    """Singly-linked list holding only a head reference."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._head: ForwardNode[T] | None = None
        self._size = 0
        for value in values:
            self.push_back(value)

    @property
    def head(self) -> ForwardNode[T] | None:
        return self._head

    def _nodes(self) -> Iterator[ForwardNode[T]]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, value: T) -> None:
        """Insert ``value`` before the first node. O(1)."""
        self._head = ForwardNode(value, self._head)
        self._size += 1

    def push_back(self, value: T) -> None:
        """Insert ``value`` after the last node. O(n)."""
        if self._head is None:
            self._head = ForwardNode(value)
            self._size += 1
            return
        last = self._head
        while last.next is not None:
            last = last.next
        last.next = ForwardNode(value)
        self._size += 1

    def insert_after(self, target: T, value: T) -> Outcome[T]:
        """Insert ``value`` right after the first node equal to ``target``."""
        if self._head is None:
            logger.debug("insert_after(%r): list is empty", target)
            return Outcome.failure("empty")
        for position, node in enumerate(self._nodes()):
            if node.value == target:
                node.next = ForwardNode(value, node.next)
                self._size += 1
                return Outcome.success(value, position + 1)
        logger.debug("insert_after(%r): value not found", target)
        return Outcome.failure("not_found")

    def insert_at_index(self, index: int, value: T) -> Outcome[T]:
        """Insert ``value`` at position ``index`` (0 to length inclusive)."""
        if index < 0 or index > self._size:
            logger.debug("insert_at_index(%d): out of range for length %d", index, self._size)
            return Outcome.failure("out_of_range")
        if index == 0:
            self.push_front(value)
            return Outcome.success(value, index)
        for position, node in enumerate(self._nodes()):
            if position == index - 1:
                node.next = ForwardNode(value, node.next)
                self._size += 1
                return Outcome.success(value, index)
        raise InvariantError(f"chain ends before position {index - 1}")

    def pop_front(self) -> Outcome[T]:
        """Remove the first node and return its value. O(1)."""
        node = self._head
        if node is None:
            logger.debug("pop_front: list is empty")
            return Outcome.failure("empty")
        self._head = node.next
        node.next = None
        self._size -= 1
        return Outcome.success(node.value, 0)

    def pop_back(self) -> Outcome[T]:
        """Remove the last node and return its value. O(n)."""
        if self._head is None:
            logger.debug("pop_back: list is empty")
            return Outcome.failure("empty")
        position = self._size - 1
        if self._head.next is None:
            node = self._head
            self._head = None
            self._size -= 1
            return Outcome.success(node.value, position)
        before_last = self._head
        while before_last.next is not None and before_last.next.next is not None:
            before_last = before_last.next
        node = before_last.next
        if node is None:
            raise InvariantError("lost the last node while walking")
        before_last.next = None
        self._size -= 1
        return Outcome.success(node.value, position)

    def reverse(self) -> None:
        """Reverse the list in one pass by rewiring ``next``. O(n)."""
        previous: ForwardNode[T] | None = None
        node = self._head
        while node is not None:
            following = node.next
            node.next = previous
            previous = node
            node = following
        self._head = previous

    def find(self, value: T) -> tuple[bool, int]:
        """Return (True, position) of the first equal value, else (False, 0)."""
        for position, node in enumerate(self._nodes()):
            if node.value == value:
                return True, position
        return False, 0

    def is_empty(self) -> bool:
        return self._head is None

    def length(self) -> int:
        """Count nodes by walking the chain. O(n)."""
        return sum(1 for _ in self._nodes())

    def clear(self) -> None:
        self._head = None
        self._size = 0

    def display(self) -> str:
        return " -> ".join([*(str(value) for value in self), "None"])

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
