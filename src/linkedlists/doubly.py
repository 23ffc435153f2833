"""Arena-backed doubly-linked list."""

import logging
from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

from linkedlists.errors import InvariantError
from linkedlists.node import Node
from linkedlists.result import Outcome

T = TypeVar("T")

logger = logging.getLogger(__name__)


class DoublyLinkedList(Generic[T]):
    """
    Doubly-linked list whose nodes live in a growable arena.

    Nodes refer to their neighbors by arena slot rather than by object, so
    the forward and backward relations never form reference cycles. Slots
    released by deletions are reused by later insertions.

    Operations that can fail (empty list, missing value, bad index) return
    an ``Outcome`` instead of raising.
    """

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._nodes: list[Node[T] | None] = []
        self._free: list[int] = []  # released slots, reused LIFO
        self._head: int | None = None
        self._tail: int | None = None
        self._size = 0
        for value in values:
            self.push_back(value)

    @property
    def head(self) -> int | None:
        """Arena slot of the first node, or None when empty."""
        return self._head

    @property
    def tail(self) -> int | None:
        """Arena slot of the last node, or None when empty."""
        return self._tail

    def node(self, slot: int | None) -> Node[T]:
        """Return the node stored in ``slot``.

        Raises:
            InvariantError: If the slot is None, out of range or released.
        """
        if slot is None or not 0 <= slot < len(self._nodes):
            raise InvariantError(f"slot {slot} is outside the arena")
        node = self._nodes[slot]
        if node is None:
            raise InvariantError(f"slot {slot} has been released")
        return node

    def _allocate(self, value: T) -> int:
        node = Node(value)
        if self._free:
            slot = self._free.pop()
            self._nodes[slot] = node
        else:
            slot = len(self._nodes)
            self._nodes.append(node)
        self._size += 1
        return slot

    def _release(self, slot: int) -> T:
        node = self.node(slot)
        node.unlink()
        self._nodes[slot] = None
        self._free.append(slot)
        self._size -= 1
        return node.value

    def _slots(self) -> Iterator[int]:
        slot = self._head
        while slot is not None:
            yield slot
            slot = self.node(slot).next

    def _locate(self, value: T) -> tuple[int, int] | None:
        """Return (position, slot) of the first node equal to ``value``."""
        for position, slot in enumerate(self._slots()):
            if self.node(slot).value == value:
                return position, slot
        return None

    def _slot_at(self, position: int) -> int:
        slot = self._head
        for _ in range(position):
            slot = self.node(slot).next
        if slot is None:
            raise InvariantError(f"chain ends before position {position}")
        return slot

    def _splice_after(self, slot: int, value: T) -> None:
        new_slot = self._allocate(value)
        node = self.node(slot)
        new = self.node(new_slot)
        new.prev = slot
        new.next = node.next
        if node.next is None:
            self._tail = new_slot
        else:
            self.node(node.next).prev = new_slot
        node.next = new_slot

    def push_front(self, value: T) -> None:
        """Insert ``value`` before the first node. O(1)."""
        slot = self._allocate(value)
        if self._head is None:
            self._head = self._tail = slot
            return
        self.node(slot).next = self._head
        self.node(self._head).prev = slot
        self._head = slot

    def push_back(self, value: T) -> None:
        """Insert ``value`` after the last node. O(1)."""
        slot = self._allocate(value)
        if self._tail is None:
            self._head = self._tail = slot
            return
        self.node(slot).prev = self._tail
        self.node(self._tail).next = slot
        self._tail = slot

    def insert_after_value(self, target: T, value: T) -> Outcome[T]:
        """
        Insert ``value`` right after the first node equal to ``target``.

        Returns:
            Outcome whose index is the new node's position, or a failed
            outcome with status "empty" or "not_found".
        """
        if self._head is None:
            logger.debug("insert_after_value(%r): list is empty", target)
            return Outcome.failure("empty")
        found = self._locate(target)
        if found is None:
            logger.debug("insert_after_value(%r): value not found", target)
            return Outcome.failure("not_found")
        position, slot = found
        self._splice_after(slot, value)
        return Outcome.success(value, position + 1)

    def insert_at_index(self, index: int, value: T) -> Outcome[T]:
        """
        Insert ``value`` so that it ends up at position ``index``.

        Valid indices run from 0 to the current length inclusive; anything
        else yields status "out_of_range" and leaves the list untouched.
        """
        if index < 0 or index > self._size:
            logger.debug("insert_at_index(%d): out of range for length %d", index, self._size)
            return Outcome.failure("out_of_range")
        if index == 0:
            self.push_front(value)
        elif index == self._size:
            self.push_back(value)
        else:
            self._splice_after(self._slot_at(index - 1), value)
        return Outcome.success(value, index)

    def delete_front(self) -> Outcome[T]:
        """Remove the first node and return its value. O(1)."""
        slot = self._head
        if slot is None:
            logger.debug("delete_front: list is empty")
            return Outcome.failure("empty")
        if slot == self._tail:
            self._head = self._tail = None
            return Outcome.success(self._release(slot), 0)
        successor = self.node(slot).next
        self.node(successor).prev = None
        self._head = successor
        return Outcome.success(self._release(slot), 0)

    def delete_back(self) -> Outcome[T]:
        """Remove the last node and return its value. O(1)."""
        slot = self._tail
        if slot is None:
            logger.debug("delete_back: list is empty")
            return Outcome.failure("empty")
        position = self._size - 1
        if slot == self._head:
            self._head = self._tail = None
            return Outcome.success(self._release(slot), position)
        predecessor = self.node(slot).prev
        self.node(predecessor).next = None
        self._tail = predecessor
        return Outcome.success(self._release(slot), position)

    def delete_by_value(self, value: T) -> Outcome[T]:
        """Remove the first node equal to ``value``.

        The outcome carries the removed value and the position it held.
        """
        if self._head is None:
            logger.debug("delete_by_value(%r): list is empty", value)
            return Outcome.failure("empty")
        found = self._locate(value)
        if found is None:
            logger.debug("delete_by_value(%r): value not found", value)
            return Outcome.failure("not_found")
        position, slot = found
        if slot == self._head:
            return self.delete_front()
        if slot == self._tail:
            return self.delete_back()
        node = self.node(slot)
        self.node(node.prev).next = node.next
        self.node(node.next).prev = node.prev
        return Outcome.success(self._release(slot), position)

    def clear(self) -> None:
        """Release every node."""
        for node in self._nodes:
            if node is not None:
                node.unlink()
        self._nodes.clear()
        self._free.clear()
        self._head = self._tail = None
        self._size = 0

    def reverse(self) -> None:
        """Reverse the list in place by swapping every node's relations. O(n)."""
        if self._size < 2:
            return
        slot = self._head
        while slot is not None:
            node = self.node(slot)
            node.prev, node.next = node.next, node.prev
            slot = node.prev
        self._head, self._tail = self._tail, self._head

    def find(self, value: T) -> tuple[bool, int]:
        """Return (True, position) of the first equal value, else (False, 0)."""
        found = self._locate(value)
        if found is None:
            return False, 0
        return True, found[0]

    def is_empty(self) -> bool:
        return self._head is None

    def length(self) -> int:
        """Count nodes by walking the chain. O(n); see also ``len()``."""
        return sum(1 for _ in self._slots())

    def head_value(self) -> Outcome[T]:
        if self._head is None:
            return Outcome.failure("empty")
        return Outcome.success(self.node(self._head).value, 0)

    def tail_value(self) -> Outcome[T]:
        if self._tail is None:
            return Outcome.failure("empty")
        return Outcome.success(self.node(self._tail).value, self._size - 1)

    def display(self) -> str:
        """Render the list head to tail, e.g. ``1 -> 2 -> None``."""
        return " -> ".join([*(str(value) for value in self), "None"])

    def check_invariants(self) -> None:
        """
        Walk the list in both directions and verify its bookkeeping.

        Raises:
            InvariantError: If head/tail disagree, a prev relation does not
                mirror the next relation before it, either walk fails to
                terminate at the opposite end, or the size is off.
        """
        if (self._head is None) != (self._tail is None):
            raise InvariantError(f"head={self._head} but tail={self._tail}")

        forward: list[int] = []
        previous: int | None = None
        slot = self._head
        while slot is not None:
            if len(forward) > self._size:
                raise InvariantError("forward walk does not terminate")
            node = self.node(slot)
            if node.prev != previous:
                raise InvariantError(
                    f"slot {slot} has prev={node.prev}, expected {previous}"
                )
            forward.append(slot)
            previous, slot = slot, node.next
        if previous != self._tail:
            raise InvariantError(f"forward walk ends at {previous}, tail is {self._tail}")

        backward: list[int] = []
        slot = self._tail
        while slot is not None:
            if len(backward) > self._size:
                raise InvariantError("backward walk does not terminate")
            backward.append(slot)
            slot = self.node(slot).prev
        if backward != forward[::-1]:
            raise InvariantError("backward walk is not the reverse of the forward walk")

        if len(forward) != self._size:
            raise InvariantError(f"walked {len(forward)} nodes, size is {self._size}")
        occupied = sum(1 for node in self._nodes if node is not None)
        if occupied != self._size:
            raise InvariantError(f"{occupied} occupied slots, size is {self._size}")

    def __iter__(self) -> Iterator[T]:
        for slot in self._slots():
            yield self.node(slot).value

    def __reversed__(self) -> Iterator[T]:
        slot = self._tail
        while slot is not None:
            node = self.node(slot)
            yield node.value
            slot = node.prev

    def __len__(self) -> int:
        """Return the number of nodes in the list."""
        return self._size

    def __bool__(self) -> bool:
        """Return True if the list is non-empty."""
        return self._size > 0

    def __str__(self) -> str:
        return self.display()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"
