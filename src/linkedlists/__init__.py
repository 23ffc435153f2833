"""linkedlists - Singly, circular and doubly linked lists with explicit result values."""

from linkedlists.circular import CircularLinkedList
from linkedlists.doubly import DoublyLinkedList
from linkedlists.errors import InvariantError, LinkedListError
from linkedlists.node import ForwardNode, Node
from linkedlists.result import Outcome
from linkedlists.singly import SinglyLinkedList
from linkedlists.types import Status

__version__ = "0.0.1"

__all__ = [
    "DoublyLinkedList",
    "SinglyLinkedList",
    "CircularLinkedList",
    "Node",
    "ForwardNode",
    "Outcome",
    "Status",
    "LinkedListError",
    "InvariantError",
]
