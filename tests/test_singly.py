"""Tests for the singly-linked list."""

import pytest

from linkedlists import ForwardNode, SinglyLinkedList


def test_node_creation() -> None:
    """Test creating a forward node."""
    node = ForwardNode("a")
    assert node.value == "a"
    assert node.next is None


def test_empty_list() -> None:
    """Test empty list behavior."""
    lst = SinglyLinkedList[int]()
    assert lst.is_empty()
    assert len(lst) == 0
    assert lst.length() == 0
    assert lst.pop_front().status == "empty"
    assert lst.pop_back().status == "empty"
    assert lst.display() == "None"


def test_push_front_and_back() -> None:
    """Test pushing at both ends."""
    lst = SinglyLinkedList[int]()
    lst.push_front(10)
    lst.push_front(20)
    lst.push_front(30)
    lst.push_back(50)
    lst.push_back(80)

    assert list(lst) == [30, 20, 10, 50, 80]
    assert lst.display() == "30 -> 20 -> 10 -> 50 -> 80 -> None"
    assert len(lst) == lst.length() == 5


def test_pop_front() -> None:
    """Test popping the first node."""
    lst = SinglyLinkedList([1, 2])
    outcome = lst.pop_front()
    assert outcome.value == 1
    assert list(lst) == [2]


def test_pop_back() -> None:
    """Test popping the last node, down to an empty list."""
    lst = SinglyLinkedList([1, 2, 3])
    assert lst.pop_back().value == 3
    assert lst.pop_back().index == 1
    assert list(lst) == [1]

    assert lst.pop_back().value == 1
    assert lst.is_empty()
    assert lst.head is None


def test_insert_at_index() -> None:
    """Test inserting at valid positions."""
    lst = SinglyLinkedList([20, 10, 50])
    assert lst.insert_at_index(2, 100)
    assert lst.insert_at_index(0, 5)
    assert lst.insert_at_index(5, 99)
    assert list(lst) == [5, 20, 10, 100, 50, 99]
    assert len(lst) == 6


@pytest.mark.parametrize("index", [4, -1])
def test_insert_at_index_out_of_range(index: int) -> None:
    """Test out-of-range indices leave the list unchanged."""
    lst = SinglyLinkedList([1, 2, 3])
    assert lst.insert_at_index(index, 0).status == "out_of_range"
    assert list(lst) == [1, 2, 3]


def test_insert_after() -> None:
    """Test inserting after a value."""
    lst = SinglyLinkedList([20, 10, 50])
    outcome = lst.insert_after(20, 100)
    assert outcome.index == 1
    lst.insert_after(20, 500)
    assert list(lst) == [20, 500, 100, 10, 50]


def test_insert_after_missing() -> None:
    """Test inserting after a missing value is reported."""
    lst = SinglyLinkedList([1])
    assert lst.insert_after(2, 3).status == "not_found"
    assert SinglyLinkedList[int]().insert_after(2, 3).status == "empty"
    assert list(lst) == [1]


def test_find() -> None:
    """Test finding values."""
    lst = SinglyLinkedList([4, 5, 6])
    assert lst.find(6) == (True, 2)
    assert lst.find(7) == (False, 0)


def test_reverse() -> None:
    """Test reversing once and twice."""
    lst = SinglyLinkedList([1, 2, 3])
    lst.reverse()
    assert list(lst) == [3, 2, 1]
    lst.reverse()
    assert list(lst) == [1, 2, 3]

    empty = SinglyLinkedList[int]()
    empty.reverse()
    assert empty.is_empty()


def test_clear_and_repr() -> None:
    """Test clearing and the repr form."""
    lst = SinglyLinkedList([1, 2])
    assert repr(lst) == "SinglyLinkedList([1, 2])"
    lst.clear()
    assert not lst
