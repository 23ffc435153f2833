"""Walk through each list variant and print its state after every step."""

import argparse
import logging

from linkedlists import CircularLinkedList, DoublyLinkedList, SinglyLinkedList


def singly_demo() -> None:
    """Exercise the singly-linked list."""
    print("=== Singly Linked List ===\n")
    lst = SinglyLinkedList[int]()
    for value in (10, 20, 30):
        lst.push_front(value)
    print(lst)

    lst.push_back(50)
    lst.push_back(80)
    print(lst)

    lst.pop_front()
    print(lst)

    popped = lst.pop_back()
    if popped:
        print(f"Popped value: {popped.value}")
    print(lst)

    lst.insert_at_index(2, 100)
    print(lst)
    lst.insert_after(20, 500)
    print(lst)

    found, index = lst.find(50)
    print(f"Found at index: {index}" if found else "Not found")
    print("List is empty" if lst.is_empty() else "List is not empty")

    lst.reverse()
    print(f"Reversed: {lst}\n")


def circular_demo() -> None:
    """Exercise the circular list."""
    print("=== Circular Linked List ===\n")
    lst = CircularLinkedList[int]()
    print(lst)
    lst.push_front(50)
    lst.push_front(60)
    lst.push_back(70)
    print(f"{lst}\n")


def doubly_demo() -> None:
    """Exercise the doubly-linked list."""
    print("=== Doubly Linked List ===\n")
    lst = DoublyLinkedList[int]()
    print(lst)
    for value in (10, 20, 30, 40):
        lst.push_front(value)
    print(lst)

    lst.push_back(50)
    lst.push_back(60)
    print(lst)
    print(f"Tail value: {lst.tail_value().value}")

    lst.insert_after_value(50, 969)
    lst.insert_after_value(969, 1000)
    print(lst)

    outcome = lst.insert_at_index(42, 7)
    print(f"insert_at_index(42): {outcome.status}")

    removed = lst.delete_by_value(969)
    print(f"Removed {removed.value} from index {removed.index}: {lst}")

    lst.reverse()
    print(f"Reversed: {lst}")
    print(f"Backward: {list(reversed(lst))}")
    print(f"List length: {lst.length()}")
    lst.check_invariants()


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("-v", "--verbose", action="store_true", help="log no-op operations")
    args = parser.parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    singly_demo()
    circular_demo()
    doubly_demo()


if __name__ == "__main__":
    main()
