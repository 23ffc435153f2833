"""Randomized consistency tests mirroring list operations against a plain list."""

import random

import pytest

from linkedlists import DoublyLinkedList


@pytest.mark.parametrize("seed", range(5))
def test_random_operations_match_model(seed: int) -> None:
    """Test random mutations keep both directions in sync with a reference list."""
    rng = random.Random(seed)
    lst = DoublyLinkedList[int]()
    model: list[int] = []

    for _ in range(400):
        value = rng.randrange(20)
        op = rng.choice(
            ["push_front", "push_back", "insert_after", "insert_at", "delete_front",
             "delete_back", "delete_value", "reverse"]
        )

        if op == "push_front":
            lst.push_front(value)
            model.insert(0, value)
        elif op == "push_back":
            lst.push_back(value)
            model.append(value)
        elif op == "insert_after":
            target = rng.randrange(20)
            outcome = lst.insert_after_value(target, value)
            if target in model:
                assert outcome
                model.insert(model.index(target) + 1, value)
            else:
                assert not outcome
        elif op == "insert_at":
            index = rng.randrange(len(model) + 3)
            outcome = lst.insert_at_index(index, value)
            if index <= len(model):
                assert outcome.index == index
                model.insert(index, value)
            else:
                assert outcome.status == "out_of_range"
        elif op == "delete_front":
            outcome = lst.delete_front()
            if model:
                assert outcome.value == model.pop(0)
            else:
                assert outcome.status == "empty"
        elif op == "delete_back":
            outcome = lst.delete_back()
            if model:
                assert outcome.value == model.pop()
            else:
                assert outcome.status == "empty"
        elif op == "delete_value":
            outcome = lst.delete_by_value(value)
            if value in model:
                assert outcome.index == model.index(value)
                model.remove(value)
            else:
                assert not outcome
        else:
            lst.reverse()
            model.reverse()

        lst.check_invariants()
        assert list(lst) == model
        assert list(reversed(lst)) == model[::-1]
        assert lst.length() == len(lst) == len(model)


def test_stress_rapid_insertions_and_removals() -> None:
    """Test rapid insertions and removals keep the arena compact."""
    lst = DoublyLinkedList[int]()

    for i in range(30):
        if i % 2 == 0:
            lst.push_back(i)
        else:
            lst.push_front(i)
    assert len(lst) == 30

    for i in range(0, 30, 3):
        assert lst.delete_by_value(i)
    assert len(lst) == 20

    # Released slots are refilled before the arena grows
    for i in range(30, 40):
        lst.push_back(i)
    assert len(lst._nodes) == 30

    for _ in range(15):
        assert lst.delete_front()
    assert len(lst) == 15
    lst.check_invariants()

    while lst:
        assert lst.delete_back()
    assert lst.is_empty()
    lst.check_invariants()
