import itertools
import random

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from pushswap.sorting import solve, sort_stacks, tiny_sort, turk_sort
from pushswap.stacks import Operation, PushSwapStacks, is_sorted


def replay(numbers, operations):
    stacks = PushSwapStacks(numbers)
    for operation in operations:
        stacks.apply(operation)
    return stacks


@pytest.mark.parametrize("perm", list(itertools.permutations([7, -2, 40])))
def test_tiny_sort_sorts_every_permutation_of_three(perm):
    stacks = PushSwapStacks(perm)
    tiny_sort(stacks)
    assert list(stacks.a) == sorted(perm)
    assert len(stacks.operations) <= 2


def test_tiny_sort_worked_example():
    stacks = PushSwapStacks([1, 3, 2])
    tiny_sort(stacks)
    assert stacks.operations == [Operation.RRA, Operation.SA]


def test_two_elements_use_a_single_swap():
    assert solve([2, 1]) == [Operation.SA]


@pytest.mark.parametrize("numbers", [[], [5], [1, 2], [-3, 0, 9], list(range(20))])
def test_sorted_input_needs_no_operations(numbers):
    assert solve(numbers) == []


@pytest.mark.parametrize("perm", list(itertools.permutations(range(5))))
def test_every_permutation_of_five_is_sorted(perm):
    stacks = replay(perm, solve(perm))
    assert list(stacks.a) == sorted(perm)
    assert not stacks.b


def test_turk_sort_hundred_numbers():
    rng = random.Random(42)
    numbers = rng.sample(range(-1000, 1000), 100)
    stacks = PushSwapStacks(numbers)
    turk_sort(stacks)
    assert list(stacks.a) == sorted(numbers)
    assert not stacks.b


def test_sort_stacks_records_replayable_operations():
    numbers = [9, -4, 17, 3, 0, 12, -8]
    stacks = PushSwapStacks(numbers)
    sort_stacks(stacks)
    replayed = replay(numbers, stacks.operations)
    assert list(replayed.a) == list(stacks.a)
    assert is_sorted(replayed.a)


def test_solve_is_deterministic():
    numbers = [5, 1, 4, 2, 3, 0]
    assert solve(numbers) == solve(list(numbers))


@settings(max_examples=60, deadline=None)
@given(st.lists(st.integers(-(2**31), 2**31 - 1), unique=True, max_size=40))
def test_solve_always_sorts(numbers):
    stacks = replay(numbers, solve(numbers))
    assert list(stacks.a) == sorted(numbers)
    assert len(stacks.b) == 0