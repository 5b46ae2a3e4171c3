"""The sorting strategy: a fixed sequence for tiny stacks and the "turk" sort."""

from __future__ import annotations

from collections.abc import Iterable

from .stacks import Operation, PushSwapStacks, is_sorted


def _above_median(index: int, length: int) -> bool:
    return index <= length // 2


def _bring_to_top(stacks: PushSwapStacks, on_a: bool, value: int, above: bool) -> None:
    """Rotate one stack in a fixed direction until value is on top."""
    stack = stacks.a if on_a else stacks.b
    if on_a:
        step = stacks.ra if above else stacks.rra
    else:
        step = stacks.rb if above else stacks.rrb
    while stack[0] != value:
        step()


def _target_in_b(value: int, b: Iterable[int]) -> int:
    """The largest element of b below value, or the maximum of b."""
    b = list(b)
    smaller = [x for x in b if x < value]
    return max(smaller) if smaller else max(b)


def _target_in_a(value: int, a: Iterable[int]) -> int:
    """The smallest element of a above value, or the minimum of a."""
    a = list(a)
    larger = [x for x in a if x > value]
    return min(larger) if larger else min(a)


def _push_cheapest_to_b(stacks: PushSwapStacks) -> None:
    a, b = stacks.a, stacks.b
    len_a, len_b = len(a), len(b)
    b_index = {value: i for i, value in enumerate(b)}
    targets = {value: _target_in_b(value, b) for value in a}

    def cost(item: tuple[int, int]) -> int:
        i, value = item
        j = b_index[targets[value]]
        own = i if _above_median(i, len_a) else len_a - i
        other = j if _above_median(j, len_b) else len_b - j
        return own + other

    index, cheapest = min(enumerate(a), key=cost)
    target = targets[cheapest]
    cheapest_above = _above_median(index, len_a)
    target_above = _above_median(b_index[target], len_b)

    if cheapest_above and target_above:
        while b[0] != target and a[0] != cheapest:
            stacks.rr()
    elif not cheapest_above and not target_above:
        while b[0] != target and a[0] != cheapest:
            stacks.rrr()
    cheapest_above = _above_median(a.index(cheapest), len(a))
    target_above = _above_median(b.index(target), len(b))

    _bring_to_top(stacks, True, cheapest, cheapest_above)
    _bring_to_top(stacks, False, target, target_above)
    stacks.pb()


def _push_back_to_a(stacks: PushSwapStacks) -> None:
    target = _target_in_a(stacks.b[0], stacks.a)
    above = _above_median(stacks.a.index(target), len(stacks.a))
    _bring_to_top(stacks, True, target, above)
    stacks.pa()


def _min_on_top(stacks: PushSwapStacks) -> None:
    smallest = min(stacks.a)
    above = _above_median(stacks.a.index(smallest), len(stacks.a))
    _bring_to_top(stacks, True, smallest, above)


def tiny_sort(stacks: PushSwapStacks) -> None:
    """Sort a stack a of three elements with at most two operations."""
    a = stacks.a
    largest = max(a)
    if a[0] == largest:
        stacks.ra()
    elif a[1] == largest:
        stacks.rra()
    if a[0] > a[1]:
        stacks.sa()


def turk_sort(stacks: PushSwapStacks) -> None:
    """Sort stack a of more than three elements using stack b."""
    remaining = len(stacks.a)

    def keep_pushing() -> bool:
        nonlocal remaining
        more = remaining > 3
        remaining -= 1
        return more and not is_sorted(stacks.a)

    if keep_pushing():
        stacks.pb()
    if keep_pushing():
        stacks.pb()
    while keep_pushing():
        _push_cheapest_to_b(stacks)
    tiny_sort(stacks)
    while stacks.b:
        _push_back_to_a(stacks)
    _min_on_top(stacks)


def sort_stacks(stacks: PushSwapStacks) -> None:
    """Sort stack a, choosing the strategy by its size."""
    if is_sorted(stacks.a):
        return
    size = len(stacks.a)
    if size == 2:
        stacks.sa()
    elif size == 3:
        tiny_sort(stacks)
    else:
        turk_sort(stacks)


def solve(numbers: Iterable[int]) -> list[Operation]:
    """Return the operations that sort the given numbers."""
    stacks = PushSwapStacks(numbers)
    sort_stacks(stacks)
    return stacks.operations