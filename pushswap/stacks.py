"""The two push_swap stacks and the eleven operations that act on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from enum import Enum


class Operation(str, Enum):
    """An instruction of the push_swap language, valued by its mnemonic."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


def is_sorted(values: Iterable[int]) -> bool:
    """Return True if the values never decrease from first to last."""
    iterator = iter(values)
    previous = next(iterator, None)
    for value in iterator:
        if previous > value:
            return False
        previous = value
    return True


def _swap(stack: deque[int]) -> None:
    if len(stack) >= 2:
        stack[0], stack[1] = stack[1], stack[0]


def _push(dest: deque[int], src: deque[int]) -> None:
    if src:
        dest.appendleft(src.popleft())


def _rotate(stack: deque[int]) -> None:
    if len(stack) >= 2:
        stack.rotate(-1)


def _reverse_rotate(stack: deque[int]) -> None:
    if len(stack) >= 2:
        stack.rotate(1)


class PushSwapStacks:
    """Stacks ``a`` and ``b`` (top first) plus the log of operations applied.

    Every operation is recorded, even when it leaves the stacks unchanged,
    just as every instruction is emitted whether or not it has an effect.
    """

    def __init__(self, numbers: Iterable[int]) -> None:
        self.a: deque[int] = deque(numbers)
        self.b: deque[int] = deque()
        self.operations: list[Operation] = []

    def __repr__(self) -> str:
        return f"PushSwapStacks(a={list(self.a)!r}, b={list(self.b)!r})"

    def apply(self, operation: Operation | str) -> None:
        """Apply one operation given as an Operation or its mnemonic."""
        op = Operation(operation)
        getattr(self, op.value)()

    def sa(self) -> None:
        """Swap the two top elements of a."""
        _swap(self.a)
        self.operations.append(Operation.SA)

    def sb(self) -> None:
        """Swap the two top elements of b."""
        _swap(self.b)
        self.operations.append(Operation.SB)

    def ss(self) -> None:
        """Swap the tops of both stacks."""
        _swap(self.a)
        _swap(self.b)
        self.operations.append(Operation.SS)

    def pa(self) -> None:
        """Move the top of b onto a."""
        _push(self.a, self.b)
        self.operations.append(Operation.PA)

    def pb(self) -> None:
        """Move the top of a onto b."""
        _push(self.b, self.a)
        self.operations.append(Operation.PB)

    def ra(self) -> None:
        """Rotate a: its top element becomes the bottom."""
        _rotate(self.a)
        self.operations.append(Operation.RA)

    def rb(self) -> None:
        """Rotate b: its top element becomes the bottom."""
        _rotate(self.b)
        self.operations.append(Operation.RB)

    def rr(self) -> None:
        """Rotate both stacks."""
        _rotate(self.a)
        _rotate(self.b)
        self.operations.append(Operation.RR)

    def rra(self) -> None:
        """Reverse-rotate a: its bottom element becomes the top."""
        _reverse_rotate(self.a)
        self.operations.append(Operation.RRA)

    def rrb(self) -> None:
        """Reverse-rotate b: its bottom element becomes the top."""
        _reverse_rotate(self.b)
        self.operations.append(Operation.RRB)

    def rrr(self) -> None:
        """Reverse-rotate both stacks."""
        _reverse_rotate(self.a)
        _reverse_rotate(self.b)
        self.operations.append(Operation.RRR)