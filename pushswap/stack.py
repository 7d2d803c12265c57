"""The two stacks of the puzzle and the eleven operations on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum


class Operation(str, Enum):
    """An instruction that rearranges the stacks."""

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
    items = list(values)
    return all(left <= right for left, right in zip(items, items[1:]))


def _swap(stack: deque[int]) -> None:
    if len(stack) < 2:
        return
    first = stack.popleft()
    second = stack.popleft()
    stack.appendleft(first)
    stack.appendleft(second)


def _push(source: deque[int], dest: deque[int]) -> None:
    if source:
        dest.appendleft(source.popleft())


def _rotate(stack: deque[int]) -> None:
    if len(stack) >= 2:
        stack.rotate(-1)


def _reverse_rotate(stack: deque[int]) -> None:
    if len(stack) >= 2:
        stack.rotate(1)


@dataclass
class Stacks:
    """Stacks a and b, each stored top first, with the operations applied so far."""

    a: deque[int] = field(default_factory=deque)
    b: deque[int] = field(default_factory=deque)
    history: list[Operation] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.a = deque(self.a)
        self.b = deque(self.b)
        self.history = list(self.history)

    def apply(self, op: Operation | str) -> None:
        """Carry out one operation and record it.

        A string is looked up by its instruction name; an unknown name
        raises ValueError.
        """
        op = Operation(op)
        a, b = self.a, self.b
        if op is Operation.SA:
            _swap(a)
        elif op is Operation.SB:
            _swap(b)
        elif op is Operation.SS:
            _swap(a)
            _swap(b)
        elif op is Operation.PA:
            _push(b, a)
        elif op is Operation.PB:
            _push(a, b)
        elif op is Operation.RA:
            _rotate(a)
        elif op is Operation.RB:
            _rotate(b)
        elif op is Operation.RR:
            _rotate(a)
            _rotate(b)
        elif op is Operation.RRA:
            _reverse_rotate(a)
        elif op is Operation.RRB:
            _reverse_rotate(b)
        else:
            _reverse_rotate(a)
            _reverse_rotate(b)
        self.history.append(op)

    def run(self, ops: Iterable[Operation | str]) -> None:
        """Carry out operations in order."""
        for op in ops:
            self.apply(op)

    def is_solved(self) -> bool:
        """Return True if a is in ascending order from the top and b is empty."""
        return not self.b and is_sorted(self.a)

    @classmethod
    def from_values(cls, values: Sequence[int]) -> Stacks:
        """Build stacks with the values on a, first value on top."""
        return cls(a=deque(values))