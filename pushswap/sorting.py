"""Strategies that produce a sequence of operations sorting stack a."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from pushswap.stack import Operation, Stacks, is_sorted


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def chunk_size(size: int) -> int:
    """Return how far ahead of the next rank a value may be pushed to b."""
    if size < 50:
        return 3 + _trunc_div(size - 6, 7)
    if size < 100:
        return 10 + _trunc_div(size - 50, 8)
    if size < 350:
        return 18 + _trunc_div(size - 100, 9)
    if size <= 500:
        return 27 + _trunc_div(size - 350, 15)
    return 37 + _trunc_div(size - 500, 20)


def index_values(values: Iterable[int]) -> list[int]:
    """Return the rank of each value, in the order given, smallest value ranked 0."""
    items = list(values)
    order = sorted(range(len(items)), key=lambda pos: items[pos])
    ranks = [0] * len(items)
    for rank, pos in enumerate(order):
        ranks[pos] = rank
    return ranks


def _rank_map(stacks: Stacks) -> dict[int, int]:
    values = [*stacks.a, *stacks.b]
    return dict(zip(values, index_values(values)))


def find_min_pos(values: Sequence[int]) -> int:
    """Return the position of the first smallest value, counted from the top.

    Raises ValueError for an empty sequence.
    """
    if not values:
        raise ValueError("no values")
    return min(range(len(values)), key=lambda pos: values[pos])


def _move_min_to_top(stacks: Stacks, pos: int) -> None:
    size = len(stacks.a)
    if pos == 1:
        stacks.apply(Operation.RA)
    elif pos == 2:
        stacks.run([Operation.RA, Operation.RA])
    elif pos == 3 and size == 5:
        stacks.run([Operation.RRA, Operation.RRA])
    elif pos == 4 or (pos == 3 and size == 4):
        stacks.apply(Operation.RRA)


def push_min_to_b(stacks: Stacks) -> None:
    """Bring the smallest value of a to its top and push it onto b."""
    pos = find_min_pos(stacks.a)
    if pos != 0:
        _move_min_to_top(stacks, pos)
    stacks.apply(Operation.PB)


def sort_two(stacks: Stacks) -> None:
    """Sort a stack a of two values."""
    if stacks.a[0] > stacks.a[1]:
        stacks.apply(Operation.SA)


def sort_three(stacks: Stacks) -> None:
    """Sort a by its top two values and its bottom value.

    Raises ValueError if a holds fewer than three values.
    """
    a = stacks.a
    if len(a) < 3:
        raise ValueError("sort_three needs at least three values")
    first, second, third = a[0], a[1], a[-1]
    if is_sorted(a):
        return
    if first > second and second < third and first < third:
        stacks.apply(Operation.SA)
    elif first > second and second > third:
        stacks.run([Operation.SA, Operation.RRA])
    elif first > second and second < third and first > third:
        stacks.apply(Operation.RA)
    elif first < second and second > third and first < third:
        stacks.run([Operation.SA, Operation.RA])
    elif first < second and second > third and first > third:
        stacks.apply(Operation.RRA)


def sort_four(stacks: Stacks) -> None:
    """Sort a stack a of four values."""
    push_min_to_b(stacks)
    sort_three(stacks)
    stacks.apply(Operation.PA)


def sort_five(stacks: Stacks) -> None:
    """Sort a stack a of five values."""
    push_min_to_b(stacks)
    push_min_to_b(stacks)
    sort_three(stacks)
    stacks.run([Operation.PA, Operation.PA])
    if stacks.a[0] > stacks.a[1]:
        stacks.apply(Operation.SA)


def push_chunks(stacks: Stacks, chunk: int) -> None:
    """Move every value of a to b, keeping low ranks toward the bottom of b."""
    ranks = _rank_map(stacks)
    limit = 0
    while stacks.a:
        rank = ranks[stacks.a[0]]
        if rank <= limit:
            stacks.run([Operation.PB, Operation.RB])
            limit += 1
        elif rank <= limit + chunk:
            stacks.apply(Operation.PB)
            limit += 1
        else:
            stacks.apply(Operation.RA)


def pop_back(stacks: Stacks) -> None:
    """Move every value of b back to a, largest first, by the shorter rotation."""
    while stacks.b:
        size = len(stacks.b)
        pos = max(range(size), key=lambda i: (stacks.b[i], -i))
        if pos <= size // 2:
            stacks.run([Operation.RB] * pos)
        else:
            stacks.run([Operation.RRB] * (size - pos))
        stacks.apply(Operation.PA)


def butterfly_sort(stacks: Stacks) -> None:
    """Sort a of any size through b in chunks."""
    push_chunks(stacks, chunk_size(len(stacks.a)))
    pop_back(stacks)


def sort_stacks(stacks: Stacks) -> None:
    """Sort a with the strategy that suits its size."""
    size = len(stacks.a)
    if size == 2:
        sort_two(stacks)
    elif size == 3:
        sort_three(stacks)
    elif size == 4:
        sort_four(stacks)
    elif size == 5:
        sort_five(stacks)
    else:
        butterfly_sort(stacks)


def solve(values: Sequence[int]) -> list[Operation]:
    """Return the operations that sort values, first value on top of a."""
    stacks = Stacks.from_values(values)
    if is_sorted(stacks.a):
        return []
    sort_stacks(stacks)
    return stacks.history