# pushswap

Sort a list of distinct integers with two stacks, **a** and **b**, using only
a small set of operations, and verify instruction lists that claim to sort.

## Operations

| Name  | Effect                                               |
|-------|------------------------------------------------------|
| `sa`  | swap the top two elements of a                       |
| `sb`  | swap the top two elements of b                       |
| `ss`  | `sa` and `sb` together                               |
| `pa`  | move the top of b onto a                             |
| `pb`  | move the top of a onto b                             |
| `ra`  | rotate a: the top element goes to the bottom         |
| `rb`  | rotate b                                             |
| `rr`  | `ra` and `rb` together                               |
| `rra` | reverse rotate a: the bottom element goes to the top |
| `rrb` | reverse rotate b                                     |
| `rrr` | `rra` and `rrb` together                             |

An operation on a stack with too few elements does nothing.

## Installing

```
pip install .
```

## Producing a solution

```
push-swap 3 2 5 1 4
push-swap "3 2 5 1 4"
```

The numbers are taken from all arguments together, split on spaces; the first
one becomes the top of stack a. One operation is printed per line. Nothing is
printed when the input is already sorted.

Stacks of two to five values are sorted with fixed short sequences. Larger
stacks are ranked and pushed to b in chunks whose width grows with the size of
the input, then moved back to a largest first, rotating b the shorter way.

Invalid input (a token that is not an integer, a value outside the 32-bit
signed range, a duplicate, or an empty or blank argument) prints `Error` to
standard error and exits with status 1. Running with no arguments is also an
error.

## Checking a solution

```
push-swap 3 2 5 1 4 | pushswap-checker 3 2 5 1 4
```

The checker reads operations from standard input, one per line, applies them,
and prints `OK` if stack a ends sorted with b empty, or `KO` otherwise.
Invalid arguments or an unknown operation (an empty line included) print
`Error` to standard error and exit with status 1. With no arguments the
checker prints nothing and exits with status 0.

## Using it from Python

```python
from pushswap.sorting import solve
from pushswap.checker import check
from pushswap.parser import parse_arguments

values = parse_arguments(["3 2 5", "1", "4"])
ops = solve(values)
assert check(values, [op.value for op in ops])
```

- `pushswap.stack`: `Operation` (a string enum of the eleven names) and
  `Stacks`, which holds a, b and the `history` of applied operations.
  `Stacks.from_values` builds it, `apply` and `run` carry out operations
  (strings are accepted by name), `is_solved` reports whether a is sorted and
  b empty. `is_sorted` checks a sequence for ascending order.
- `pushswap.parser`: `parse_arguments`, `parse_int`, `is_number`, `is_blank`;
  `ParseError` (a `ValueError`) is raised for input the commands reject.
- `pushswap.sorting`: `solve` returns the list of operations; the strategies
  `sort_two`, `sort_three`, `sort_four`, `sort_five`, `butterfly_sort` and
  `sort_stacks` work on a `Stacks` in place.
- `pushswap.checker`: `parse_instruction`, `read_instructions` and `check`.

## Running the tests

```
pip install .[test]
pytest
```