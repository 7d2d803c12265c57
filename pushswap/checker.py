"""Command that checks whether a list of operations sorts the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence

from pushswap.parser import ParseError, parse_arguments
from pushswap.stack import Operation, Stacks


def parse_instruction(line: str) -> Operation:
    """Turn one input line into an operation.

    Everything from the first newline on is ignored. Any other text that is
    not exactly an instruction name raises ValueError.
    """
    name = line.split("\n", 1)[0]
    try:
        return Operation(name)
    except ValueError:
        raise ValueError(f"unknown instruction: {name!r}") from None


def read_instructions(stream: Iterable[str]) -> Iterator[Operation]:
    """Yield the operations of a stream, one per line, in order."""
    for line in stream:
        yield parse_instruction(line)


def check(values: Sequence[int], lines: Iterable[str]) -> bool:
    """Apply the instructions in lines to values on a and report if they sort it.

    The result is True when a ends in ascending order and b is empty. An
    unknown instruction raises ValueError.
    """
    stacks = Stacks.from_values(values)
    stacks.run(read_instructions(lines))
    return stacks.is_solved()


def _error() -> int:
    sys.stderr.write("Error\n")
    return 1


def main(argv: Sequence[str] | None = None) -> int:
    """Read instructions from standard input and print OK or KO.

    With no arguments nothing is done. Bad arguments or an unknown
    instruction print Error to standard error and return 1.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_arguments(args)
    except ParseError:
        return _error()
    try:
        solved = check(values, sys.stdin)
    except ValueError:
        return _error()
    sys.stdout.write("OK\n" if solved else "KO\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())