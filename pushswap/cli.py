"""Command that prints the operations sorting the numbers given as arguments."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.parser import ParseError, parse_arguments
from pushswap.sorting import solve


def _error() -> int:
    sys.stderr.write("Error\n")
    return 1


def main(argv: Sequence[str] | None = None) -> int:
    """Print one operation per line; report Error and return 1 on bad input."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return _error()
    try:
        values = parse_arguments(args)
    except ParseError:
        return _error()
    for op in solve(values):
        sys.stdout.write(f"{op}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())