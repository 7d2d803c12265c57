"""Reading the initial contents of stack a from command-line arguments."""

from __future__ import annotations

from collections.abc import Iterable

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_DIGITS = frozenset("0123456789")


class ParseError(ValueError):
    """Raised when the arguments do not describe a valid stack."""


def _split_sign(text: str) -> tuple[int, str]:
    if text[:1] in ("-", "+"):
        return (-1 if text[0] == "-" else 1), text[1:]
    return 1, text


def is_number(text: str) -> bool:
    """Return True if text is an optional sign followed by one or more digits."""
    _, digits = _split_sign(text)
    return bool(digits) and all(ch in _DIGITS for ch in digits)


def is_blank(text: str | None) -> bool:
    """Return True if text is missing, empty, or only spaces and tabs."""
    return not text or all(ch in " \t" for ch in text)


def parse_int(text: str) -> int:
    """Convert text to an integer that fits in 32 signed bits.

    Raises ParseError if text is not a number or lies outside that range.
    """
    if not is_number(text):
        raise ParseError(f"not a number: {text!r}")
    sign, digits = _split_sign(text)
    value = sign * int(digits)
    if not INT_MIN <= value <= INT_MAX:
        raise ParseError(f"out of range: {text!r}")
    return value


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Turn arguments into the values of stack a, first value on top.

    Each argument may hold several numbers separated by spaces. An argument
    that is empty or blank, a token that is not a number in range, or a value
    that occurs twice raises ParseError.
    """
    values: list[int] = []
    seen: set[int] = set()
    for arg in args:
        if is_blank(arg):
            raise ParseError("empty argument")
        for token in arg.split(" "):
            if not token:
                continue
            value = parse_int(token)
            if value in seen:
                raise ParseError(f"duplicate value: {value}")
            seen.add(value)
            values.append(value)
    return values