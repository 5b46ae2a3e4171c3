"""Argument splitting and validation of the integers to be sorted."""

from __future__ import annotations

import re
from collections.abc import Iterable

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_NUMBER = re.compile(r"[+-]?[0-9]+")


class InputError(ValueError):
    """Raised when the arguments are not a list of distinct 32-bit integers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def split_words(text: str, sep: str = " ") -> list[str]:
    """Split text on a single separator character, dropping empty words."""
    return [word for word in text.split(sep) if word]


def is_valid_number(arg: str) -> bool:
    """Return True if arg is an optional sign followed by ASCII digits only."""
    return _NUMBER.fullmatch(arg) is not None


def parse_numbers(args: Iterable[str]) -> list[int]:
    """Turn arguments into integers, rejecting bad syntax, overflow and repeats."""
    numbers: list[int] = []
    seen: set[int] = set()
    for arg in args:
        if not is_valid_number(arg):
            raise InputError()
        value = int(arg)
        if not INT_MIN <= value <= INT_MAX:
            raise InputError()
        if value in seen:
            raise InputError()
        seen.add(value)
        numbers.append(value)
    return numbers