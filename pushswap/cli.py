"""Command line entry point: print the operations that sort the arguments."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .parsing import InputError, parse_numbers, split_words
from .sorting import solve


def main(argv: Sequence[str] | None = None) -> int:
    """Run the program on argv (without the program name); return the exit code."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or (len(args) == 1 and not args[0]):
        return 0
    if len(args) == 1:
        args = split_words(args[0], " ")
        if not args:
            return 1
    try:
        numbers = parse_numbers(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    for operation in solve(numbers):
        sys.stdout.write(f"{operation}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())