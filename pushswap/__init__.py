"""Solve the push_swap two-stack sorting puzzle: stacks, parsing, sorting and CLI."""

__version__ = "1.0.0"
__all__ = ["stacks", "parsing", "sorting", "cli"]