# pushswap

A solver for the push_swap puzzle. You start with a list of distinct integers
on stack **a** and an empty stack **b**. The goal is to leave **a** sorted in
ascending order, with the smallest number on top, using only these operations:

| Operation | Effect |
|-----------|--------|
| `sa` / `sb` / `ss` | swap the top two elements of a, of b, or of both |
| `pa` / `pb` | move the top of b onto a / the top of a onto b |
| `ra` / `rb` / `rr` | rotate up: the top element goes to the bottom |
| `rra` / `rrb` / `rrr` | rotate down: the bottom element goes to the top |

The solver writes the operations it uses, one per line. Two numbers take one
swap, three take at most two operations, and larger inputs use a greedy
"cheapest move" strategy across both stacks.

## Installation

```
pip install .
```

## Command line

Give the numbers as separate arguments or as one space-separated string:

```
push_swap 3 2 1 0
push_swap "3 2 1 0"
```

The same entry point can be run as `python -m pushswap.cli`.

- Input that is already sorted produces no output and exits with status 0.
  The same goes for a run with no arguments or with a single empty argument.
- A single argument made only of spaces exits with status 1 and prints nothing.
- A word that is not an optional `+` or `-` followed by digits, a number
  outside the 32-bit signed range, or a repeated value makes the command
  print `Error` to standard error and exit with status 1.

## Library use

```python
from pushswap.sorting import solve
from pushswap.stacks import PushSwapStacks

operations = solve([3, 2, 1, 0])
print([op.value for op in operations])

stacks = PushSwapStacks([3, 2, 1, 0])
for op in operations:
    stacks.apply(op)
print(list(stacks.a))  # [0, 1, 2, 3]
```

- `pushswap.stacks.PushSwapStacks` holds stacks `a` and `b` (as deques, top
  first) and an `operations` list. It has one method per operation (`sa`,
  `pb`, `rrr`, ...) and `apply`, which takes an `Operation` or its mnemonic.
  Every operation is recorded, even one that changes nothing.
- `pushswap.stacks.Operation` is a string enum of the eleven mnemonics, and
  `pushswap.stacks.is_sorted` tells whether values never decrease.
- `pushswap.sorting` provides `solve`, `sort_stacks`, `tiny_sort` (for
  exactly three elements on `a`) and `turk_sort` (for more than three).
- `pushswap.parsing.parse_numbers` checks and converts command-line words the
  same way the command does and raises `InputError` (a `ValueError`) on bad
  input. `split_words` and `is_valid_number` are the helpers it relies on.

## What it does not do

The package only produces a sequence of operations. It has no command that
reads operations from standard input and checks whether they sort a given
list; to verify a sequence, replay it with `PushSwapStacks.apply` and test the
result with `is_sorted`.

## Running the tests

```
pip install .[test]
pytest
```