# chardiff

chardiff shows how one string differs from another, one character at a time.
It finds the shortest edit script with the Myers O(ND) algorithm. It uses the
linear-space middle-snake refinement of that algorithm.

## Installation

```
pip install .
```

The package needs nothing outside the Python standard library. It supports
Python 3.10 and later.

## Command line

```
chardiff --before abcabba --after cbabac
```

You can also use the short forms `-b` and `-a`. Both options are required.

The command prints three things:

1. The line `before => after`.
2. The line `Found N modifications:`, where N is the number of insertions plus
   the number of deletions.
3. The merged text, styled with ANSI escape sequences:
   - matched characters in the normal style,
   - inserted characters in bold, underlined green,
   - deleted characters in bold red, inside parentheses.

The command does not print a newline after the merged text.

## Library

```python
from chardiff.myers import myers_diff, OpKind

distance, ops = myers_diff("abcabba", "cbabac")
print(distance)  # 5
for op in ops:
    print(op.kind, op.char)
```

`myers_diff(a, b)` takes two sequences of characters, such as strings or lists
of one-character strings. It returns a tuple `(distance, operations)`:

- `distance` is the smallest number of insertions and deletions that turns `a`
  into `b`.
- `operations` is a list of `DiffOperation` values, in order.

Each `DiffOperation` is a frozen dataclass with two fields:

- `kind`: one of `OpKind.MATCH`, `OpKind.INSERTION` or `OpKind.DELETION`.
- `char`: the character that the operation applies to.

`chardiff.myers` also provides these helpers:

- `common_prefix_len(a, b)` returns the length of the prefix that `a` and `b`
  share.
- `common_suffix_len(a, b)` returns the length of the suffix that `a` and `b`
  share.
- `find_middle_snake(a, b)` returns the middle snake of an optimal path as
  `(x_start, y_start, x_end, y_end)`. It returns `None` if both inputs are
  empty, or if it finds no snake.

`chardiff.cli.render(operations)` returns the styled text that the command
prints for a list of operations. `chardiff.cli.main(argv=None)` runs the
command. It takes an optional list of arguments and returns 0.

## What it does not do

- chardiff compares two strings given directly. It does not read files.
- It diffs characters, not lines or words.
- It only styles output with ANSI escape sequences. It has no plain-text or
  unified-diff output format.

## Running the tests

```
pip install .[test]
pytest
```