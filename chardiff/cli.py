"""Command line front end: show a colourised character diff of two strings."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Optional, Sequence

from chardiff.myers import DiffOperation, OpKind, myers_diff

RESET = "\x1b[m"
BOLD = "\x1b[1m"
UNDERLINE = "\x1b[4m"
FG_RED = "\x1b[38;5;1m"
FG_GREEN = "\x1b[38;5;2m"


def _render_one(operation: DiffOperation) -> str:
    if operation.kind is OpKind.MATCH:
        return f"{RESET}{operation.char}"
    if operation.kind is OpKind.INSERTION:
        return f"{BOLD}{UNDERLINE}{FG_GREEN}{operation.char}"
    return f"{BOLD}{FG_RED}({operation.char})"


def render(operations: Iterable[DiffOperation]) -> str:
    """Render an edit script as a string with terminal styling.

    Matches are shown plain, insertions bold, underlined and green,
    deletions bold, red and wrapped in parentheses.
    """
    return "".join(_render_one(op) for op in operations)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chardiff",
        description="Show the shortest character edit script between two strings.",
    )
    parser.add_argument("-b", "--before", required=True, help="original string")
    parser.add_argument("-a", "--after", required=True, help="modified string")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse arguments, compute the diff and print it to standard output."""
    args = _build_parser().parse_args(argv)
    print(f"{args.before} => {args.after}")
    distance, operations = myers_diff(list(args.before), list(args.after))
    print(f"Found {distance} modifications:")
    sys.stdout.write(render(operations))
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())