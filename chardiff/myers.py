"""Shortest edit script between two character sequences (Myers' O(ND) diff)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from itertools import takewhile
from typing import Optional, Sequence, Tuple

Snake = Tuple[int, int, int, int]


class OpKind(Enum):
    """Kind of a single step in an edit script."""

    MATCH = "match"
    INSERTION = "insertion"
    DELETION = "deletion"


@dataclass(frozen=True)
class DiffOperation:
    """One step of an edit script: a kind and the character it concerns."""

    kind: OpKind
    char: str


def common_prefix_len(a: Sequence[str], b: Sequence[str]) -> int:
    """Return the length of the common prefix of ``a`` and ``b``."""
    return sum(1 for _ in takewhile(lambda pair: pair[0] == pair[1], zip(a, b)))


def common_suffix_len(a: Sequence[str], b: Sequence[str]) -> int:
    """Return the length of the common suffix of ``a`` and ``b``."""
    return sum(
        1
        for _ in takewhile(
            lambda pair: pair[0] == pair[1], zip(reversed(a), reversed(b))
        )
    )


def _max_d(n: int, m: int) -> int:
    return (n + m + 1) // 2


def find_middle_snake(a: Sequence[str], b: Sequence[str]) -> Optional[Snake]:
    """Find the middle snake of an optimal path.

    Returns ``(x_start, y_start, x_end, y_end)`` or ``None`` when no snake
    is found within the explored edit distances.
    """
    n, m = len(a), len(b)
    if n == 0 and m == 0:
        return None

    delta = n - m
    delta_odd = (delta & 1) == 1
    forward: dict[int, int] = {}
    reverse: dict[int, int] = {}

    for d in range(_max_d(n, m)):
        for k in range(-d, d + 1, 2):
            if k == -d or (k != d and forward.get(k - 1, 0) < forward.get(k + 1, 0)):
                x = forward.get(k + 1, 0)
            else:
                x = forward.get(k - 1, 0) + 1
            y = x - k
            x0, y0 = x, y
            if x < n and 0 <= y < m:
                run = common_prefix_len(a[x:], b[y:])
                x += run
                y += run
            forward[k] = x

            if (
                delta_odd
                and delta - (d - 1) <= k <= delta + (d - 1)
                and forward[k] + reverse.get(delta - k, 0) >= n
            ):
                return x0, y0, x, y

        for k in range(-d, d + 1, 2):
            if k == -d or (k != d and reverse.get(k - 1, 0) < reverse.get(k + 1, 0)):
                x = reverse.get(k + 1, 0)
            else:
                x = reverse.get(k - 1, 0) + 1
            y = x - k
            x_end, y_end = n - x, m - y
            if x < n and 0 <= y < m:
                run = common_suffix_len(a[: n - x], b[: m - y])
                x += run
                y += run
            reverse[k] = x

            if not delta_odd and reverse[k] + forward.get(delta - k, 0) >= n:
                return n - x, m - y, x_end, y_end

    return None


def _emit(kind: OpKind, chars: Sequence[str], path: list[DiffOperation]) -> None:
    path.extend(DiffOperation(kind, c) for c in chars)


def _conquer(a: Sequence[str], b: Sequence[str], path: list[DiffOperation]) -> int:
    prefix = common_prefix_len(a, b)
    _emit(OpKind.MATCH, a[:prefix], path)
    a, b = a[prefix:], b[prefix:]
    if not a and not b:
        return 0

    suffix = common_suffix_len(a, b)
    tail = [DiffOperation(OpKind.MATCH, c) for c in a[len(a) - suffix :]]
    a, b = a[: len(a) - suffix], b[: len(b) - suffix]

    if not a:
        _emit(OpKind.INSERTION, b, path)
        path.extend(tail)
        return len(b)
    if not b:
        _emit(OpKind.DELETION, a, path)
        path.extend(tail)
        return len(a)

    snake = find_middle_snake(a, b)
    if snake is not None:
        x_start, y_start, x_end, y_end = snake
        distance = _conquer(a[:x_start], b[:y_start], path)
        _emit(OpKind.MATCH, a[x_start:x_end], path)
        distance += _conquer(a[x_end:], b[y_end:], path)
    else:
        _emit(OpKind.DELETION, a, path)
        _emit(OpKind.INSERTION, b, path)
        distance = len(a) + len(b)

    path.extend(tail)
    return distance


def myers_diff(
    a: Sequence[str], b: Sequence[str]
) -> tuple[int, list[DiffOperation]]:
    """Return ``(edit_distance, operations)`` turning ``a`` into ``b``."""
    if not a and not b:
        return 0, []
    if not a:
        return len(b), [DiffOperation(OpKind.INSERTION, c) for c in b]
    if not b:
        return len(a), [DiffOperation(OpKind.DELETION, c) for c in a]

    path: list[DiffOperation] = []
    distance = _conquer(a, b, path)
    return distance, path