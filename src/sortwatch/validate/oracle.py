"""
Oracle for sorting correctness.

Python's built-in `sorted()` is the ground truth: it is deterministic, never
mutates its input and orders any totally ordered values by `<`.

Public API (stable):
    oracle_sort(a) -> list
    equals_oracle(a, out) -> bool
"""

from __future__ import annotations

from typing import Any, Iterable, List, Sequence

ORACLE_NAME: str = "python_sorted_timsort"

__all__ = ["ORACLE_NAME", "oracle_sort", "equals_oracle"]


def oracle_sort(a: Iterable[Any]) -> List[Any]:
    """Return a new list with the elements of `a` in nondecreasing order."""
    return sorted(a)


def equals_oracle(a: Iterable[Any], out: Sequence[Any]) -> bool:
    """
    True iff `out` equals the oracle's answer for `a`, element by element.

    `out` may be any sequence (list, array.array, numpy array); it is compared
    as a list.
    """
    return list(out) == oracle_sort(a)
