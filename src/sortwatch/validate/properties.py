"""
Property helpers for validating in-place sorts.

These checks work for any orderable values and any indexable sequence, and
are used both by the tests and by the experiment runner's sanity pass.

Public API (stable):
    is_nondecreasing(xs) -> bool
    first_nondecreasing_violation_index(xs) -> int | None
    is_permutation(a, b) -> bool
    permutation_counter_diff(a, b) -> dict
    assert_no_mutation(before, after) -> None
    assert_sorted_permutation(before, after) -> None

Stability is not checked: equal values are indistinguishable here. A stability
test would tag items with tie-breaker ids and compare the order of equal keys.
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Dict, Optional, Sequence

__all__ = [
    "is_nondecreasing",
    "first_nondecreasing_violation_index",
    "is_permutation",
    "permutation_counter_diff",
    "assert_no_mutation",
    "assert_sorted_permutation",
]


def is_nondecreasing(xs: Sequence[Any]) -> bool:
    """Return True iff xs[i] <= xs[i+1] for all i."""
    return first_nondecreasing_violation_index(xs) is None


def first_nondecreasing_violation_index(xs: Sequence[Any]) -> Optional[int]:
    """
    Return the first index i where xs[i] > xs[i+1], or None if nondecreasing.

        i = first_nondecreasing_violation_index(out)
        assert i is None, f"not nondecreasing at i={i}: {out[i]} > {out[i+1]}"
    """
    for i in range(len(xs) - 1):
        if xs[i] > xs[i + 1]:
            return i
    return None


def is_permutation(a: Sequence[Any], b: Sequence[Any]) -> bool:
    """Return True iff `a` and `b` hold exactly the same multiset of values."""
    if len(a) != len(b):
        return False
    return Counter(a) == Counter(b)


def permutation_counter_diff(a: Sequence[Any], b: Sequence[Any]) -> Dict[Any, int]:
    """
    Return value -> (count in a) - (count in b), omitting zero differences.

    Empty dict means `a` and `b` have identical multiplicities.
    """
    diff = Counter(a)
    diff.subtract(Counter(b))
    return {k: d for k, d in diff.items() if d != 0}


def assert_no_mutation(before: Sequence[Any], after: Sequence[Any]) -> None:
    """
    Assert that two sequences are element-wise equal; used to check that a
    copying adapter left its input alone.
    """
    if len(before) != len(after):
        raise AssertionError(
            f"Input mutated: length changed from {len(before)} to {len(after)}"
        )
    for i, (x, y) in enumerate(zip(before, after)):
        if x != y:
            raise AssertionError(
                f"Input mutated at index {i}: before={x}, after={y}"
            )


def assert_sorted_permutation(before: Sequence[Any], after: Sequence[Any]) -> None:
    """Assert `after` is `before` reordered into nondecreasing order."""
    diff = permutation_counter_diff(before, after)
    if diff:
        raise AssertionError(f"Not a permutation of the input: {diff}")
    i = first_nondecreasing_violation_index(after)
    if i is not None:
        raise AssertionError(
            f"Not nondecreasing at i={i}: {after[i]} > {after[i + 1]}"
        )
