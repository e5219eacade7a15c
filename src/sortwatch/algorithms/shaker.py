"""
Cocktail shaker sort.

Alternates a left-to-right pass, which carries the maximum of the window to
its right edge, with a right-to-left pass, which carries the minimum to its
left edge. After each pass the matching boundary moves inward; the sort ends
when the boundaries meet, or after any pass that made no swap.

Notifies after every swap in either direction with the whole sorted range.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sortwatch.algorithms._common import check_config, resolve_observer
from sortwatch.handle import resolve_range, swap
from sortwatch.observe.observers import Observer

__all__ = ["shaker_sort", "sort"]


def shaker_sort(
    seq: Any,
    observer: Optional[Observer] = None,
    *,
    first: int = 0,
    last: Optional[int] = None,
) -> None:
    """Sort seq[first:last] in place into nondecreasing order."""
    span = resolve_range(seq, first, last)
    notify = resolve_observer(observer)

    left, right = span.first, span.last
    while right - left > 1:
        swapped = False
        for j in range(left, right - 1):
            if seq[j] > seq[j + 1]:
                swap(seq, j, j + 1)
                swapped = True
                notify(seq, span)
        right -= 1
        if not swapped:
            break

        swapped = False
        for j in range(right - 1, left, -1):
            if seq[j] < seq[j - 1]:
                swap(seq, j, j - 1)
                swapped = True
                notify(seq, span)
        left += 1
        if not swapped:
            break


def sort(a: List[Any], *, config: Optional[Dict[str, Any]] = None) -> List[Any]:
    """Runner adapter: return a sorted copy of `a` (input is not mutated)."""
    check_config(config)
    out = list(a)
    shaker_sort(out)
    return out
