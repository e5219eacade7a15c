"""
Bubble sort.

Each pass walks the unsorted prefix and swaps adjacent out-of-order pairs,
which carries the largest remaining value to the right boundary; the boundary
then shrinks by one. A pass with no swaps ends the sort early, so sorted
input costs one pass and issues no notifications.

Notifies after every swap with the whole sorted range.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sortwatch.algorithms._common import check_config, resolve_observer
from sortwatch.handle import resolve_range, swap
from sortwatch.observe.observers import Observer

__all__ = ["bubble_sort", "sort"]


def bubble_sort(
    seq: Any,
    observer: Optional[Observer] = None,
    *,
    first: int = 0,
    last: Optional[int] = None,
) -> None:
    """Sort seq[first:last] in place into nondecreasing order."""
    span = resolve_range(seq, first, last)
    notify = resolve_observer(observer)

    end = span.last
    swapped = True
    while swapped and end - span.first > 1:
        swapped = False
        for j in range(span.first, end - 1):
            if seq[j] > seq[j + 1]:
                swap(seq, j, j + 1)
                swapped = True
                notify(seq, span)
        end -= 1


def sort(a: List[Any], *, config: Optional[Dict[str, Any]] = None) -> List[Any]:
    """Runner adapter: return a sorted copy of `a` (input is not mutated)."""
    check_config(config)
    out = list(a)
    bubble_sort(out)
    return out
