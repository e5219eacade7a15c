"""
Quicksort with Lomuto partitioning.

The pivot is always the last element of the current sub-range. Elements
smaller than the pivot are swapped down to a moving boundary; finally the
pivot is swapped onto the boundary, which is its resting place, and both sides
are sorted independently.

The sub-range being partitioned shrinks, but every notification reports the
range of the top-level call. Both ranges are passed explicitly through every
level (`span` is the work, `report` is what observers see).

Stack depth: the fixed last-element pivot makes sorted and reverse-sorted input
quadratic, and naive recursion on both sides would then need one Python frame
per element. `_quicksort` recurses only into the smaller side and loops on the
larger one, which bounds the depth by log2(n) without changing the pivot
policy, the partitions produced, or the final result. Only the order in which
the two sides are visited differs from plain left-then-right recursion.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sortwatch.algorithms._common import check_config, resolve_observer
from sortwatch.handle import Range, resolve_range, swap
from sortwatch.observe.observers import Observer

__all__ = ["quicksort", "partition", "sort"]


def quicksort(
    seq: Any,
    observer: Optional[Observer] = None,
    *,
    first: int = 0,
    last: Optional[int] = None,
) -> None:
    """Sort seq[first:last] in place into nondecreasing order."""
    span = resolve_range(seq, first, last)
    _quicksort(seq, span.first, span.last, resolve_observer(observer), span)


def partition(seq: Any, first: int, last: int, observer: Observer, report: Range) -> int:
    """
    Partition seq[first:last] around its last element and return the pivot's
    final position. Requires last - first >= 1.

    Notifies `observer` with `report` after each swap below the boundary and
    once after placing the pivot.
    """
    pivot = seq[last - 1]
    boundary = first
    for j in range(first, last - 1):
        if seq[j] < pivot:
            swap(seq, boundary, j)
            boundary += 1
            observer(seq, report)

    swap(seq, boundary, last - 1)
    observer(seq, report)
    return boundary


def _quicksort(seq: Any, first: int, last: int, observer: Observer, report: Range) -> None:
    while last - first > 1:
        boundary = partition(seq, first, last, observer, report)
        if boundary - first < last - (boundary + 1):
            _quicksort(seq, first, boundary, observer, report)
            first = boundary + 1
        else:
            _quicksort(seq, boundary + 1, last, observer, report)
            last = boundary


def sort(a: List[Any], *, config: Optional[Dict[str, Any]] = None) -> List[Any]:
    """Runner adapter: return a sorted copy of `a` (input is not mutated)."""
    check_config(config)
    out = list(a)
    quicksort(out)
    return out
