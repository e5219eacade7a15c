"""
Selection sort.

Grows a sorted prefix one position at a time: scan the unsorted suffix for its
minimum, then swap that minimum into place (at most one swap per position).

Two notification points:
- every time the scan finds a new, strictly smaller candidate minimum
  (nothing has moved yet; this shows the current best guess), and
- after the placing swap. When the minimum is already in place the swap and
  its notification are both skipped.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sortwatch.algorithms._common import check_config, resolve_observer
from sortwatch.handle import resolve_range, swap
from sortwatch.observe.observers import Observer

__all__ = ["selection_sort", "sort"]


def selection_sort(
    seq: Any,
    observer: Optional[Observer] = None,
    *,
    first: int = 0,
    last: Optional[int] = None,
) -> None:
    """Sort seq[first:last] in place into nondecreasing order."""
    span = resolve_range(seq, first, last)
    notify = resolve_observer(observer)

    for i in range(span.first, span.last - 1):
        smallest = i
        for j in range(i + 1, span.last):
            if seq[j] < seq[smallest]:
                smallest = j
                notify(seq, span)

        if smallest != i:
            swap(seq, i, smallest)
            notify(seq, span)


def sort(a: List[Any], *, config: Optional[Dict[str, Any]] = None) -> List[Any]:
    """Runner adapter: return a sorted copy of `a` (input is not mutated)."""
    check_config(config)
    out = list(a)
    selection_sort(out)
    return out
