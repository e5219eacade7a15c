"""
Insertion sort.

Keeps seq[first:index] sorted. The value at `index` is held aside while every
larger neighbour to its left is shifted one slot right (a single overwrite,
not a swap); the held value is then written into the hole.

Notifies after every shift and once more after the hole is filled, so sorted
input issues exactly length - 1 notifications.

While a value is held aside the sequence briefly contains a duplicate. If the
observer raises during the shift phase, the held value is written back into
the current hole before the exception propagates, so the sequence is always
left a permutation of its input.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sortwatch.algorithms._common import check_config, resolve_observer
from sortwatch.handle import resolve_range
from sortwatch.observe.observers import Observer

__all__ = ["insertion_sort", "sort"]


def insertion_sort(
    seq: Any,
    observer: Optional[Observer] = None,
    *,
    first: int = 0,
    last: Optional[int] = None,
) -> None:
    """Sort seq[first:last] in place into nondecreasing order."""
    span = resolve_range(seq, first, last)
    notify = resolve_observer(observer)

    for index in range(span.first + 1, span.last):
        value = seq[index]
        pos = index
        try:
            while pos > span.first and seq[pos - 1] > value:
                seq[pos] = seq[pos - 1]
                pos -= 1
                notify(seq, span)
        finally:
            seq[pos] = value
        notify(seq, span)


def sort(a: List[Any], *, config: Optional[Dict[str, Any]] = None) -> List[Any]:
    """Runner adapter: return a sorted copy of `a` (input is not mutated)."""
    check_config(config)
    out = list(a)
    insertion_sort(out)
    return out
