"""
Sorting algorithms public API.

Every algorithm has the same signature and contract:

    <name>(seq, observer=None, *, first=0, last=None) -> None

It sorts seq[first:last] in place into nondecreasing order, calls
`observer(seq, span)` at its documented mutation points, and returns only when
the range is sorted. Ranges of length <= 1 are a no-op; first > last raises
ValueError.

Each algorithm module also defines the runner adapter
`sort(a, *, config=None) -> list`, which sorts a copy.

Registry:
    ALGORITHMS        name -> in-place function
    RUNNER_SORTS      name -> runner adapter
    get_algorithm(name)
"""

from typing import Any, Callable, Dict, List

from . import bubble, insertion, quick, selection, shaker
from .bubble import bubble_sort
from .insertion import insertion_sort
from .quick import partition, quicksort
from .selection import selection_sort
from .shaker import shaker_sort

ALGORITHMS: Dict[str, Callable[..., None]] = {
    "bubble_sort": bubble_sort,
    "shaker_sort": shaker_sort,
    "selection_sort": selection_sort,
    "insertion_sort": insertion_sort,
    "quicksort": quicksort,
}

RUNNER_SORTS: Dict[str, Callable[..., List[Any]]] = {
    "bubble_sort": bubble.sort,
    "shaker_sort": shaker.sort,
    "selection_sort": selection.sort,
    "insertion_sort": insertion.sort,
    "quicksort": quick.sort,
}

__all__ = [
    "ALGORITHMS",
    "RUNNER_SORTS",
    "get_algorithm",
    "bubble_sort",
    "shaker_sort",
    "selection_sort",
    "insertion_sort",
    "quicksort",
    "partition",
]


def get_algorithm(name: str) -> Callable[..., None]:
    """Look up an in-place algorithm by registry name."""
    try:
        return ALGORITHMS[name]
    except KeyError:
        raise ValueError(
            f"Unknown algorithm: {name!r}. Supported: {sorted(ALGORITHMS)}"
        ) from None
