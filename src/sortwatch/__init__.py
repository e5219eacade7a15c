"""
sortwatch: observable in-place sorting algorithms and a benchmark harness.

    from sortwatch import bubble_sort, benchmark
    from sortwatch.observe import CountingObserver

    data = [5, 3, 4, 1, 2]
    counter = CountingObserver()
    elapsed_ns = benchmark(lambda: bubble_sort(data, counter))
"""

from sortwatch.algorithms import (
    ALGORITHMS,
    bubble_sort,
    get_algorithm,
    insertion_sort,
    quicksort,
    selection_sort,
    shaker_sort,
)
from sortwatch.bench.measure import benchmark
from sortwatch.handle import Range, resolve_range

__version__ = "0.1.0"

__all__ = [
    "ALGORITHMS",
    "get_algorithm",
    "bubble_sort",
    "shaker_sort",
    "selection_sort",
    "insertion_sort",
    "quicksort",
    "benchmark",
    "Range",
    "resolve_range",
]
