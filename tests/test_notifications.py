"""
Notification-contract tests: where, how often and with which range each
algorithm calls its observer.
"""

from __future__ import annotations

from typing import Any, List

import pytest
from hypothesis import given, settings, strategies as st

import sortwatch.algorithms.quick as quick_module
from sortwatch.algorithms import (
    ALGORITHMS,
    bubble_sort,
    insertion_sort,
    partition,
    quicksort,
    selection_sort,
    shaker_sort,
)
from sortwatch.handle import Range
from sortwatch.observe import CountingObserver, RecordingObserver
from sortwatch.validate import is_permutation

ALGO_NAMES = sorted(ALGORITHMS)


def _inversions(a: List[Any]) -> int:
    return sum(1 for i in range(len(a)) for j in range(i + 1, len(a)) if a[i] > a[j])


# ------------------------- bubble / shaker ------------------------- #

def test_bubble_sort_is_silent_on_sorted_input() -> None:
    data = list(range(1, 51))
    counter = CountingObserver()
    bubble_sort(data, counter)
    assert counter.count == 0
    assert data == list(range(1, 51))


def test_bubble_sort_notifies_after_every_swap() -> None:
    data = [3, 1, 2]
    recorder = RecordingObserver()
    bubble_sort(data, recorder)
    assert recorder.states == [(1, 3, 2), (1, 2, 3)]
    assert set(recorder.spans) == {Range(0, 3)}


@pytest.mark.parametrize("sort_fn", [bubble_sort, shaker_sort])
@settings(deadline=None, max_examples=50)
@given(a=st.lists(st.integers(min_value=-50, max_value=50), max_size=60))
def test_adjacent_swap_sorts_notify_once_per_inversion(sort_fn, a: List[int]) -> None:
    counter = CountingObserver()
    sort_fn(list(a), counter)
    assert counter.count == _inversions(a)


def test_shaker_sort_notifies_in_both_directions() -> None:
    # Forward pass carries 5 to the end; backward pass carries 1 to the front.
    data = [2, 5, 3, 4, 1]
    recorder = RecordingObserver()
    shaker_sort(data, recorder)
    assert recorder.states == [
        (2, 3, 5, 4, 1),
        (2, 3, 4, 5, 1),
        (2, 3, 4, 1, 5),
        (2, 3, 1, 4, 5),
        (2, 1, 3, 4, 5),
        (1, 2, 3, 4, 5),
    ]


def test_shaker_sort_is_silent_on_sorted_input() -> None:
    counter = CountingObserver()
    shaker_sort(list(range(40)), counter)
    assert counter.count == 0


# ------------------------- selection ------------------------- #

def test_selection_sort_literal_trace() -> None:
    data = [5, 3, 4, 1, 2]
    recorder = RecordingObserver()
    selection_sort(data, recorder)

    assert data == [1, 2, 3, 4, 5]
    assert recorder.states == [
        (5, 3, 4, 1, 2),  # candidate 3
        (5, 3, 4, 1, 2),  # candidate 1
        (1, 3, 4, 5, 2),  # place 1
        (1, 3, 4, 5, 2),  # candidate 2
        (1, 2, 4, 5, 3),  # place 2
        (1, 2, 4, 5, 3),  # candidate 3
        (1, 2, 3, 5, 4),  # place 3
        (1, 2, 3, 5, 4),  # candidate 4
        (1, 2, 3, 4, 5),  # place 4
    ]

    # Placing swaps are the notifications where the state actually changed
    previous = (5, 3, 4, 1, 2)
    placing = 0
    for state in recorder.states:
        if state != previous:
            placing += 1
        previous = state
    assert placing == 4


def test_selection_sort_skips_swap_when_minimum_in_place() -> None:
    data = [1, 3, 2]
    recorder = RecordingObserver()
    selection_sort(data, recorder)
    # position 0: no new candidate, no swap; position 1: candidate 2 then swap
    assert recorder.states == [(1, 3, 2), (1, 2, 3)]


def test_selection_sort_ties_are_not_new_candidates() -> None:
    counter = CountingObserver()
    selection_sort([4, 4, 4, 4], counter)
    assert counter.count == 0


# ------------------------- insertion ------------------------- #

def test_insertion_sort_notifies_each_shift_and_each_hole_write() -> None:
    data = [3, 2, 1]
    recorder = RecordingObserver()
    insertion_sort(data, recorder)
    assert recorder.states == [
        (3, 3, 1),  # shift 3 right, 2 held aside
        (2, 3, 1),  # write 2 into the hole
        (2, 3, 3),  # shift 3 right, 1 held aside
        (2, 2, 3),  # shift 2 right
        (1, 2, 3),  # write 1 into the hole
    ]


@settings(deadline=None, max_examples=50)
@given(a=st.lists(st.integers(min_value=-50, max_value=50), max_size=60))
def test_insertion_sort_notification_count(a: List[int]) -> None:
    counter = CountingObserver()
    insertion_sort(list(a), counter)
    assert counter.count == _inversions(a) + max(len(a) - 1, 0)


def test_insertion_sort_on_sorted_input_writes_each_hole_once() -> None:
    counter = CountingObserver()
    insertion_sort(list(range(10)), counter)
    assert counter.count == 9


# ------------------------- quicksort ------------------------- #

def test_partition_two_elements() -> None:
    data = [2, 1]
    recorder = RecordingObserver()
    boundary = partition(data, 0, 2, recorder, Range(0, 2))
    assert boundary == 0
    assert data == [1, 2]
    # no element is below the pivot; only the pivot-placing swap notifies
    assert recorder.states == [(1, 2)]


def test_quicksort_two_elements_partitions_once(monkeypatch) -> None:
    calls = []
    real_partition = quick_module.partition

    def _spy(seq, first, last, observer, report):
        calls.append((first, last))
        return real_partition(seq, first, last, observer, report)

    monkeypatch.setattr(quick_module, "partition", _spy)

    data = [2, 1]
    counter = CountingObserver()
    quicksort(data, counter)

    assert data == [1, 2]
    assert calls == [(0, 2)]  # sub-ranges [0, 0) and [1, 2) return immediately
    assert counter.count == 1


def test_partition_moves_smaller_elements_below_boundary() -> None:
    data = [4, 7, 1, 9, 3, 5]
    recorder = RecordingObserver()
    boundary = partition(data, 0, 6, recorder, Range(0, 6))
    assert boundary == 3
    assert data[boundary] == 5
    assert all(v < 5 for v in data[:boundary])
    assert all(v >= 5 for v in data[boundary + 1:])
    # three elements below the pivot plus the pivot placement
    assert len(recorder.frames) == 4


@settings(deadline=None, max_examples=60)
@given(a=st.lists(st.integers(min_value=-100, max_value=100), min_size=2, max_size=80))
def test_quicksort_always_reports_top_level_range(a: List[int]) -> None:
    recorder = RecordingObserver()
    data = list(a)
    quicksort(data, recorder)
    assert recorder.frames, "partitioning a range of length >= 2 always places a pivot"
    assert all(span == Range(0, len(a)) for span in recorder.spans)


def test_quicksort_sub_range_reports_the_call_range() -> None:
    data = [0, 9, 3, 7, 1, 8, 0]
    recorder = RecordingObserver()
    quicksort(data, recorder, first=1, last=6)
    assert data == [0, 1, 3, 7, 8, 9, 0]
    assert set(recorder.spans) == {Range(1, 6)}


# ------------------------- shared contract ------------------------- #

@pytest.mark.parametrize("name", ALGO_NAMES)
def test_sorted_input_final_state_is_unchanged(name: str) -> None:
    data = [1, 2, 2, 3, 5, 8]
    ALGORITHMS[name](data, CountingObserver())
    assert data == [1, 2, 2, 3, 5, 8]


class _Boom(Exception):
    pass


def _failing_after(limit: int):
    calls = 0

    def _observer(seq, span):
        nonlocal calls
        calls += 1
        if calls >= limit:
            raise _Boom(calls)

    return _observer


@pytest.mark.parametrize("name", ALGO_NAMES)
@pytest.mark.parametrize("limit", [1, 2, 3, 7])
def test_failing_observer_aborts_and_leaves_a_permutation(name: str, limit: int) -> None:
    original = [6, 2, 9, 1, 1, 8, 3, 7]
    data = list(original)
    with pytest.raises(_Boom):
        ALGORITHMS[name](data, _failing_after(limit))
    assert is_permutation(original, data)


@pytest.mark.parametrize("name", ALGO_NAMES)
def test_observer_return_value_is_ignored(name: str) -> None:
    data = [3, 1, 2]
    ALGORITHMS[name](data, lambda seq, span: "stop")
    assert data == [1, 2, 3]


@pytest.mark.parametrize("name", ALGO_NAMES)
def test_observer_sees_consistent_length(name: str) -> None:
    seen = []

    def _observer(seq, span):
        seen.append(len(seq))

    data = [5, 1, 4, 2, 3]
    ALGORITHMS[name](data, _observer)
    assert seen and set(seen) == {5}
