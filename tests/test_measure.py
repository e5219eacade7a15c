"""Tests for the single-call benchmark and the repeated-sample harness."""

from __future__ import annotations

import gc
import time

import pytest

from sortwatch.algorithms import bubble_sort, insertion_sort
from sortwatch.bench.measure import benchmark, time_sort_call
from sortwatch.observe import CountingObserver


# ------------------------- benchmark ------------------------- #

def test_benchmark_covers_a_known_sleep() -> None:
    duration_s = 0.02
    elapsed = benchmark(lambda: time.sleep(duration_s))
    assert isinstance(elapsed, int)
    assert elapsed >= int(duration_s * 1e9)
    assert elapsed < 60 * 10**9


def test_benchmark_calls_operation_exactly_once() -> None:
    calls = []
    benchmark(lambda: calls.append(1))
    assert calls == [1]


def test_benchmark_propagates_failure_without_retry() -> None:
    calls = []

    def _explode() -> None:
        calls.append(1)
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        benchmark(_explode)
    assert calls == [1]


def test_benchmark_times_an_in_place_sort() -> None:
    data = list(range(200, 0, -1))
    counter = CountingObserver()
    elapsed = benchmark(lambda: bubble_sort(data, counter))
    assert elapsed > 0
    assert data == list(range(1, 201))
    assert counter.count == 200 * 199 // 2


def test_benchmark_writes_nothing(capsys) -> None:
    benchmark(lambda: None)
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


# ------------------------- time_sort_call ------------------------- #

def _call(**overrides):
    kwargs = dict(
        algo_name="insertion_sort",
        algo_fn=insertion_sort,
        a=[5, 4, 3, 2, 1],
        repeats=3,
        warmup=True,
        disable_gc=True,
        timeout_seconds=30.0,
    )
    kwargs.update(overrides)
    return time_sort_call(**kwargs)


def test_time_sort_call_collects_samples_without_mutating_input() -> None:
    a = [5, 4, 3, 2, 1]
    res = _call(a=a)
    assert res["status"] == "ok"
    assert res["algo"] == "insertion_sort"
    assert len(res["samples_ns"]) == 3
    assert res["notifications"] is None
    assert a == [5, 4, 3, 2, 1]


def test_time_sort_call_counts_notifications_per_sample() -> None:
    res = _call(count_notifications=True)
    # 10 inversions (shifts) + 4 hole writes
    assert res["notifications"] == [14, 14, 14]


def test_time_sort_call_rejects_counting_with_explicit_observer() -> None:
    with pytest.raises(ValueError):
        _call(count_notifications=True, observer=CountingObserver())


def test_time_sort_call_passes_explicit_observer() -> None:
    counter = CountingObserver()
    _call(observer=counter, warmup=False, repeats=2)
    assert counter.count == 28


def test_time_sort_call_reports_timeout() -> None:
    res = _call(algo_fn=bubble_sort, a=list(range(300, 0, -1)), timeout_seconds=1e-9, warmup=False)
    assert res["status"] == "timeout"
    assert res["timed_out_on_repeat"] == 0
    assert len(res["samples_ns"]) == 1


def test_time_sort_call_reports_errors() -> None:
    def _broken(seq, observer=None):
        raise RuntimeError("nope")

    res = _call(algo_fn=_broken, warmup=False)
    assert res["status"] == "error"
    assert "nope" in res["error"]
    assert res["samples_ns"] == []

    res = _call(algo_fn=_broken, warmup=True)
    assert res["status"] == "error"
    assert res["error"].startswith("warmup failed")


def test_time_sort_call_restores_gc() -> None:
    assert gc.isenabled()
    _call(disable_gc=True)
    assert gc.isenabled()


@pytest.mark.parametrize("overrides", [{"repeats": -1}, {"timeout_seconds": 0}])
def test_time_sort_call_validates_arguments(overrides) -> None:
    with pytest.raises(ValueError):
        _call(**overrides)
