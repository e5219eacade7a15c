"""
Timing harness for sorting algorithms.

`benchmark` is the primitive: it runs one zero-argument operation exactly once
between two reads of a monotonic high-resolution clock and returns the
elapsed nanoseconds. It does not retry, average, warm up, catch, log or print;
an exception from the operation propagates and no result is produced.

`time_sort_call` builds repeated samples on top of it for the experiment
runner. All non-essential work (copying, GC, warmup, observer construction)
happens outside the timed block to keep measurements clean.

Public API (stable):
    benchmark(operation) -> int
    time_sort_call(... ) -> dict

Returned dict schema (time_sort_call):
    {
        "algo": str,
        "repeats": int,
        "samples_ns": list[int],            # elapsed ns for each successful sample
        "notifications": list[int] | None,  # per-sample notification counts (counting runs only)
        "status": "ok" | "timeout" | "error",
        "error": str | None,                # populated if status == "error"
        "timed_out_on_repeat": int | None,  # 0-based repeat index if timeout occurred
    }
"""

from __future__ import annotations

import gc
import time
from typing import Any, Callable, Dict, List, Optional

from sortwatch.observe.observers import CountingObserver, Observer

__all__ = ["benchmark", "time_sort_call"]


def benchmark(operation: Callable[[], Any]) -> int:
    """
    Return the wall-clock nanoseconds taken by one call to `operation()`.

    Example
    -------
    >>> data = [3, 1, 2]
    >>> elapsed_ns = benchmark(lambda: bubble_sort(data))
    """
    start = time.perf_counter_ns()
    operation()
    stop = time.perf_counter_ns()
    return stop - start


def time_sort_call(
    *,
    algo_name: str,
    algo_fn: Callable[..., None],
    a: List[Any],
    repeats: int,
    warmup: bool,
    disable_gc: bool,
    timeout_seconds: float,
    count_notifications: bool = False,
    observer: Optional[Observer] = None,
) -> Dict[str, Any]:
    """
    Time repeated in-place calls `algo_fn(copy_of_a, observer)`.

    Parameters
    ----------
    algo_name : str
        Logical name of the algorithm (for logs/records).
    algo_fn : Callable
        In-place algorithm with the signature fn(seq, observer=None).
    a : list
        Input array. Each sample sorts a fresh copy; `a` itself is never mutated.
    repeats : int
        Number of timed samples to collect (best practice: >=5).
    warmup : bool
        If True, make one untimed call before timing to prime caches.
    disable_gc : bool
        If True, collect and disable Python GC during the timed loop; restore afterward.
    timeout_seconds : float
        Per-sample timeout threshold. If a single call exceeds this threshold,
        we mark status="timeout" and stop further sampling.
    count_notifications : bool
        If True, each sample runs with a fresh CountingObserver and its count is
        recorded in "notifications". Mutually exclusive with `observer`.
    observer : Observer | None
        Observer passed to every timed call (e.g. a renderer). None means the
        algorithm's no-op default.

    Returns
    -------
    dict
        See module docstring for exact schema.
    """
    if repeats < 0:
        raise ValueError("repeats must be nonnegative")
    if timeout_seconds <= 0:
        raise ValueError("timeout_seconds must be positive")
    if count_notifications and observer is not None:
        raise ValueError("count_notifications and observer are mutually exclusive")

    result: Dict[str, Any] = {
        "algo": algo_name,
        "repeats": repeats,
        "samples_ns": [],  # type: List[int]
        "notifications": [] if count_notifications else None,
        "status": "ok",
        "error": None,
        "timed_out_on_repeat": None,
    }

    # ---- Warmup (outside GC disable & outside timed block) ----
    if warmup and repeats > 0:
        try:
            algo_fn(list(a))
        except Exception as e:
            result["status"] = "error"
            result["error"] = f"warmup failed: {e!r}"
            return result

    # ---- GC control ----
    prev_gc_enabled = gc.isenabled()
    try:
        if disable_gc:
            gc.collect()
            gc.disable()

        # ---- Timed loop ----
        threshold_ns = int(timeout_seconds * 1e9)
        for r in range(repeats):
            # Prepare input and observer OUTSIDE the timed block
            arg = list(a)
            obs = CountingObserver() if count_notifications else observer

            try:
                elapsed = benchmark(lambda: algo_fn(arg, obs))
            except Exception as e:
                result["status"] = "error"
                result["error"] = f"run failed at repeat {r}: {e!r}"
                break

            result["samples_ns"].append(int(elapsed))
            if count_notifications:
                result["notifications"].append(obs.count)

            # Per-sample timeout check
            if elapsed > threshold_ns:
                result["status"] = "timeout"
                result["timed_out_on_repeat"] = r
                break

    finally:
        # Restore original GC state
        if disable_gc and prev_gc_enabled:
            gc.enable()
        # If GC was previously disabled, leave it disabled (respect caller's global state).

    return result
